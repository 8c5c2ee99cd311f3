"""Brief Agent: LLM-backed executive brief generation with static fallback."""

import logging

from pydantic import BaseModel

from presales_hub.briefs.fallback import generate_brief_data
from presales_hub.briefs.models import BriefRequest, GeneratedBrief
from presales_hub.briefs.normalize import normalize_brief_payload, parse_brief_content
from presales_hub.briefs.prompts import BRIEF_AGENT_SYSTEM_PROMPT, build_brief_user_prompt
from presales_hub.llm_providers import LLMProvider
from presales_hub.services.llm import (
    ChatMessage,
    CompletionClient,
    EmptyResponseError,
    create_completion_client,
)

logger = logging.getLogger(__name__)

BRIEF_TEMPERATURE = 0.2


class BriefGenerationResult(BaseModel):
    """Generated brief plus whether the static fallback was used."""

    brief: GeneratedBrief
    used_fallback: bool = False
    error: str | None = None


def build_brief_messages(request: BriefRequest) -> list[ChatMessage]:
    return [
        ChatMessage(role="system", content=BRIEF_AGENT_SYSTEM_PROMPT),
        ChatMessage(role="user", content=build_brief_user_prompt(request)),
    ]


async def _request_brief(
    request: BriefRequest,
    client: CompletionClient,
    provider: LLMProvider | str | None,
    model: str | None,
) -> GeneratedBrief:
    completion = await client.create_chat_completion(
        build_brief_messages(request),
        provider=provider,
        model=model,
        temperature=BRIEF_TEMPERATURE,
    )

    content = completion.first_content()
    if not content:
        raise EmptyResponseError("Empty response from model")

    payload = parse_brief_content(content)
    return normalize_brief_payload(request, payload)


async def generate_brief_with_status(
    request: BriefRequest,
    provider: LLMProvider | str | None = None,
    model: str | None = None,
    client: CompletionClient | None = None,
) -> BriefGenerationResult:
    """Generate a brief, reporting whether the fallback copy was used."""
    try:
        if client is None:
            async with create_completion_client() as owned_client:
                brief = await _request_brief(request, owned_client, provider, model)
        else:
            brief = await _request_brief(request, client, provider, model)
    except Exception as e:
        logger.warning(f"AI brief generation failed, using fallback copy: {e}")
        return BriefGenerationResult(
            brief=generate_brief_data(request),
            used_fallback=True,
            error=str(e),
        )

    logger.info(
        f"Generated brief for {request.industry or 'unspecified industry'} "
        f"({len(brief.discovery_questions)} discovery questions)"
    )
    return BriefGenerationResult(brief=brief)


async def generate_executive_brief(
    request: BriefRequest,
    provider: LLMProvider | str | None = None,
    model: str | None = None,
    client: CompletionClient | None = None,
) -> GeneratedBrief:
    """Generate an executive brief. Never raises; falls back to static copy."""
    result = await generate_brief_with_status(
        request, provider=provider, model=model, client=client
    )
    return result.brief
