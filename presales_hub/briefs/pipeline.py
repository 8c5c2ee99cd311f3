"""Generate-then-persist brief pipeline with independently reported outcomes."""

import logging
from typing import Protocol

from pydantic import BaseModel

from presales_hub.briefs.agent import generate_brief_with_status
from presales_hub.briefs.models import BriefRequest, GeneratedBrief
from presales_hub.llm_providers import LLMProvider
from presales_hub.services.llm import CompletionClient

logger = logging.getLogger(__name__)


class BriefStore(Protocol):
    async def insert(self, brief_input: BriefRequest | None, brief: GeneratedBrief) -> str: ...


class BriefPipelineResult(BaseModel):
    """Outcome of generation and persistence, reported separately."""

    brief: GeneratedBrief
    used_fallback: bool = False
    generation_error: str | None = None
    saved: bool = False
    brief_id: str | None = None
    persistence_error: str | None = None

    @property
    def warnings(self) -> list[str]:
        warnings = []
        if self.used_fallback:
            warnings.append("AI generation unavailable; showing standard brief content")
        if self.persistence_error:
            warnings.append("Brief generated but not recorded")
        return warnings


async def run_brief_pipeline(
    request: BriefRequest,
    briefs: BriefStore | None = None,
    provider: LLMProvider | str | None = None,
    model: str | None = None,
    client: CompletionClient | None = None,
) -> BriefPipelineResult:
    """Generate a brief, then save it when a store is given.

    A save failure is recorded on the result and never discards the brief.
    """
    generation = await generate_brief_with_status(
        request, provider=provider, model=model, client=client
    )
    result = BriefPipelineResult(
        brief=generation.brief,
        used_fallback=generation.used_fallback,
        generation_error=generation.error,
    )

    if briefs is None:
        return result

    try:
        result.brief_id = await briefs.insert(request, generation.brief)
        result.saved = True
    except Exception as e:
        logger.error(f"Failed to persist brief: {e}")
        result.persistence_error = str(e)

    return result
