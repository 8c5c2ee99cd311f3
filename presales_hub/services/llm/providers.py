"""Provider registry: per-vendor request builders and response parsers."""

from abc import ABC, abstractmethod
from typing import Any, Sequence

from presales_hub.llm_providers import LLMProvider, resolve_provider

from .config import LLMClientConfig
from .exceptions import ParseError
from .models import (
    ChatCompletionResponse,
    ChatMessage,
    CompletionChoice,
    CompletionMessage,
    ProviderRequest,
)


class ProviderConfig(ABC):
    """How to call one vendor's chat-completion API."""

    name: LLMProvider
    api_key_env_name: str

    def __init__(self, base_url: str, default_model: str):
        self.base_url = base_url.rstrip("/")
        self.default_model = default_model

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/chat/completions"

    def build_request(
        self,
        api_key: str,
        messages: Sequence[ChatMessage],
        model: str,
        temperature: float,
    ) -> ProviderRequest:
        """Build a bearer-authenticated JSON POST to the vendor endpoint."""
        return ProviderRequest(
            url=self.endpoint,
            headers={
                "Content-Type": "application/json",
                "Authorization": f"Bearer {api_key}",
            },
            json_body={
                "model": model,
                "temperature": temperature,
                "messages": [message.model_dump() for message in messages],
            },
        )

    @abstractmethod
    def parse_response(self, payload: Any) -> ChatCompletionResponse:
        """Normalize a raw vendor payload into a ChatCompletionResponse."""


def _message_text(content: Any) -> str:
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        # content-part arrays: [{"type": "text", "text": "..."}]
        return "".join(
            part.get("text", "")
            for part in content
            if isinstance(part, dict) and isinstance(part.get("text"), str)
        )
    return ""


def _parse_openai_choices(payload: Any) -> ChatCompletionResponse:
    if not isinstance(payload, dict):
        raise ParseError(f"Expected JSON object from provider, got {type(payload).__name__}")

    choices = []
    for raw_choice in payload.get("choices") or []:
        if not isinstance(raw_choice, dict):
            continue
        message = raw_choice.get("message") or {}
        if not isinstance(message, dict):
            message = {}
        role = message.get("role")
        choices.append(
            CompletionChoice(
                message=CompletionMessage(
                    role=role if isinstance(role, str) else "assistant",
                    content=_message_text(message.get("content")),
                )
            )
        )
    return ChatCompletionResponse(choices=choices)


class OpenAIProvider(ProviderConfig):
    name = LLMProvider.OPENAI
    api_key_env_name = "OPENAI_API_KEY"

    def parse_response(self, payload: Any) -> ChatCompletionResponse:
        return _parse_openai_choices(payload)


class GeminiProvider(ProviderConfig):
    """Gemini through its OpenAI-compatible endpoint.

    The compatible endpoint answers with an OpenAI ``choices`` envelope. A
    native ``candidates`` envelope is also accepted so the parser keeps
    working if the base URL is pointed at a proxy that passes it through.
    """

    name = LLMProvider.GEMINI
    api_key_env_name = "GEMINI_API_KEY"

    def parse_response(self, payload: Any) -> ChatCompletionResponse:
        if isinstance(payload, dict) and "choices" not in payload and "candidates" in payload:
            return self._parse_candidates(payload["candidates"])
        return _parse_openai_choices(payload)

    @staticmethod
    def _parse_candidates(candidates: Any) -> ChatCompletionResponse:
        choices = []
        for candidate in candidates if isinstance(candidates, list) else []:
            content = candidate.get("content") if isinstance(candidate, dict) else None
            if not isinstance(content, dict):
                continue
            choices.append(
                CompletionChoice(
                    message=CompletionMessage(
                        role="assistant",
                        content=_message_text(content.get("parts")),
                    )
                )
            )
        return ChatCompletionResponse(choices=choices)


def build_provider_registry(config: LLMClientConfig) -> dict[LLMProvider, ProviderConfig]:
    """One provider instance per supported vendor."""
    return {
        LLMProvider.OPENAI: OpenAIProvider(config.openai_base_url, config.openai_model),
        LLMProvider.GEMINI: GeminiProvider(config.gemini_base_url, config.gemini_model),
    }


def get_provider(
    registry: dict[LLMProvider, ProviderConfig],
    provider: LLMProvider | str | None,
) -> ProviderConfig:
    """Select a provider; unknown identifiers fall back to the default entry."""
    return registry[resolve_provider(provider)]
