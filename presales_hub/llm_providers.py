"""LLM provider and model enums for provider selection.

Every chat-completion call names one of these providers; the registry in
``presales_hub.services.llm.providers`` maps each value to its request
builder and response parser.
"""

import logging
from enum import StrEnum

logger = logging.getLogger(__name__)


class LLMProvider(StrEnum):
    """Supported LLM providers."""

    OPENAI = "openai"
    GEMINI = "gemini"


class OpenAIModel(StrEnum):
    """OpenAI models available via API."""

    GPT_4O_MINI = "gpt-4o-mini"
    GPT_4O = "gpt-4o"
    GPT_4_1_MINI = "gpt-4.1-mini"


class GeminiModel(StrEnum):
    """Gemini models available via the OpenAI-compatible endpoint."""

    GEMINI_2_5_FLASH = "gemini-2.5-flash"
    GEMINI_2_5_PRO = "gemini-2.5-pro"


DEFAULT_PROVIDER = LLMProvider.OPENAI


def resolve_provider(value: LLMProvider | str | None) -> LLMProvider:
    """Map a provider identifier to an LLMProvider.

    Absent and unrecognized values resolve to the default provider instead
    of raising.
    """
    if value is None or value == "":
        return DEFAULT_PROVIDER
    if isinstance(value, LLMProvider):
        return value
    try:
        return LLMProvider(str(value).strip().lower())
    except ValueError:
        logger.warning(f"Unknown LLM provider '{value}', using {DEFAULT_PROVIDER}")
        return DEFAULT_PROVIDER
