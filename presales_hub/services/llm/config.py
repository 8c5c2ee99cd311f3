"""Configuration for the chat-completion client."""

from pydantic import BaseModel

from presales_hub.config import Settings
from presales_hub.llm_providers import GeminiModel, LLMProvider, OpenAIModel

DEFAULT_TEMPERATURE = 0.2


class LLMClientConfig(BaseModel):
    """Configuration for CompletionClient."""

    default_provider: str = LLMProvider.OPENAI.value
    temperature: float = DEFAULT_TEMPERATURE
    timeout_seconds: float | None = None

    openai_base_url: str = "https://api.openai.com/v1"
    openai_model: str = OpenAIModel.GPT_4O_MINI.value
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai"
    gemini_model: str = GeminiModel.GEMINI_2_5_FLASH.value

    @classmethod
    def from_settings(cls, settings: Settings) -> "LLMClientConfig":
        return cls(
            default_provider=settings.llm.default_provider,
            temperature=settings.llm.temperature,
            timeout_seconds=settings.llm.timeout_seconds,
            openai_base_url=settings.llm.openai_base_url,
            openai_model=settings.openai_model,
            gemini_base_url=settings.llm.gemini_base_url,
            gemini_model=settings.gemini_model,
        )
