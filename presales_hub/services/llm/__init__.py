"""Chat-completion service: provider registry and completion client."""

from .client import CompletionClient, create_chat_completion, create_completion_client
from .config import DEFAULT_TEMPERATURE, LLMClientConfig
from .exceptions import (
    ConfigurationError,
    EmptyResponseError,
    LLMError,
    ParseError,
    ProviderRequestError,
)
from .models import (
    ChatCompletionResponse,
    ChatMessage,
    CompletionChoice,
    CompletionMessage,
    ProviderRequest,
)
from .providers import (
    GeminiProvider,
    OpenAIProvider,
    ProviderConfig,
    build_provider_registry,
    get_provider,
)

__all__ = [
    "CompletionClient",
    "create_chat_completion",
    "create_completion_client",
    "DEFAULT_TEMPERATURE",
    "LLMClientConfig",
    "LLMError",
    "ConfigurationError",
    "ProviderRequestError",
    "EmptyResponseError",
    "ParseError",
    "ChatMessage",
    "ChatCompletionResponse",
    "CompletionChoice",
    "CompletionMessage",
    "ProviderRequest",
    "ProviderConfig",
    "OpenAIProvider",
    "GeminiProvider",
    "build_provider_registry",
    "get_provider",
]
