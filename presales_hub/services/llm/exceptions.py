"""Custom exceptions for the chat-completion service."""


class LLMError(Exception):
    """Base exception for chat-completion errors."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class ConfigurationError(LLMError):
    """Provider API key is not configured."""

    def __init__(self, key_name: str, provider: str):
        super().__init__(f"Missing {key_name} for {provider} requests.")
        self.key_name = key_name
        self.provider = provider


class ProviderRequestError(LLMError):
    """Provider returned a non-success status or could not be reached."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str = "",
    ):
        super().__init__(message, status_code=status_code)
        self.body = body


class EmptyResponseError(LLMError):
    """Completion carried no message content."""

    pass


class ParseError(LLMError):
    """Provider payload or model output could not be parsed."""

    pass
