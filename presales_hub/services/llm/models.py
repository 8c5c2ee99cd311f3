"""Type-safe Pydantic models for chat-completion requests and responses."""

from typing import Any, Literal

from pydantic import BaseModel, Field

MessageRole = Literal["system", "user", "assistant"]


class ChatMessage(BaseModel):
    """Role-tagged message sent to the provider."""

    role: MessageRole
    content: str


class CompletionMessage(BaseModel):
    """Message inside a completion choice."""

    role: str = "assistant"
    content: str = ""


class CompletionChoice(BaseModel):
    """One completion choice."""

    message: CompletionMessage = Field(default_factory=CompletionMessage)


class ChatCompletionResponse(BaseModel):
    """Vendor-neutral completion response."""

    choices: list[CompletionChoice] = Field(default_factory=list)

    def first_content(self) -> str:
        """Content of the first choice, or empty string when there is none."""
        if not self.choices:
            return ""
        return self.choices[0].message.content


class ProviderRequest(BaseModel):
    """HTTP request descriptor built by a provider."""

    method: str = "POST"
    url: str
    headers: dict[str, str]
    json_body: dict[str, Any]
