"""Async chat-completion client over the provider registry."""

from __future__ import annotations

import logging
from typing import Any, Mapping, Sequence

import httpx

from presales_hub.config import Settings, get_settings
from presales_hub.llm_providers import LLMProvider

from .config import LLMClientConfig
from .exceptions import ConfigurationError, ParseError, ProviderRequestError
from .models import ChatCompletionResponse, ChatMessage
from .providers import ProviderConfig, build_provider_registry, get_provider

logger = logging.getLogger(__name__)


class CompletionClient:
    """Single round-trip chat completions against OpenAI-compatible vendors."""

    def __init__(
        self,
        settings: Settings | None = None,
        config: LLMClientConfig | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.settings = settings or get_settings()
        self.config = config or LLMClientConfig.from_settings(self.settings)
        self.providers = build_provider_registry(self.config)
        self._client = http_client
        self._owns_client = http_client is None
        logger.info("Initialized CompletionClient")

    async def __aenter__(self) -> CompletionClient:
        if self._client is None:
            if self.config.timeout_seconds is not None:
                self._client = httpx.AsyncClient(timeout=self.config.timeout_seconds)
            else:
                self._client = httpx.AsyncClient()
            self._owns_client = True
        return self

    async def __aexit__(
        self,
        exc_type: type | None,
        exc_val: Exception | None,
        exc_tb: Any,
    ) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.info("Closed CompletionClient")

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            raise RuntimeError("CompletionClient must be used as async context manager")
        return self._client

    def get_provider(self, provider: LLMProvider | str | None = None) -> ProviderConfig:
        return get_provider(self.providers, provider or self.config.default_provider)

    def _resolve_api_key(self, provider: ProviderConfig) -> str:
        api_key = self.settings.get_api_key(provider.api_key_env_name)
        if not api_key:
            raise ConfigurationError(provider.api_key_env_name, provider.name.value)
        return api_key

    async def create_chat_completion(
        self,
        messages: Sequence[ChatMessage | Mapping[str, Any]],
        provider: LLMProvider | str | None = None,
        model: str | None = None,
        temperature: float | None = None,
    ) -> ChatCompletionResponse:
        """Send messages to the selected provider and return a normalized completion.

        Args:
            messages: Ordered role-tagged messages, forwarded verbatim
            provider: Provider identifier; unknown values use the default provider
            model: Overrides the provider's default model
            temperature: Sampling temperature, 0.2 when omitted

        Raises:
            ConfigurationError: API key for the provider is not set
            ProviderRequestError: Non-2xx status or transport failure
            ParseError: Response body is not valid JSON
        """
        selected = self.get_provider(provider)
        api_key = self._resolve_api_key(selected)

        chat_messages = [ChatMessage.model_validate(m) for m in messages]
        request = selected.build_request(
            api_key=api_key,
            messages=chat_messages,
            model=model or selected.default_model,
            temperature=self.config.temperature if temperature is None else temperature,
        )

        logger.info(
            f"Requesting chat completion from {selected.name} "
            f"(model={request.json_body['model']}, messages={len(chat_messages)})"
        )

        try:
            response = await self.client.request(
                method=request.method,
                url=request.url,
                headers=request.headers,
                json=request.json_body,
            )
        except httpx.RequestError as e:
            logger.error(f"Network error calling {selected.name}: {e}")
            raise ProviderRequestError(f"{selected.name} request failed: {e}") from e

        if not response.is_success:
            raise ProviderRequestError(
                f"{selected.name} request failed ({response.status_code}): {response.text}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ParseError(f"{selected.name} returned a non-JSON body") from e

        return selected.parse_response(payload)


def create_completion_client(
    settings: Settings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> CompletionClient:
    """Factory function to create CompletionClient from settings."""
    return CompletionClient(settings=settings, http_client=http_client)


async def create_chat_completion(
    messages: Sequence[ChatMessage | Mapping[str, Any]],
    provider: LLMProvider | str | None = None,
    model: str | None = None,
    temperature: float | None = None,
    settings: Settings | None = None,
) -> ChatCompletionResponse:
    """One-shot completion using a short-lived client."""
    async with create_completion_client(settings) as client:
        return await client.create_chat_completion(
            messages, provider=provider, model=model, temperature=temperature
        )
