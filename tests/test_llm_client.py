"""Tests for the completion client and provider registry."""

import asyncio

import httpx
import pytest

from conftest import RecordingTransport, completion_payload, json_transport, make_client, make_settings
from presales_hub.llm_providers import LLMProvider, resolve_provider
from presales_hub.services.llm import (
    ChatMessage,
    ConfigurationError,
    GeminiProvider,
    OpenAIProvider,
    ParseError,
    ProviderRequestError,
)

MESSAGES = [
    ChatMessage(role="system", content="You are terse."),
    ChatMessage(role="user", content="Say hi."),
    ChatMessage(role="assistant", content="Hi."),
    ChatMessage(role="user", content="Again."),
]


def _complete(client, **kwargs):
    async def run():
        async with client:
            return await client.create_chat_completion(MESSAGES, **kwargs)

    return asyncio.run(run())


def test_missing_api_key_raises_before_any_network_call() -> None:
    transport = json_transport(completion_payload("unused"))
    client = make_client(transport, make_settings(openai_api_key=""))

    with pytest.raises(ConfigurationError) as exc_info:
        _complete(client)

    assert transport.requests == []
    assert "OPENAI_API_KEY" in str(exc_info.value)
    assert "openai" in str(exc_info.value)
    assert exc_info.value.key_name == "OPENAI_API_KEY"


def test_missing_gemini_key_names_gemini() -> None:
    transport = json_transport(completion_payload("unused"))
    client = make_client(transport, make_settings(gemini_api_key=""))

    with pytest.raises(ConfigurationError) as exc_info:
        _complete(client, provider="gemini")

    assert transport.requests == []
    assert exc_info.value.key_name == "GEMINI_API_KEY"
    assert exc_info.value.provider == "gemini"


def test_openai_request_shape_and_defaults() -> None:
    transport = json_transport(completion_payload("hello"))
    client = make_client(transport)

    response = _complete(client)

    assert response.first_content() == "hello"
    assert len(transport.requests) == 1
    request = transport.requests[0]
    assert request.method == "POST"
    assert str(request.url) == "https://api.openai.com/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-test-openai"
    assert request.headers["Content-Type"] == "application/json"

    body = transport.body()
    assert body["model"] == "gpt-4o-mini"
    assert body["temperature"] == 0.2
    assert body["messages"] == [m.model_dump() for m in MESSAGES]


def test_gemini_uses_its_endpoint_key_and_default_model() -> None:
    transport = json_transport(completion_payload("hola"))
    client = make_client(transport)

    response = _complete(client, provider=LLMProvider.GEMINI)

    request = transport.requests[0]
    assert str(request.url) == (
        "https://generativelanguage.googleapis.com/v1beta/openai/chat/completions"
    )
    assert request.headers["Authorization"] == "Bearer gm-test-gemini"
    assert transport.body()["model"] == "gemini-2.5-flash"
    assert response.choices[0].message.content == "hola"


def test_model_and_temperature_overrides() -> None:
    transport = json_transport(completion_payload("ok"))
    client = make_client(transport)

    _complete(client, model="gpt-4o", temperature=0.7)

    body = transport.body()
    assert body["model"] == "gpt-4o"
    assert body["temperature"] == 0.7


def test_unrecognized_provider_falls_back_to_openai() -> None:
    transport = json_transport(completion_payload("ok"))
    client = make_client(transport)

    _complete(client, provider="anthropic")

    assert transport.requests[0].url.host == "api.openai.com"


def test_configured_default_model_is_used() -> None:
    transport = json_transport(completion_payload("ok"))
    client = make_client(transport, make_settings(openai_model="gpt-4.1-mini"))

    _complete(client)

    assert transport.body()["model"] == "gpt-4.1-mini"


def test_dict_messages_are_accepted() -> None:
    transport = json_transport(completion_payload("ok"))
    client = make_client(transport)

    async def run():
        async with client:
            return await client.create_chat_completion(
                [{"role": "system", "content": "s"}, {"role": "user", "content": "u"}]
            )

    asyncio.run(run())

    assert transport.body()["messages"] == [
        {"role": "system", "content": "s"},
        {"role": "user", "content": "u"},
    ]


def test_error_status_carries_code_and_body() -> None:
    error_body = '{"error": {"message": "Invalid value for temperature"}}'
    transport = RecordingTransport(lambda request: httpx.Response(400, text=error_body))
    client = make_client(transport)

    with pytest.raises(ProviderRequestError) as exc_info:
        _complete(client)

    assert exc_info.value.status_code == 400
    assert exc_info.value.body == error_body
    assert "400" in str(exc_info.value)


def test_transport_failure_becomes_provider_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(RecordingTransport(handler))

    with pytest.raises(ProviderRequestError) as exc_info:
        _complete(client)

    assert exc_info.value.status_code is None


def test_non_json_success_body_raises_parse_error() -> None:
    transport = RecordingTransport(lambda request: httpx.Response(200, text="<html>oops</html>"))
    client = make_client(transport)

    with pytest.raises(ParseError):
        _complete(client)


def test_client_requires_context_without_injected_transport() -> None:
    from presales_hub.services.llm import CompletionClient

    client = CompletionClient(settings=make_settings())
    with pytest.raises(RuntimeError):
        _ = client.client


def test_resolve_provider_values() -> None:
    assert resolve_provider(None) is LLMProvider.OPENAI
    assert resolve_provider("") is LLMProvider.OPENAI
    assert resolve_provider("GEMINI") is LLMProvider.GEMINI
    assert resolve_provider(LLMProvider.GEMINI) is LLMProvider.GEMINI
    assert resolve_provider("mistral") is LLMProvider.OPENAI


def test_openai_parse_response_normalizes_content_parts() -> None:
    provider = OpenAIProvider("https://api.openai.com/v1", "gpt-4o-mini")

    response = provider.parse_response(
        {
            "choices": [
                {"message": {"role": "assistant", "content": [{"type": "text", "text": "a"}, {"type": "text", "text": "b"}]}},
                {"message": {"role": "assistant", "content": None}},
            ]
        }
    )

    assert [c.message.content for c in response.choices] == ["ab", ""]


def test_parse_response_without_choices_is_empty() -> None:
    provider = OpenAIProvider("https://api.openai.com/v1", "gpt-4o-mini")

    assert provider.parse_response({"object": "chat.completion"}).choices == []
    with pytest.raises(ParseError):
        provider.parse_response(["not", "an", "object"])


def test_gemini_parse_response_accepts_native_candidates() -> None:
    provider = GeminiProvider(
        "https://generativelanguage.googleapis.com/v1beta/openai", "gemini-2.5-flash"
    )

    response = provider.parse_response(
        {"candidates": [{"content": {"role": "model", "parts": [{"text": '{"a": '}, {"text": "1}"}]}}]}
    )

    assert response.first_content() == '{"a": 1}'
    assert response.choices[0].message.role == "assistant"


def test_build_request_strips_trailing_slash() -> None:
    provider = OpenAIProvider("https://proxy.internal/v1/", "gpt-4o-mini")

    request = provider.build_request("key", MESSAGES[:2], "gpt-4o-mini", 0.2)

    assert request.url == "https://proxy.internal/v1/chat/completions"
    assert request.json_body == {
        "model": "gpt-4o-mini",
        "temperature": 0.2,
        "messages": [m.model_dump() for m in MESSAGES[:2]],
    }
