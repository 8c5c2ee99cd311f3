"""Shared test helpers."""

import json
from datetime import datetime, timezone
from typing import Any, Callable

import httpx
import pytest

from presales_hub.config import Settings
from presales_hub.services.llm import CompletionClient


def make_settings(**overrides: Any) -> Settings:
    values: dict[str, Any] = {
        "openai_api_key": "sk-test-openai",
        "gemini_api_key": "gm-test-gemini",
        "mongo_uri": "",
        "logfire_token": "",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def completion_payload(content: str) -> dict:
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


class RecordingTransport:
    """httpx transport that records requests and replays a canned response."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: list[httpx.Request] = []
        self._handler = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._handler(request)

    def body(self, index: int = 0) -> dict:
        return json.loads(self.requests[index].content)


def json_transport(payload: Any, status_code: int = 200) -> RecordingTransport:
    return RecordingTransport(lambda request: httpx.Response(status_code, json=payload))


def make_client(transport: RecordingTransport, settings: Settings | None = None) -> CompletionClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
    return CompletionClient(settings=settings or make_settings(), http_client=http_client)


class FakeBriefRepository:
    """In-memory stand-in for BriefRepository."""

    def __init__(
        self,
        recent_rows: list[dict] | None = None,
        history: list | None = None,
        fail: bool = False,
    ):
        self.inserted: list[tuple] = []
        self.recent_rows = recent_rows or []
        self.history = history or []
        self.fail = fail
        self.recent_calls: list[tuple] = []
        self.history_calls: list[dict] = []

    async def insert(self, brief_input, brief) -> str:
        if self.fail:
            raise RuntimeError("connection refused")
        self.inserted.append((brief_input, brief))
        return f"brief-{len(self.inserted)}"

    async def recent_question_counts(self, industry, client_role=None, limit=30):
        if self.fail:
            raise RuntimeError("connection refused")
        self.recent_calls.append((industry, client_role, limit))
        return self.recent_rows

    async def list_recent(self, industry=None, client_role=None, limit=None):
        if self.fail:
            raise RuntimeError("connection refused")
        self.history_calls.append(
            {"industry": industry, "client_role": client_role, "limit": limit}
        )
        return self.history


class FakeQuestionRepository:
    def __init__(self, docs: list[dict] | None = None):
        self.docs = docs or []
        self.calls: list[tuple] = []

    async def find(self, industry, client_role=None):
        self.calls.append((industry, client_role))
        return self.docs


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def now() -> datetime:
    return datetime(2026, 3, 14, 9, 30, tzinfo=timezone.utc)
