"""
FastAPI dependency providers.

Repositories resolve their Motor collection lazily, so a missing MONGO_URI
surfaces when a handler touches the database rather than during injection.
"""

from typing import AsyncGenerator

from presales_hub.config import Settings, get_settings
from presales_hub.database.repositories import BriefRepository, QuestionSeedRepository
from presales_hub.services.llm import CompletionClient, create_completion_client


def get_app_settings() -> Settings:
    return get_settings()


def get_brief_repository() -> BriefRepository:
    return BriefRepository()


def get_question_repository() -> QuestionSeedRepository:
    return QuestionSeedRepository()


async def get_completion_client() -> AsyncGenerator[CompletionClient, None]:
    """Completion client scoped to one request."""
    async with create_completion_client() as client:
        yield client
