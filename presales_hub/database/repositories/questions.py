"""
QuestionSeedRepository

MongoDB reads for the pre-seeded discovery questions collection.

Seed documents carry industry, optional clientRole, and either
category + questions or categories: [{name, questions}].
"""

from typing import Any

from motor.motor_asyncio import AsyncIOMotorCollection

from presales_hub.config import get_settings
from presales_hub.database.connection import get_collection


class QuestionSeedRepository:
    """Seed discovery questions collection."""

    def __init__(
        self,
        collection: AsyncIOMotorCollection | None = None,
        collection_name: str | None = None,
    ):
        self._collection = collection
        self.collection_name = (
            collection_name or get_settings().mongo_collection_discovery_questions
        )

    @property
    def collection(self) -> AsyncIOMotorCollection:
        if self._collection is None:
            self._collection = get_collection(self.collection_name)
        return self._collection

    async def find(self, industry: str, client_role: str | None = None) -> list[dict[str, Any]]:
        query: dict[str, Any] = {"industry": industry}
        if client_role:
            query["clientRole"] = client_role
        return await self.collection.find(query).to_list(length=None)
