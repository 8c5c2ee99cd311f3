"""
BriefRepository

MongoDB operations for the saved briefs collection.

Documents: {input: BriefRequest | null, brief: GeneratedBrief, createdAt}
Briefs are insert-only.
"""

import logging
from datetime import datetime, timezone
from typing import Any

from motor.motor_asyncio import AsyncIOMotorCollection

from presales_hub.briefs.models import (
    BriefHistoryItem,
    BriefRecord,
    BriefRequest,
    CaseStudy,
    GeneratedBrief,
)
from presales_hub.briefs.normalize import coerce_string_list, coerce_text
from presales_hub.config import get_settings
from presales_hub.database.connection import get_collection

logger = logging.getLogger(__name__)

RECENT_QUESTION_LIMIT = 30


def build_recent_questions_pipeline(
    industry: str,
    client_role: str | None = None,
    limit: int = RECENT_QUESTION_LIMIT,
) -> list[dict[str, Any]]:
    """Aggregation counting how often each (question, role) pair was asked.

    Equal counts are ordered by question text.
    """
    match: dict[str, Any] = {"brief.industry": industry}
    if client_role:
        match["brief.clientRole"] = client_role

    return [
        {"$match": match},
        {"$sort": {"createdAt": -1}},
        {"$project": {"questions": "$brief.discoveryQuestions", "role": "$brief.clientRole"}},
        {"$unwind": "$questions"},
        {
            "$group": {
                "_id": {"question": "$questions", "role": "$role"},
                "count": {"$sum": 1},
            }
        },
        {"$sort": {"count": -1, "_id.question": 1}},
        {"$limit": limit},
        {"$project": {"_id": 0, "question": "$_id.question", "role": "$_id.role", "count": 1}},
    ]


def _format_created_at(value: Any) -> str | None:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()
    if isinstance(value, str) and value:
        return value
    return None


def to_history_item(doc: dict[str, Any]) -> BriefHistoryItem:
    """Flatten a stored brief document, tolerating missing or malformed fields."""
    brief = doc.get("brief") if isinstance(doc.get("brief"), dict) else {}
    brief_input = doc.get("input") if isinstance(doc.get("input"), dict) else {}

    def field(name: str) -> str:
        return coerce_text(brief.get(name), coerce_text(brief_input.get(name)))

    raw_case_study = brief.get("caseStudy")
    case_study = None
    if isinstance(raw_case_study, dict):
        case_study = CaseStudy(
            title=coerce_text(raw_case_study.get("title")),
            summary=coerce_text(raw_case_study.get("summary")),
            metrics=coerce_string_list(raw_case_study.get("metrics")),
        )

    return BriefHistoryItem(
        id=str(doc.get("_id", "")),
        industry=field("industry"),
        meeting_type=field("meetingType"),
        client_role=field("clientRole"),
        context=field("context"),
        created_at=_format_created_at(doc.get("createdAt")),
        elevator_pitch=coerce_text(brief.get("elevatorPitch")),
        discovery_questions=coerce_string_list(brief.get("discoveryQuestions")),
        industry_insights=coerce_string_list(brief.get("industryInsights")),
        positioning=coerce_string_list(brief.get("positioning")),
        case_study=case_study,
    )


class BriefRepository:
    """Saved briefs collection."""

    def __init__(
        self,
        collection: AsyncIOMotorCollection | None = None,
        collection_name: str | None = None,
    ):
        self._collection = collection
        self.collection_name = collection_name or get_settings().mongo_collection_brief

    @property
    def collection(self) -> AsyncIOMotorCollection:
        if self._collection is None:
            self._collection = get_collection(self.collection_name)
        return self._collection

    async def insert(
        self,
        brief_input: BriefRequest | None,
        brief: GeneratedBrief,
    ) -> str:
        """Insert a brief with a server-assigned createdAt; returns the new id."""
        record = BriefRecord(
            input=brief_input,
            brief=brief,
            created_at=datetime.now(timezone.utc),
        )
        document = record.model_dump(by_alias=True, exclude={"id"})
        result = await self.collection.insert_one(document)
        brief_id = str(result.inserted_id)
        logger.info(f"Saved brief {brief_id} ({brief.industry or 'no industry'})")
        return brief_id

    async def list_recent(
        self,
        industry: str | None = None,
        client_role: str | None = None,
        limit: int | None = None,
    ) -> list[BriefHistoryItem]:
        """Most recent briefs first, optionally filtered by industry and role."""
        config = get_settings().question_bank
        limit = min(limit or config.history_default_limit, config.history_max_limit)

        query: dict[str, Any] = {}
        if industry:
            query["brief.industry"] = industry
        if client_role:
            query["brief.clientRole"] = client_role

        cursor = self.collection.find(query).sort("createdAt", -1).limit(limit)
        docs = await cursor.to_list(length=limit)
        return [to_history_item(doc) for doc in docs]

    async def recent_question_counts(
        self,
        industry: str,
        client_role: str | None = None,
        limit: int = RECENT_QUESTION_LIMIT,
    ) -> list[dict[str, Any]]:
        """Rows of {question, role, count}, most frequent first."""
        pipeline = build_recent_questions_pipeline(industry, client_role, limit)
        cursor = self.collection.aggregate(pipeline)
        return await cursor.to_list(length=None)
