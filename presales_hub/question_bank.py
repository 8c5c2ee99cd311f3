"""Discovery question bank: seed questions merged with questions from saved briefs."""

import asyncio
import logging
from typing import Any, Iterable, Protocol

from presales_hub.briefs.constants import (
    ALL_ROLES_BUCKET,
    GENERAL_CATEGORY,
    RECENT_BRIEFS_CATEGORY,
)
from presales_hub.briefs.models import QuestionCategory, RoleCategories

logger = logging.getLogger(__name__)


class SeedQuestionSource(Protocol):
    async def find(self, industry: str, client_role: str | None = None) -> list[dict[str, Any]]: ...


class RecentQuestionSource(Protocol):
    async def recent_question_counts(
        self, industry: str, client_role: str | None = None, limit: int = 30
    ) -> list[dict[str, Any]]: ...


def _role_of(value: Any) -> str:
    return value if isinstance(value, str) and value else ALL_ROLES_BUCKET


def _category_name(value: Any) -> str:
    return value if isinstance(value, str) else GENERAL_CATEGORY


def _questions(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [question for question in value if isinstance(question, str) and question]


def normalize_categories_by_role(docs: Iterable[dict[str, Any]]) -> list[RoleCategories]:
    """Fold seed documents into role -> category -> questions.

    Roles and categories keep first-appearance order; questions for the same
    (role, category) are concatenated in document order, duplicates kept.
    """
    buckets: dict[str, dict[str, list[str]]] = {}

    for doc in docs:
        if not isinstance(doc, dict):
            continue
        categories = buckets.setdefault(_role_of(doc.get("clientRole")), {})

        if isinstance(doc.get("categories"), list):
            for category in doc["categories"]:
                if not isinstance(category, dict):
                    category = {}
                name = _category_name(category.get("name"))
                categories.setdefault(name, []).extend(_questions(category.get("questions")))
        elif doc.get("category") and isinstance(doc.get("questions"), list):
            name = _category_name(doc["category"])
            categories.setdefault(name, []).extend(_questions(doc["questions"]))

    return [
        RoleCategories(
            role=role,
            categories=[
                QuestionCategory(name=name, questions=questions)
                for name, questions in categories.items()
            ],
        )
        for role, categories in buckets.items()
    ]


def group_recent_questions(rows: Iterable[dict[str, Any]]) -> list[RoleCategories]:
    """One "Recent Briefs" category per role, preserving ranking order."""
    buckets: dict[str, list[str]] = {}
    for row in rows:
        questions = buckets.setdefault(_role_of(row.get("role")), [])
        question = row.get("question")
        if isinstance(question, str) and question:
            questions.append(question)

    return [
        RoleCategories(
            role=role,
            categories=[QuestionCategory(name=RECENT_BRIEFS_CATEGORY, questions=questions)],
        )
        for role, questions in buckets.items()
    ]


def merge_role_categories(
    seeded: list[RoleCategories],
    recent: list[RoleCategories],
) -> list[RoleCategories]:
    """Surface recent-brief questions first.

    Known roles get the recent category prepended; new roles go to the front.
    """
    merged = [entry.model_copy(deep=True) for entry in seeded]

    for recent_entry in recent:
        existing = next((entry for entry in merged if entry.role == recent_entry.role), None)
        if existing is not None:
            existing.categories = [
                *[c.model_copy() for c in recent_entry.categories],
                *existing.categories,
            ]
        else:
            merged.insert(0, recent_entry.model_copy(deep=True))

    return merged


async def get_questions(
    industry: str,
    client_role: str | None = None,
    *,
    seeds: SeedQuestionSource,
    briefs: RecentQuestionSource,
    recent_limit: int = 30,
) -> list[RoleCategories]:
    """Question bank for an industry (and optionally a client role)."""
    docs, recent_rows = await asyncio.gather(
        seeds.find(industry, client_role),
        briefs.recent_question_counts(industry, client_role, limit=recent_limit),
    )

    role_categories = merge_role_categories(
        normalize_categories_by_role(docs),
        group_recent_questions(recent_rows),
    )
    logger.info(
        f"Loaded question bank for {industry}"
        f"{f' / {client_role}' if client_role else ''}: "
        f"{len(docs)} seed docs, {len(recent_rows)} recent questions, "
        f"{len(role_categories)} roles"
    )
    return role_categories
