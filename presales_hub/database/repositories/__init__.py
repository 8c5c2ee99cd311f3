"""MongoDB repositories."""

from presales_hub.database.repositories.briefs import (
    BriefRepository,
    build_recent_questions_pipeline,
    to_history_item,
)
from presales_hub.database.repositories.questions import QuestionSeedRepository

__all__ = [
    "BriefRepository",
    "QuestionSeedRepository",
    "build_recent_questions_pipeline",
    "to_history_item",
]
