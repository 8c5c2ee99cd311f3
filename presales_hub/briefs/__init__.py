"""Executive brief generation."""

from presales_hub.briefs.agent import (
    BriefGenerationResult,
    generate_brief_with_status,
    generate_executive_brief,
)
from presales_hub.briefs.fallback import generate_brief_data
from presales_hub.briefs.models import (
    BriefHistoryItem,
    BriefRecord,
    BriefRequest,
    CaseStudy,
    GeneratedBrief,
    QuestionCategory,
    RoleCategories,
)

__all__ = [
    "generate_executive_brief",
    "generate_brief_with_status",
    "generate_brief_data",
    "BriefGenerationResult",
    "BriefRequest",
    "GeneratedBrief",
    "CaseStudy",
    "BriefRecord",
    "BriefHistoryItem",
    "QuestionCategory",
    "RoleCategories",
]
