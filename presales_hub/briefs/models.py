"""Pydantic models for briefs and the discovery question bank.

Attributes are snake_case; serialized and stored keys are camelCase so the
documents match what the web client posts and reads.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model with camelCase aliases."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BriefRequest(CamelModel):
    """Selections submitted by the user."""

    industry: str = ""
    meeting_type: str = ""
    client_role: str = ""
    context: str = ""


class CaseStudy(CamelModel):
    title: str = ""
    summary: str = ""
    metrics: list[str] = Field(default_factory=list)


class GeneratedBrief(CamelModel):
    """Executive brief rendered by the client."""

    industry: str = ""
    meeting_type: str = ""
    client_role: str = ""
    context: str = ""
    elevator_pitch: str = ""
    discovery_questions: list[str] = Field(default_factory=list)
    industry_insights: list[str] = Field(default_factory=list)
    positioning: list[str] = Field(default_factory=list)
    case_study: CaseStudy = Field(default_factory=CaseStudy)


class BriefRecord(CamelModel):
    """Persisted brief document."""

    id: str | None = None
    input: BriefRequest | None = None
    brief: GeneratedBrief
    created_at: datetime


class BriefHistoryItem(CamelModel):
    """Flattened saved brief for history listings."""

    id: str
    industry: str = ""
    meeting_type: str = ""
    client_role: str = ""
    context: str = ""
    created_at: str | None = None
    elevator_pitch: str = ""
    discovery_questions: list[str] = Field(default_factory=list)
    industry_insights: list[str] = Field(default_factory=list)
    positioning: list[str] = Field(default_factory=list)
    case_study: CaseStudy | None = None


class QuestionCategory(CamelModel):
    name: str
    questions: list[str] = Field(default_factory=list)


class RoleCategories(CamelModel):
    """Question categories for one client role."""

    role: str
    categories: list[QuestionCategory] = Field(default_factory=list)
