"""Coercion of untrusted model output into GeneratedBrief."""

import json
import re
from typing import Any

from presales_hub.briefs.models import BriefRequest, CaseStudy, GeneratedBrief
from presales_hub.services.llm.exceptions import ParseError

DEFAULT_CASE_STUDY_TITLE = "Relevant Case Study"
DEFAULT_CASE_STUDY_SUMMARY = "Case study details will be added once available."
DEFAULT_CASE_STUDY_METRICS = [
    "ROI and efficiency impact",
    "Timeline to value",
    "Adoption highlights",
]

_FENCE_OPEN = re.compile(r"^\s*```[a-zA-Z0-9_-]*\s*\n?")
_FENCE_CLOSE = re.compile(r"\n?\s*```\s*$")


def coerce_string_list(value: Any) -> list[str]:
    """Keep non-empty string elements in order; anything else becomes []."""
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str) and item]


def coerce_text(value: Any, default: str = "") -> str:
    return value if isinstance(value, str) and value else default


def strip_code_fences(content: str) -> str:
    """Remove a surrounding Markdown code fence, if any."""
    stripped = content.strip()
    if not stripped.startswith("```"):
        return stripped
    stripped = _FENCE_OPEN.sub("", stripped, count=1)
    stripped = _FENCE_CLOSE.sub("", stripped, count=1)
    return stripped.strip()


def parse_brief_content(content: str) -> dict[str, Any]:
    """Parse model output into a JSON object."""
    try:
        parsed = json.loads(strip_code_fences(content))
    except json.JSONDecodeError as e:
        raise ParseError(f"Model output is not valid JSON: {e}") from e

    if not isinstance(parsed, dict):
        raise ParseError(f"Model output is a JSON {type(parsed).__name__}, expected an object")
    return parsed


def normalize_case_study(payload: Any) -> CaseStudy:
    if not isinstance(payload, dict):
        payload = {}
    metrics = coerce_string_list(payload.get("metrics"))
    return CaseStudy(
        title=coerce_text(payload.get("title"), DEFAULT_CASE_STUDY_TITLE),
        summary=coerce_text(payload.get("summary"), DEFAULT_CASE_STUDY_SUMMARY),
        metrics=metrics or list(DEFAULT_CASE_STUDY_METRICS),
    )


def normalize_brief_payload(request: BriefRequest, payload: Any) -> GeneratedBrief:
    """Field-by-field coercion of a parsed model payload.

    Metadata strings override the request only when present and non-empty.
    """
    if not isinstance(payload, dict):
        payload = {}
    metadata = payload.get("metadata")
    if not isinstance(metadata, dict):
        metadata = {}

    elevator_pitch = payload.get("elevatorPitch")

    return GeneratedBrief(
        industry=coerce_text(metadata.get("industry"), request.industry),
        meeting_type=coerce_text(metadata.get("meetingType"), request.meeting_type),
        client_role=coerce_text(metadata.get("clientRole"), request.client_role),
        context=coerce_text(metadata.get("context"), request.context),
        elevator_pitch=elevator_pitch if isinstance(elevator_pitch, str) else "",
        discovery_questions=coerce_string_list(payload.get("discoveryQuestions")),
        industry_insights=coerce_string_list(payload.get("industryInsights")),
        positioning=coerce_string_list(payload.get("positioning")),
        case_study=normalize_case_study(payload.get("caseStudy")),
    )
