"""Selectable values offered by the brief form."""

INDUSTRIES = [
    "Healthcare",
    "Financial Services",
    "Retail",
    "Manufacturing",
    "Technology",
    "Insurance",
    "Telecommunications",
    "Energy & Utilities",
    "Other",
]

MEETING_TYPES = [
    "Intro Call",
    "Discovery Session",
    "Executive Briefing",
    "Partnership Discussion",
    "Conference/Event",
    "Follow-up Meeting",
]

CLIENT_ROLES = [
    "C-Suite (CEO, CTO, CFO)",
    "VP Level",
    "Director",
    "Manager",
    "Technical Lead",
    "Business Analyst",
]

ALL_ROLES_BUCKET = "All Roles"
GENERAL_CATEGORY = "General"
RECENT_BRIEFS_CATEGORY = "Recent Briefs"
