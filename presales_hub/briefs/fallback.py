"""Static brief content used when no model output is available."""

from presales_hub.briefs.models import BriefRequest, CaseStudy, GeneratedBrief

DEFAULT_KEY = "default"

ELEVATOR_PITCHES = {
    "Healthcare": (
        "We help healthcare organizations transform patient care and operational efficiency "
        "through intelligent agentic automation that adapts to complex clinical workflows, "
        "ensuring compliance while reducing administrative burden by up to 60%."
    ),
    "Financial Services": (
        "We enable financial institutions to accelerate digital transformation with agentic AI "
        "systems that autonomously handle complex processes from loan origination to fraud "
        "detection while maintaining strict regulatory compliance."
    ),
    "Retail": (
        "We empower retailers to create seamless, personalized customer experiences through "
        "agentic systems that dynamically optimize inventory, pricing, and customer engagement "
        "across all channels in real-time."
    ),
    "Manufacturing": (
        "We help manufacturers achieve operational excellence through intelligent agents that "
        "optimize production scheduling, predictive maintenance, and supply chain coordination."
    ),
    "Technology": (
        "We accelerate innovation for tech companies by deploying agentic AI that automates "
        "complex development workflows and scales operations without proportional headcount "
        "growth."
    ),
    DEFAULT_KEY: (
        "We partner with enterprise leaders to deploy agentic AI systems that transform business "
        "operations moving beyond simple automation to intelligent agents that reason, adapt, "
        "and execute complex workflows autonomously."
    ),
}

UNIVERSAL_QUESTIONS = [
    "What business processes currently require the most manual intervention or slow your teams down?",
    "Where do you see the biggest opportunity for intelligent automation in your organization?",
    "How does data currently flow between your critical systems? Are there pain points or bottlenecks?",
    "If you could eliminate one operational bottleneck tomorrow with AI, what would deliver the most value?",
    "What constraints do you have around data privacy, governance, or regulatory compliance?",
]

INDUSTRY_QUESTIONS = {
    "Healthcare": [
        "How are you handling prior authorization processes today?",
        "What percentage of staff time is spent on documentation versus patient care?",
    ],
    "Financial Services": [
        "How are you balancing innovation speed with regulatory compliance?",
        "What is your current approach to fraud detection?",
    ],
    "Retail": [
        "How quickly can you respond to demand fluctuations?",
        "What is your customer data utilization rate across channels?",
    ],
    "Manufacturing": [
        "What is your equipment downtime rate?",
        "How do you coordinate across your supply chain during disruptions?",
    ],
}

INDUSTRY_INSIGHTS = {
    "Healthcare": [
        "Administrative costs account for 25-30% of total healthcare spending",
        "Provider burnout driven by documentation burden is at all-time high",
        "Interoperability challenges create $30B+ in annual waste",
    ],
    "Financial Services": [
        "Manual loan processing takes 30-45 days on average",
        "Fraud losses exceed $40B annually",
        "Customer expectations for real-time service are reshaping the industry",
    ],
    "Retail": [
        "Inventory optimization can improve margins by 2-5 percentage points",
        "Personalization drives 10-30% revenue uplift",
        "Omnichannel customers spend 3-4x more",
    ],
    DEFAULT_KEY: [
        "Agentic AI adoption is accelerating",
        "Early adopters seeing 40-60% efficiency gains",
        "Integration remains a critical success factor",
    ],
}

POSITIONING = [
    "Unlike RPA or basic automation, agentic systems reason through complex scenarios and adapt to changing conditions",
    "Our platform integrates with your existing tech stack (Azure, AWS, ServiceNow, Salesforce)",
    "We focus on business outcomes first with high-impact use cases that deliver ROI in 4-8 weeks",
    "Enterprise-grade security, governance, and compliance built-in from day one",
]

CASE_STUDY_SUMMARY = "Detailed case study content will be populated here based on your materials."
CASE_STUDY_METRICS = [
    "Placeholder for key metrics",
    "ROI and timeline data",
    "Business impact summary",
]


def get_elevator_pitch(industry: str) -> str:
    return ELEVATOR_PITCHES.get(industry) or ELEVATOR_PITCHES[DEFAULT_KEY]


def get_discovery_questions(industry: str) -> list[str]:
    """Universal questions followed by any industry-specific ones."""
    return [*UNIVERSAL_QUESTIONS, *INDUSTRY_QUESTIONS.get(industry, [])]


def get_industry_insights(industry: str) -> list[str]:
    return list(INDUSTRY_INSIGHTS.get(industry) or INDUSTRY_INSIGHTS[DEFAULT_KEY])


def get_positioning() -> list[str]:
    return list(POSITIONING)


def get_case_study(industry: str) -> CaseStudy:
    return CaseStudy(
        title=f"{industry} Transformation Example",
        summary=CASE_STUDY_SUMMARY,
        metrics=list(CASE_STUDY_METRICS),
    )


def generate_brief_data(request: BriefRequest) -> GeneratedBrief:
    """Build the complete static brief for a request."""
    return GeneratedBrief(
        industry=request.industry,
        meeting_type=request.meeting_type,
        client_role=request.client_role,
        context=request.context,
        elevator_pitch=get_elevator_pitch(request.industry),
        discovery_questions=get_discovery_questions(request.industry),
        industry_insights=get_industry_insights(request.industry),
        positioning=get_positioning(),
        case_study=get_case_study(request.industry),
    )
