"""Static carbon-accounting knowledge: concepts, industries, compliance and costs."""

import logging
import re
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

DEFAULT_INDUSTRY = "technology"
DEFAULT_QUESTION_TYPE = "general"
DEFAULT_STANDARD = "ghg_protocol"

CONCEPTS: dict[str, dict] = {
    "carbon_footprint": {
        "text": (
            "A carbon footprint is the total amount of greenhouse gases produced directly "
            "and indirectly by human activities, measured in CO2 equivalent. It includes "
            "emissions from energy use, transportation, waste, and supply chains."
        ),
        "related": ["scope_1", "scope_2", "scope_3"],
        "confidence": 0.95,
    },
    "scope_1": {
        "text": (
            "Scope 1 emissions are direct greenhouse gas emissions from sources owned or "
            "controlled by your organization, such as fuel combustion in company vehicles "
            "or on-site energy generation."
        ),
        "related": ["scope_2", "scope_3", "ghg_protocol"],
        "confidence": 0.95,
    },
    "scope_2": {
        "text": (
            "Scope 2 emissions are indirect emissions from purchased electricity, steam, "
            "heating, or cooling consumed by your organization."
        ),
        "related": ["scope_1", "scope_3", "renewable_energy"],
        "confidence": 0.95,
    },
}

FALLBACK_CONCEPT = {
    "text": (
        "I'd be happy to explain carbon accounting concepts. Try asking about carbon "
        "footprint, scope emissions, or GHG protocol."
    ),
    "related": [],
    "confidence": 0.6,
    "related_topics": ["Carbon footprint basics", "Emission scopes", "GHG Protocol"],
}

BASE_RECOMMENDATIONS = [
    "🔋 Switch to renewable energy sources",
    "📊 Implement comprehensive emissions tracking",
    "🚗 Optimize transportation and logistics",
    "♻️ Establish circular economy practices",
    "🎯 Set science-based reduction targets",
]

SECTOR_RECOMMENDATIONS: dict[str, str] = {
    "technology": "☁️ Optimize cloud infrastructure and data centers",
    "manufacturing": "🏭 Implement lean manufacturing processes",
}

LEVEL_RECOMMENDATIONS: dict[str, tuple[str, str]] = {
    # level -> (position, recommendation)
    "high": ("first", "🚨 PRIORITY: Audit your largest emission sources this quarter"),
    "low": ("last", "✅ Maintain your current performance with annual reviews"),
}

INDUSTRY_INSIGHTS: dict[str, dict[str, str]] = {
    "technology": {
        "general": (
            "Tech companies typically have lower Scope 1&2 emissions but significant "
            "Scope 3 emissions from supply chains and cloud services."
        ),
        "reduction": (
            "Focus on renewable energy procurement, efficient data centers, and "
            "sustainable software practices."
        ),
    },
    "manufacturing": {
        "general": (
            "Manufacturing has high direct emissions from production processes and "
            "energy-intensive operations."
        ),
        "reduction": (
            "Implement lean manufacturing, process optimization, and transition to "
            "renewable energy sources."
        ),
    },
}

INDUSTRY_FOLLOW_UPS = [
    "Specific reduction strategies?",
    "Industry benchmarks?",
    "Case studies?",
    "Implementation costs?",
]

COMPLIANCE_STANDARDS: dict[str, str] = {
    "ghg_protocol": (
        "The GHG Protocol is the global standard for measuring and managing greenhouse "
        "gas emissions. It provides frameworks for Scope 1, 2, and 3 emissions accounting."
    ),
    "iso_14064": (
        "ISO 14064 is an international standard for greenhouse gas accounting and "
        "verification, providing principles and requirements for quantification and "
        "reporting."
    ),
}

REGIONAL_NOTES: dict[str, str] = {
    "eu": (
        "In the EU, the Corporate Sustainability Reporting Directive (CSRD) requires "
        "in-scope companies to disclose emissions using these methods."
    ),
    "us": (
        "In the US, state climate disclosure laws such as California's SB 253 build on "
        "GHG Protocol scopes."
    ),
    "uk": (
        "In the UK, Streamlined Energy and Carbon Reporting (SECR) applies to large "
        "companies and LLPs."
    ),
}


@dataclass(frozen=True)
class ConceptExplanation:
    text: str
    related: list[str]
    confidence: float
    related_topics: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class IndustryInsight:
    answer: str
    follow_up_questions: list[str]


@dataclass(frozen=True)
class ComplianceInfo:
    information: str


@dataclass(frozen=True)
class CostAnalysis:
    analysis: str
    roi: str
    payback: str


@dataclass(frozen=True)
class ReductionPlan:
    roadmap: str
    next_steps: list[str]


def _key(value: str) -> str:
    return value.strip().lower().replace(" ", "_")


_TIMEFRAME_TEXT = re.compile(r"^(\d+)\s*(year|month)s?$")


def describe_timeframe(timeframe: str) -> str:
    """Render a timeframe value ('3', '5_years', '6 months') as readable text.

    A bare number is read as years.
    """
    text = timeframe.strip().lower().replace("_", " ")
    if text.isdigit():
        count, unit = text, "year"
    else:
        match = _TIMEFRAME_TEXT.match(text)
        if match is None:
            return text
        count, unit = match.groups()
    return f"{count} {unit}" if count == "1" else f"{count} {unit}s"


class CarbonKnowledgeBase:
    """Keyed lookups into static tables, each with a fixed fallback."""

    def explain_concept(self, concept: str) -> ConceptExplanation:
        info = CONCEPTS.get(_key(concept))
        if info is None:
            logger.debug("No explanation for concept '%s', using fallback", concept)
            return ConceptExplanation(
                text=FALLBACK_CONCEPT["text"],
                related=list(FALLBACK_CONCEPT["related"]),
                confidence=FALLBACK_CONCEPT["confidence"],
                related_topics=list(FALLBACK_CONCEPT["related_topics"]),
            )
        return ConceptExplanation(
            text=info["text"],
            related=list(info["related"]),
            confidence=info["confidence"],
            related_topics=[f"Learn about {r.replace('_', ' ')}" for r in info["related"]],
        )

    def get_recommendations(self, industry: str, level: str = "medium") -> list[str]:
        """Base recommendations, extended for the sector and emission level."""
        recommendations = list(BASE_RECOMMENDATIONS)

        sector_item = SECTOR_RECOMMENDATIONS.get(_key(industry))
        if sector_item:
            recommendations.insert(0, sector_item)

        level_item = LEVEL_RECOMMENDATIONS.get(_key(level))
        if level_item:
            position, text = level_item
            if position == "first":
                recommendations.insert(0, text)
            else:
                recommendations.append(text)

        return recommendations

    def get_industry_insights(self, industry: str, question_type: str) -> IndustryInsight:
        insights = INDUSTRY_INSIGHTS.get(_key(industry), INDUSTRY_INSIGHTS[DEFAULT_INDUSTRY])
        answer = insights.get(_key(question_type), insights[DEFAULT_QUESTION_TYPE])
        return IndustryInsight(answer=answer, follow_up_questions=list(INDUSTRY_FOLLOW_UPS))

    def get_compliance_info(self, standard: str, region: str = "global") -> ComplianceInfo:
        information = COMPLIANCE_STANDARDS.get(
            _key(standard), COMPLIANCE_STANDARDS[DEFAULT_STANDARD]
        )
        note = REGIONAL_NOTES.get(_key(region))
        if note:
            information = f"{information}\n\n{note}"
        return ComplianceInfo(information=information)

    def get_cost_analysis(self, analysis_type: str, timeframe: str) -> CostAnalysis:
        # analysis_type currently selects nothing; only cost-benefit data exists
        return CostAnalysis(
            analysis=(
                "Carbon reduction investments typically show positive ROI within "
                f"{describe_timeframe(timeframe)}. Energy efficiency measures often pay "
                "back in 2-4 years, while renewable energy projects show returns in "
                "5-8 years."
            ),
            roi="15-25% annually",
            payback="3-6 years average",
        )

    def get_reduction_strategies(
        self, target_reduction: int, timeframe: str, industry: str
    ) -> ReductionPlan:
        roadmap = "\n".join([
            "Phase 1 (Year 1): Quick wins - Energy efficiency, waste reduction "
            "(10-15% reduction)",
            "Phase 2 (Years 2-3): Infrastructure - Renewable energy, equipment upgrades "
            "(20-30% reduction)",
            "Phase 3 (Years 4-5): Advanced - Supply chain optimization, innovation "
            f"({target_reduction}% total reduction)",
            f"Target horizon: {describe_timeframe(timeframe)}",
        ])
        sector_item = SECTOR_RECOMMENDATIONS.get(_key(industry))
        if sector_item:
            roadmap += f"\n\nSector focus: {sector_item}"
        return ReductionPlan(
            roadmap=roadmap,
            next_steps=[
                "Conduct energy audit",
                "Set interim milestones",
                "Develop investment plan",
                "Engage suppliers",
            ],
        )
