"""
Intent enumeration and the versioned keyword table used for classification.

The keyword table is immutable configuration: "learning" produces a new
table via ``KeywordTable.reinforce`` instead of editing the live one, so a
classifier built on a table always gives the same answer for the same input.

Usage:
    table = DEFAULT_KEYWORD_TABLE
    learned = table.reinforce("measure office heating", Intent.CALCULATE_CARBON)
    assert learned.version == table.version + 1
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

logger = logging.getLogger(__name__)

# Words shorter than this are never learned as keywords
MIN_LEARNED_WORD_LENGTH = 4


class Intent(str, Enum):
    """Closed set of conversational intents, in tie-break priority order."""

    GREETING = "greeting"
    GOODBYE = "goodbye"
    BASIC_CONCEPTS = "basic_concepts"
    CALCULATOR_USAGE = "calculator_usage"
    INDUSTRY_BENCHMARKS = "industry_benchmarks"
    RECOMMENDATIONS = "recommendations"
    ADVANCED_ANALYTICS = "advanced_analytics"
    AI_ML_FEATURES = "ai_ml_features"
    REPORTING_TRACKING = "reporting_tracking"
    INDUSTRY_SPECIFIC = "industry_specific"
    GENERAL_INFO = "general_info"
    CALCULATE_CARBON = "calculate_carbon"
    GET_RECOMMENDATIONS = "get_recommendations"
    EXPLAIN_CONCEPT = "explain_concept"
    COMPLIANCE_STANDARDS = "compliance_standards"
    COST_ANALYSIS = "cost_analysis"
    REDUCTION_STRATEGIES = "reduction_strategies"
    UNKNOWN = "unknown"


CLASSIFIABLE_INTENTS: tuple[Intent, ...] = tuple(i for i in Intent if i is not Intent.UNKNOWN)


@dataclass(frozen=True)
class KeywordTable:
    """Versioned, read-only mapping of intent -> keyword phrases.

    Declaration order of ``keywords`` is the classifier's tie-break order.
    """

    keywords: Mapping[Intent, tuple[str, ...]]
    version: int = 1

    def __post_init__(self) -> None:
        normalized: dict[Intent, tuple[str, ...]] = {}
        for intent, phrases in self.keywords.items():
            intent = Intent(intent)
            if intent is Intent.UNKNOWN:
                raise ValueError("The 'unknown' intent cannot carry keywords")
            normalized[intent] = tuple(p.lower() for p in phrases)

        missing = [i.value for i in CLASSIFIABLE_INTENTS if i not in normalized]
        if missing:
            raise ValueError(f"Keyword table is missing intents: {missing}")

        object.__setattr__(self, "keywords", MappingProxyType(normalized))

    def intents(self) -> list[Intent]:
        """Intents in declaration order."""
        return list(self.keywords)

    def with_keywords(self, intent: Intent, phrases: list[str]) -> "KeywordTable":
        """Return a new table with ``phrases`` appended to ``intent`` (duplicates skipped)."""
        intent = Intent(intent)
        existing = self.keywords[intent]
        additions = tuple(
            p for p in dict.fromkeys(x.lower() for x in phrases) if p not in existing
        )
        updated = dict(self.keywords)
        updated[intent] = existing + additions
        return KeywordTable(keywords=updated, version=self.version + 1)

    def reinforce(self, message: str, intent: Intent) -> "KeywordTable":
        """Return a new table that also treats the message's longer words as keywords."""
        words = [
            w for w in message.lower().split() if len(w) >= MIN_LEARNED_WORD_LENGTH
        ]
        table = self.with_keywords(intent, words)
        learned = len(table.keywords[Intent(intent)]) - len(self.keywords[Intent(intent)])
        logger.debug(
            "Reinforced '%s' with %d new keyword(s) (table v%d)",
            Intent(intent).value, learned, table.version,
        )
        return table


DEFAULT_KEYWORD_TABLE = KeywordTable(
    keywords={
        Intent.GREETING: (
            "hello", "hi", "hey", "good morning", "good afternoon", "good evening",
            "greetings", "welcome", "start", "begin", "sup", "howdy",
        ),
        Intent.GOODBYE: (
            "bye", "goodbye", "see you", "farewell", "exit", "quit", "leave",
            "thank you", "thanks", "done",
        ),
        Intent.BASIC_CONCEPTS: (
            "what is", "define", "explain", "meaning of", "carbon footprint",
            "emission factor", "scope 1", "scope 2", "scope 3", "renewable energy",
            "greenhouse gas", "co2", "sustainability", "climate change",
        ),
        Intent.CALCULATOR_USAGE: (
            "how do i enter", "how to add", "how to input", "data entry",
            "energy usage", "travel data", "waste management", "fuel types",
            "remote work", "employee data", "usage calculator",
        ),
        Intent.INDUSTRY_BENCHMARKS: (
            "benchmark", "compare", "industry average", "performance",
            "technology companies", "manufacturers", "retail sector",
            "how does my company", "average carbon footprint",
        ),
        Intent.RECOMMENDATIONS: (
            "how can i reduce", "reduce carbon", "best practices", "quick wins",
            "energy savings", "travel emissions", "scope 3 reduction",
            "renewable energy transition", "carbon reduction strategies",
        ),
        Intent.ADVANCED_ANALYTICS: (
            "projected", "prediction", "forecast", "next year", "future",
            "electric vehicles", "reduction potential", "money save",
            "carbon neutrality", "milestones", "targets",
        ),
        Intent.AI_ML_FEATURES: (
            "ai improve", "machine learning", "ml models", "confidence scores",
            "ai recommend", "system learn", "algorithms", "artificial intelligence",
            "how does ai", "neural network",
        ),
        Intent.REPORTING_TRACKING: (
            "track emissions", "monthly tracking", "breakdown", "report",
            "science-based targets", "emissions by source", "carbon reporting",
        ),
        Intent.INDUSTRY_SPECIFIC: (
            "manufacturing", "retail", "technology", "healthcare", "finance",
            "automotive", "aviation", "construction", "agriculture",
        ),
        Intent.GENERAL_INFO: (
            "who made", "ecoleaf analytics", "demo", "sustainability goals",
            "cost of carbon", "about this", "company information",
        ),
        Intent.CALCULATE_CARBON: (
            "calculate", "footprint", "emissions", "carbon", "co2", "compute",
            "estimate", "measure", "assessment", "audit",
        ),
        Intent.GET_RECOMMENDATIONS: (
            "recommend", "suggest", "advice", "tips", "best practices",
            "improve", "reduce", "optimize", "strategies",
        ),
        Intent.EXPLAIN_CONCEPT: (
            "what is", "explain", "define", "meaning", "understand",
            "how does", "why", "difference between",
        ),
        Intent.COMPLIANCE_STANDARDS: (
            "ghg protocol", "iso 14064", "sbti", "tcfd", "cdp",
            "compliance", "regulation", "standard", "reporting",
        ),
        Intent.COST_ANALYSIS: (
            "cost", "price", "investment", "roi", "savings", "budget",
            "financial", "economic", "payback",
        ),
        Intent.REDUCTION_STRATEGIES: (
            "reduce", "decrease", "lower", "cut", "minimize",
            "strategy", "plan", "roadmap", "targets",
        ),
    },
)
