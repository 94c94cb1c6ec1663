"""
Regex-based entity extraction for calculation inputs and context hints.

Each entity type owns one case-insensitive pattern. The first match of a
pattern becomes one Entity whose value is the raw first capture group;
numeric coercion is left to whichever component consumes the value.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from carbon_assistant.config import settings

logger = logging.getLogger(__name__)


class EntityType(str, Enum):
    """Kinds of values the extractor recognizes, in scan order."""

    ENERGY = "energy"
    FUEL = "fuel"
    EMPLOYEES = "employees"
    TRAVEL = "travel"
    WASTE = "waste"
    PERCENTAGE = "percentage"
    INDUSTRY = "industry"
    TIMEFRAME = "timeframe"


# Fields the footprint calculator needs, in the order they are reported
CALCULATION_FIELDS: tuple[EntityType, ...] = (
    EntityType.ENERGY,
    EntityType.FUEL,
    EntityType.EMPLOYEES,
    EntityType.TRAVEL,
    EntityType.WASTE,
)

ENTITY_PATTERNS: dict[EntityType, re.Pattern[str]] = {
    EntityType.ENERGY: re.compile(
        r"(\d+(?:,\d{3})*(?:\.\d+)?)\s*(?:kwh|kilowatt|energy)", re.IGNORECASE
    ),
    EntityType.FUEL: re.compile(
        r"(\d+(?:,\d{3})*(?:\.\d+)?)\s*(?:liters?|litres?|gallons?|fuel)", re.IGNORECASE
    ),
    EntityType.EMPLOYEES: re.compile(
        r"(\d+(?:,\d{3})*)\s*(?:employees?|workers?|staff)", re.IGNORECASE
    ),
    EntityType.TRAVEL: re.compile(
        r"(\d+(?:,\d{3})*(?:\.\d+)?)\s*(?:km|kilometers?|miles?|travel)", re.IGNORECASE
    ),
    EntityType.WASTE: re.compile(
        r"(\d+(?:,\d{3})*(?:\.\d+)?)\s*(?:tons?|tonnes?|waste)", re.IGNORECASE
    ),
    EntityType.PERCENTAGE: re.compile(r"(\d+(?:\.\d+)?)\s*(?:%|percent)", re.IGNORECASE),
    EntityType.INDUSTRY: re.compile(
        r"(manufacturing|retail|technology|healthcare|finance|automotive"
        r"|aviation|construction|agriculture)",
        re.IGNORECASE,
    ),
    EntityType.TIMEFRAME: re.compile(r"(\d+\s*(?:years?|months?))", re.IGNORECASE),
}


@dataclass(frozen=True)
class Entity:
    """A typed value pulled from an utterance."""

    type: EntityType
    value: str
    confidence: float


def find_entity(entities: list[Entity], entity_type: EntityType) -> Optional[Entity]:
    """Return the last entity of ``entity_type``, or None."""
    found = None
    for entity in entities:
        if entity.type == entity_type:
            found = entity
    return found


class EntityScan:
    """Lazy, restartable view over the entities found in one utterance.

    Iterating runs the pattern table again, so the scan can be consumed
    any number of times.
    """

    def __init__(
        self,
        utterance: str,
        patterns: dict[EntityType, re.Pattern[str]],
        confidence: float,
    ) -> None:
        self._utterance = utterance
        self._patterns = patterns
        self._confidence = confidence

    def __iter__(self) -> Iterator[Entity]:
        for entity_type, pattern in self._patterns.items():
            match = pattern.search(self._utterance)
            if match:
                yield Entity(type=entity_type, value=match.group(1), confidence=self._confidence)

    def __repr__(self) -> str:
        return f"EntityScan({self._utterance!r})"


class EntityExtractor:
    """Applies one pattern per entity type to an utterance."""

    def __init__(
        self,
        patterns: Optional[dict[EntityType, re.Pattern[str]]] = None,
        confidence: Optional[float] = None,
    ) -> None:
        self._patterns = dict(ENTITY_PATTERNS if patterns is None else patterns)
        self._confidence = (
            settings.nlu.entity_confidence if confidence is None else confidence
        )

    def extract(self, utterance: str) -> EntityScan:
        """Return a lazy scan yielding at most one Entity per type."""
        return EntityScan(utterance, self._patterns, self._confidence)
