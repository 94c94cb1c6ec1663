"""Tests for regex entity extraction."""

import re

import pytest

from carbon_assistant.conversation.entities import (
    ENTITY_PATTERNS,
    EntityExtractor,
    EntityType,
    find_entity,
)
from tests.conftest import make_entity


def _pairs(scan) -> list[tuple[str, str]]:
    return [(e.type.value, e.value) for e in scan]


class TestEntityExtractor:
    def test_energy_and_employees(self, extractor):
        entities = _pairs(extractor.extract("I used 50000 kwh and have 20 employees"))
        assert entities == [("energy", "50000"), ("employees", "20")]

    def test_thousands_separator_kept_raw(self, extractor):
        assert _pairs(extractor.extract("about 50,000 kWh last year")) == [("energy", "50,000")]

    def test_decimal_fuel(self, extractor):
        assert _pairs(extractor.extract("12.5 liters of diesel")) == [("fuel", "12.5")]

    def test_percentage_and_timeframe(self, extractor):
        entities = _pairs(extractor.extract("We want a 30% cut in 5 years"))
        assert entities == [("percentage", "30"), ("timeframe", "5 years")]

    def test_industry_keeps_original_case(self, extractor):
        assert _pairs(extractor.extract("Tips for a Manufacturing company")) == [
            ("industry", "Manufacturing")
        ]

    def test_travel_and_waste(self, extractor):
        entities = _pairs(extractor.extract("1200 km of travel and 3 tonnes of waste"))
        assert entities == [("travel", "1200"), ("waste", "3")]

    def test_at_most_one_entity_per_type(self, extractor):
        entities = list(extractor.extract("10 kwh then 20 kwh"))
        assert len(entities) == 1
        assert entities[0].value == "10"

    def test_no_entities(self, extractor):
        assert list(extractor.extract("hello there")) == []

    def test_default_confidence(self, extractor):
        entity = next(iter(extractor.extract("40 staff")))
        assert entity.type == EntityType.EMPLOYEES
        assert entity.confidence == pytest.approx(0.9)

    def test_custom_confidence(self):
        entity = next(iter(EntityExtractor(confidence=0.5).extract("40 staff")))
        assert entity.confidence == pytest.approx(0.5)

    def test_scan_is_restartable(self, extractor):
        scan = extractor.extract("I used 50000 kwh and have 20 employees")
        assert list(scan) == list(scan)
        assert len(list(scan)) == 2

    def test_custom_patterns(self):
        patterns = {EntityType.PERCENTAGE: re.compile(r"(\d+)\s*pct", re.IGNORECASE)}
        assert _pairs(EntityExtractor(patterns=patterns).extract("cut 15 PCT")) == [
            ("percentage", "15")
        ]

    def test_every_entity_type_has_one_pattern(self):
        assert set(ENTITY_PATTERNS) == set(EntityType)


class TestFindEntity:
    def test_returns_last_match(self):
        entities = [
            make_entity(EntityType.INDUSTRY, "retail"),
            make_entity(EntityType.ENERGY, "10"),
            make_entity(EntityType.INDUSTRY, "finance"),
        ]
        assert find_entity(entities, EntityType.INDUSTRY).value == "finance"

    def test_missing_type_returns_none(self):
        assert find_entity([make_entity(EntityType.ENERGY, "10")], EntityType.FUEL) is None
