"""Tests for the scope-based footprint estimator."""

import logging

import pytest

from carbon_assistant.conversation.entities import EntityType
from carbon_assistant.knowledge.footprint import (
    MAX_UNCERTAINTY,
    benchmark_category,
    estimate_footprint,
    estimate_from_entities,
)
from tests.conftest import make_entity


class TestEstimateFootprint:
    def test_scopes(self):
        estimate = estimate_footprint({
            EntityType.ENERGY: 1000,
            EntityType.FUEL: 100,
            EntityType.TRAVEL: 500,
            EntityType.WASTE: 2,
            EntityType.EMPLOYEES: 10,
        })
        assert estimate.scope1_kg == pytest.approx(268.0)
        assert estimate.scope2_kg == pytest.approx(475.0)
        assert estimate.scope3_kg == pytest.approx(96.0 + 1164.0 + 12000.0)
        assert estimate.total_tonnes == pytest.approx(14.003)

    def test_complete_data_has_base_uncertainty(self):
        estimate = estimate_footprint({
            EntityType.ENERGY: 1,
            EntityType.FUEL: 1,
            EntityType.TRAVEL: 1,
            EntityType.WASTE: 1,
        })
        assert estimate.uncertainty == pytest.approx(0.05)

    def test_missing_energy_adds_uncertainty(self):
        estimate = estimate_footprint({
            EntityType.FUEL: 1,
            EntityType.TRAVEL: 1,
            EntityType.WASTE: 1,
        })
        assert estimate.uncertainty == pytest.approx(0.15)

    def test_uncertainty_is_capped(self):
        assert estimate_footprint({}).uncertainty == pytest.approx(MAX_UNCERTAINTY)

    def test_empty_input_is_zero(self):
        estimate = estimate_footprint({})
        assert estimate.total_tonnes == 0
        assert estimate.quantities == {}

    def test_to_dict_rounds_values(self):
        data = estimate_footprint({EntityType.ENERGY: 4}).to_dict()
        assert data["scope2_kg"] == pytest.approx(1.9)
        assert data["total_tonnes"] == pytest.approx(0.002)
        assert data["quantities"] == {"energy": 4}

    def test_no_benchmark_without_headcount(self):
        data = estimate_footprint({EntityType.ENERGY: 4}).to_dict()
        assert "emissions_per_employee" not in data
        assert "benchmark_category" not in data


class TestBenchmark:
    @pytest.mark.parametrize("tonnes,expected", [
        (1.99, "Excellent"),
        (2.0, "Good"),
        (4.99, "Good"),
        (5.0, "Average"),
        (15.0, "Average"),
        (15.01, "Needs Improvement"),
    ])
    def test_category_bounds(self, tonnes, expected):
        assert benchmark_category(tonnes) == expected

    def test_per_employee_in_dict(self):
        # 10 staff at 1.2 t each plus 10000 kWh (4.75 t) -> 1.675 t per head
        estimate = estimate_footprint({EntityType.EMPLOYEES: 10, EntityType.ENERGY: 10000})
        assert estimate.emissions_per_employee == pytest.approx(1.675)
        data = estimate.to_dict()
        assert data["emissions_per_employee"] == pytest.approx(1.68, abs=0.01)
        assert data["benchmark_category"] == "Excellent"

    def test_heavy_fuel_user_needs_improvement(self):
        estimate = estimate_footprint({EntityType.EMPLOYEES: 1, EntityType.FUEL: 10000})
        assert estimate.to_dict()["benchmark_category"] == "Needs Improvement"


class TestEstimateFromEntities:
    def test_thousands_separator(self):
        estimate = estimate_from_entities([make_entity(EntityType.ENERGY, "50,000")])
        assert estimate.quantities == {"energy": 50000.0}
        assert estimate.scope2_kg == pytest.approx(23750.0)

    def test_non_calculation_entities_ignored(self):
        estimate = estimate_from_entities([
            make_entity(EntityType.INDUSTRY, "retail"),
            make_entity(EntityType.PERCENTAGE, "30"),
        ])
        assert estimate.total_tonnes == 0

    def test_non_numeric_value_skipped(self, caplog):
        with caplog.at_level(logging.WARNING):
            estimate = estimate_from_entities([
                make_entity(EntityType.FUEL, "lots"),
                make_entity(EntityType.EMPLOYEES, "4"),
            ])
        assert estimate.quantities == {"employees": 4.0}
        assert "Skipping non-numeric fuel value" in caplog.text
