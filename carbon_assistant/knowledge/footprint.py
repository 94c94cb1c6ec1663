"""
Scope-based footprint estimate from the activity quantities a user mentions.

Factors are kgCO2e per unit:
    energy     0.475 per kWh       (global grid average)   -> scope 2
    fuel       2.68  per litre     (diesel)                -> scope 1
    travel     0.192 per km        (average car)           -> scope 3
    waste      582   per tonne     (mixed waste)           -> scope 3
    employees  1200  per employee  (office energy, yearly) -> scope 3
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from carbon_assistant.conversation.entities import CALCULATION_FIELDS, Entity, EntityType
from carbon_assistant.utils import parse_quantity

logger = logging.getLogger(__name__)

EMISSION_FACTORS: dict[EntityType, float] = {
    EntityType.ENERGY: 0.475,
    EntityType.FUEL: 2.68,
    EntityType.TRAVEL: 0.192,
    EntityType.WASTE: 582.0,
    EntityType.EMPLOYEES: 1200.0,
}

BASE_UNCERTAINTY = 0.05
MAX_UNCERTAINTY = 0.25
MISSING_DATA_UNCERTAINTY: dict[EntityType, float] = {
    EntityType.ENERGY: 0.10,
    EntityType.FUEL: 0.05,
    EntityType.WASTE: 0.08,
    EntityType.TRAVEL: 0.07,
}

# Tonnes CO2e per employee; strict bounds, anything between is "Average"
EXCELLENT_BELOW = 2.0
GOOD_BELOW = 5.0
NEEDS_IMPROVEMENT_ABOVE = 15.0


def benchmark_category(tonnes_per_employee: float) -> str:
    """Place a per-employee footprint in a benchmark band."""
    if tonnes_per_employee < EXCELLENT_BELOW:
        return "Excellent"
    if tonnes_per_employee < GOOD_BELOW:
        return "Good"
    if tonnes_per_employee > NEEDS_IMPROVEMENT_ABOVE:
        return "Needs Improvement"
    return "Average"


@dataclass(frozen=True)
class FootprintEstimate:
    """Emissions in kgCO2e per scope plus the total in tonnes."""

    scope1_kg: float
    scope2_kg: float
    scope3_kg: float
    total_tonnes: float
    uncertainty: float
    quantities: dict[str, float] = field(default_factory=dict)

    @property
    def emissions_per_employee(self) -> Optional[float]:
        """Tonnes per employee, or None when no headcount was given."""
        employees = self.quantities.get(EntityType.EMPLOYEES.value)
        if not employees:
            return None
        return self.total_tonnes / employees

    def to_dict(self) -> dict:
        data = {
            "scope1_kg": round(self.scope1_kg, 2),
            "scope2_kg": round(self.scope2_kg, 2),
            "scope3_kg": round(self.scope3_kg, 2),
            "total_tonnes": round(self.total_tonnes, 3),
            "uncertainty": round(self.uncertainty, 2),
            "quantities": dict(self.quantities),
        }
        per_employee = self.emissions_per_employee
        if per_employee is not None:
            data["emissions_per_employee"] = round(per_employee, 2)
            data["benchmark_category"] = benchmark_category(per_employee)
        return data


def estimate_footprint(quantities: dict[EntityType, float]) -> FootprintEstimate:
    """Estimate emissions for the supplied quantities; missing ones count as zero."""
    amount = {f: quantities.get(f, 0.0) for f in CALCULATION_FIELDS}

    scope1 = amount[EntityType.FUEL] * EMISSION_FACTORS[EntityType.FUEL]
    scope2 = amount[EntityType.ENERGY] * EMISSION_FACTORS[EntityType.ENERGY]
    scope3 = (
        amount[EntityType.TRAVEL] * EMISSION_FACTORS[EntityType.TRAVEL]
        + amount[EntityType.WASTE] * EMISSION_FACTORS[EntityType.WASTE]
        + amount[EntityType.EMPLOYEES] * EMISSION_FACTORS[EntityType.EMPLOYEES]
    )

    uncertainty = BASE_UNCERTAINTY
    for entity_type, penalty in MISSING_DATA_UNCERTAINTY.items():
        if amount[entity_type] == 0:
            uncertainty += penalty

    return FootprintEstimate(
        scope1_kg=scope1,
        scope2_kg=scope2,
        scope3_kg=scope3,
        total_tonnes=(scope1 + scope2 + scope3) / 1000,
        uncertainty=min(uncertainty, MAX_UNCERTAINTY),
        quantities={f.value: q for f, q in amount.items() if q},
    )


def estimate_from_entities(entities: Iterable[Entity]) -> FootprintEstimate:
    """Coerce raw calculation entities to numbers and estimate the footprint."""
    quantities: dict[EntityType, float] = {}
    for entity in entities:
        if entity.type not in EMISSION_FACTORS:
            continue
        try:
            quantities[entity.type] = parse_quantity(entity.value)
        except ValueError:
            logger.warning(
                "Skipping non-numeric %s value %r", entity.type.value, entity.value
            )
    return estimate_footprint(quantities)
