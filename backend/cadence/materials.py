"""Paint quantity and material cost estimation for whole quotes."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from cadence.models.builder import MaterialEstimate
from cadence.models.enums import ApplicationMethod

if TYPE_CHECKING:
    from cadence.models.builder import BuilderRules

DEFAULT_COATS = 2
DEFAULT_COVERAGE = 350.0
DEFAULT_COST_PER_GALLON = 40.0
SPRAY_COVERAGE = 300.0


def calculate_gallons(
    total_sqft: float,
    coats: int = DEFAULT_COATS,
    coverage: float = DEFAULT_COVERAGE,
    application_method: str = ApplicationMethod.ROLL.value,
) -> int:
    """Whole gallons of paint needed to cover ``total_sqft``.

    Spraying at the default coverage assumes overspray and drops coverage
    to 300 sqft/gal. A contractor-set coverage is used as given.
    """
    adjusted_coverage = coverage
    if application_method == ApplicationMethod.SPRAY and coverage == DEFAULT_COVERAGE:
        adjusted_coverage = SPRAY_COVERAGE

    if adjusted_coverage <= 0:
        return 0
    return math.ceil((total_sqft * coats) / adjusted_coverage)


def calculate_material_cost(total_sqft: float, rules: BuilderRules) -> MaterialEstimate:
    """Estimate paint gallons and cost, or zero when materials are excluded."""
    if not rules.include_materials:
        return MaterialEstimate(material_cost=0.0, gallons=0, cost_per_gallon=0.0)

    coats = rules.coats or DEFAULT_COATS
    coverage = rules.coverage or DEFAULT_COVERAGE
    cost_per_gallon = rules.cost_per_gallon or DEFAULT_COST_PER_GALLON
    gallons = calculate_gallons(total_sqft, coats, coverage, rules.application_method)
    return MaterialEstimate(
        material_cost=gallons * cost_per_gallon,
        gallons=gallons,
        cost_per_gallon=cost_per_gallon,
        coats=coats,
        coverage=coverage,
        application_method=rules.application_method,
    )
