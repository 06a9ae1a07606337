"""Per-surface pricing formulas, dispatched on the pricing scheme type.

Each formula turns one surface into labor and material cost:

- ``sqft_turnkey``: all-inclusive $/sqft by surface key, split 60/40.
- ``sqft_labor_paint``: labor $/sqft plus paint gallons at the sheen price.
- ``hourly_time_materials``: 100 sqft per hour at the hourly rate, plus
  marked-up paint.
- ``unit_pricing``: $/unit by unit type, split 70/30. ``sqft`` is read as
  a unit count here.
- ``room_flat_rate``: 20% of a medium room's flat rate, split 65/35.

Rule values follow "falsy means unset": a missing or zero rule falls back
to the formula's default. Unknown scheme types price at zero.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from cadence.models.base import coerce_number
from cadence.models.breakdown import SurfaceCost
from cadence.models.enums import PricingSchemeType

if TYPE_CHECKING:
    from cadence.models.catalog import PricingScheme

logger = logging.getLogger(__name__)

DEFAULT_COVERAGE_SQFT_PER_GALLON = 350.0

TURNKEY_DEFAULT_RATE = 2.0
TURNKEY_LABOR_SHARE = 0.60
TURNKEY_MATERIAL_SHARE = 0.40

LABOR_PAINT_DEFAULT_RATE = 0.55

HOURLY_DEFAULT_RATE = 50.0
HOURLY_SQFT_PER_HOUR = 100.0
HOURLY_DEFAULT_MATERIAL_MARKUP = 20.0

UNIT_DEFAULT_RATE = 5.0
UNIT_LABOR_SHARE = 0.70
UNIT_MATERIAL_SHARE = 0.30

ROOM_DEFAULT_FLAT_RATE = 500.0
ROOM_SURFACE_SHARE = 0.20
ROOM_LABOR_SHARE = 0.65
ROOM_MATERIAL_SHARE = 0.35


def rule_value(rules: Mapping[str, Any], key: str, field: str = "price") -> float:
    """Read ``rules[key][field]`` as a number, 0 when absent or malformed."""
    rule = rules.get(key)
    if not isinstance(rule, Mapping):
        return 0.0
    return coerce_number(rule.get(field))


def turnkey_surface_key(surface_type: str) -> str:
    """Map a surface type onto a turnkey rule key."""
    surface_lower = surface_type.lower()
    if "wall" in surface_lower:
        return "walls"
    if "ceiling" in surface_lower:
        return "ceilings"
    if "trim" in surface_lower:
        return "trim"
    return "walls"


def unit_type_for(surface_type: str) -> str:
    """Map a surface type onto a unit-pricing rule key."""
    surface_lower = surface_type.lower()
    if "door" in surface_lower:
        return "door"
    if "window" in surface_lower:
        return "window"
    if "trim" in surface_lower:
        return "trim"
    return "sqft"


def _split(total: float, labor_share: float, material_share: float) -> SurfaceCost:
    return SurfaceCost(
        labor_cost=total * labor_share,
        material_cost=total * material_share,
        total=total,
    )


def _paint_cost(sqft: float, sheen_price: float, sheen_coverage: float) -> float:
    gallons = sqft / (sheen_coverage or DEFAULT_COVERAGE_SQFT_PER_GALLON)
    return gallons * (sheen_price or 0.0)


def _sqft_turnkey(
    sqft: float,
    labor_rate: float,
    sheen_price: float,
    sheen_coverage: float,
    rules: Mapping[str, Any],
    surface_type: str,
) -> SurfaceCost:
    rate = rule_value(rules, turnkey_surface_key(surface_type)) or TURNKEY_DEFAULT_RATE
    return _split(sqft * rate, TURNKEY_LABOR_SHARE, TURNKEY_MATERIAL_SHARE)


def _sqft_labor_paint(
    sqft: float,
    labor_rate: float,
    sheen_price: float,
    sheen_coverage: float,
    rules: Mapping[str, Any],
    surface_type: str,
) -> SurfaceCost:
    rate = labor_rate or rule_value(rules, "labor_rate") or LABOR_PAINT_DEFAULT_RATE
    labor_cost = sqft * rate
    material_cost = _paint_cost(sqft, sheen_price, sheen_coverage)
    return SurfaceCost(
        labor_cost=labor_cost,
        material_cost=material_cost,
        total=labor_cost + material_cost,
    )


def _hourly_time_materials(
    sqft: float,
    labor_rate: float,
    sheen_price: float,
    sheen_coverage: float,
    rules: Mapping[str, Any],
    surface_type: str,
) -> SurfaceCost:
    hourly_rate = rule_value(rules, "hourly_rate") or HOURLY_DEFAULT_RATE
    labor_cost = (sqft / HOURLY_SQFT_PER_HOUR) * hourly_rate
    markup_pct = (
        rule_value(rules, "material_markup", field="value")
        or HOURLY_DEFAULT_MATERIAL_MARKUP
    )
    material_cost = _paint_cost(sqft, sheen_price, sheen_coverage) * (
        1 + markup_pct / 100
    )
    return SurfaceCost(
        labor_cost=labor_cost,
        material_cost=material_cost,
        total=labor_cost + material_cost,
    )


def _unit_pricing(
    sqft: float,
    labor_rate: float,
    sheen_price: float,
    sheen_coverage: float,
    rules: Mapping[str, Any],
    surface_type: str,
) -> SurfaceCost:
    rate = (
        rule_value(rules, unit_type_for(surface_type))
        or labor_rate
        or UNIT_DEFAULT_RATE
    )
    return _split(sqft * rate, UNIT_LABOR_SHARE, UNIT_MATERIAL_SHARE)


def _room_flat_rate(
    sqft: float,
    labor_rate: float,
    sheen_price: float,
    sheen_coverage: float,
    rules: Mapping[str, Any],
    surface_type: str,
) -> SurfaceCost:
    # Coarse: every surface is priced as a fixed share of a medium room.
    flat_rate = rule_value(rules, "medium_room") or ROOM_DEFAULT_FLAT_RATE
    return _split(flat_rate * ROOM_SURFACE_SHARE, ROOM_LABOR_SHARE, ROOM_MATERIAL_SHARE)


_Formula = Callable[
    [float, float, float, float, Mapping[str, Any], str], SurfaceCost
]

_FORMULAS: dict[str, _Formula] = {
    PricingSchemeType.SQFT_TURNKEY: _sqft_turnkey,
    PricingSchemeType.SQFT_LABOR_PAINT: _sqft_labor_paint,
    PricingSchemeType.HOURLY_TIME_MATERIALS: _hourly_time_materials,
    PricingSchemeType.UNIT_PRICING: _unit_pricing,
    PricingSchemeType.ROOM_FLAT_RATE: _room_flat_rate,
}


def compute_surface_cost(
    *,
    sqft: float,
    labor_rate: float,
    sheen_price: float,
    sheen_coverage: float,
    pricing_scheme: PricingScheme,
    surface_type: str,
) -> SurfaceCost:
    """Price one surface under the given pricing scheme.

    Args:
        sqft: Surface quantity (square feet, or a unit count for
            unit-priced surfaces).
        labor_rate: Resolved per-unit labor rate, 0 when none applies.
        sheen_price: Price per gallon of the selected sheen.
        sheen_coverage: Square feet per gallon of the selected sheen.
        pricing_scheme: Scheme whose ``type`` selects the formula and
            whose ``pricing_rules`` supply its constants.
        surface_type: Free-text surface name used for rule-key lookup.

    Returns:
        Labor, material, and total cost. All zero for an unrecognised
        scheme type.
    """
    formula = _FORMULAS.get(pricing_scheme.type)
    if formula is None:
        logger.warning(
            "Unrecognised pricing scheme type %r on scheme %s; pricing surface at zero",
            pricing_scheme.type,
            pricing_scheme.id,
        )
        return SurfaceCost(labor_cost=0.0, material_cost=0.0, total=0.0)

    return formula(
        sqft,
        labor_rate,
        sheen_price,
        sheen_coverage,
        pricing_scheme.pricing_rules,
        surface_type,
    )
