"""Whole-quote pricing models used by the quote builder.

Where ``strategies`` prices one surface at a time, these models price a
whole quote at once:

- **turnkey**: home square footage times a turnkey rate.
- **rate_based_sqft**: each item's quantity times its category labor
  rate, plus paint for all sqft items.
- **production_based**: each item's quantity over a production rate
  gives hours, billed at the hourly labor rate, plus paint.
- **flat_rate_unit**: a unit price per door, window, or room.

Legacy scheme types are mapped onto these models via ``LEGACY_MODEL_MAP``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cadence.exceptions import ValidationError
from cadence.materials import calculate_material_cost
from cadence.models.builder import BasePricing, BuilderRules, PricingLine
from cadence.models.enums import JobType, PricingModel, PricingSchemeType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cadence.models.builder import BuilderArea

LEGACY_MODEL_MAP: dict[str, PricingModel] = {
    PricingSchemeType.SQFT_TURNKEY: PricingModel.TURNKEY,
    PricingSchemeType.SQFT_LABOR_PAINT: PricingModel.RATE_BASED_SQFT,
    PricingSchemeType.HOURLY_TIME_MATERIALS: PricingModel.PRODUCTION_BASED,
    PricingSchemeType.UNIT_PRICING: PricingModel.FLAT_RATE_UNIT,
    PricingSchemeType.ROOM_FLAT_RATE: PricingModel.FLAT_RATE_UNIT,
}

TURNKEY_DEFAULT_RATE = 3.50

MATERIALS_LABOR_SHARE = 0.60
MATERIALS_MATERIAL_SHARE = 0.40

# (keyword, rate key, default) checked in order against the item category.
_LABOR_RATE_KEYS: list[tuple[str, str, float]] = [
    ("wall", "walls", 0.55),
    ("ceiling", "ceilings", 0.65),
    ("trim", "trim", 2.50),
    ("door", "doors", 45.0),
    ("cabinet", "cabinets", 65.0),
]

_PRODUCTION_RATE_KEYS: list[tuple[str, str, float]] = [
    ("wall", "walls", 300.0),
    ("ceiling", "ceilings", 250.0),
    ("trim", "trim", 75.0),
]


def resolve_pricing_model(model: str) -> PricingModel:
    """Resolve a model name or legacy scheme type to a pricing model.

    Raises:
        ValidationError: If the name is neither.
    """
    if model in LEGACY_MODEL_MAP:
        return LEGACY_MODEL_MAP[model]
    try:
        return PricingModel(model)
    except ValueError:
        msg = f"unsupported pricing model: {model}"
        raise ValidationError(msg) from None


def _keyword_rate(
    category: str,
    table: dict[str, float | None] | None,
    keys: list[tuple[str, str, float]],
) -> float:
    """First keyword hit wins; the table value, else its default."""
    if table is None:
        return 0.0
    for keyword, key, default in keys:
        if keyword in category:
            return table.get(key) or default
    return 0.0


def selected_areas(areas: Sequence[BuilderArea]) -> list[BuilderArea]:
    """Keep only selected items, dropping areas left with none."""
    kept: list[BuilderArea] = []
    for area in areas:
        items = [item for item in area.items if item.selected]
        if items:
            kept.append(area.model_copy(update={"items": items}))
    return kept


def _split_materials(total: float, include_materials: bool) -> tuple[float, float]:
    if include_materials:
        return total * MATERIALS_LABOR_SHARE, total * MATERIALS_MATERIAL_SHARE
    return total, 0.0


def _turnkey(
    rules: BuilderRules, home_sqft: float, job_scope: str
) -> BasePricing:
    rate = rules.turnkey_rate or TURNKEY_DEFAULT_RATE
    if job_scope == JobType.INTERIOR and rules.interior_rate:
        rate = rules.interior_rate
    elif job_scope == JobType.EXTERIOR and rules.exterior_rate:
        rate = rules.exterior_rate

    total = home_sqft * rate
    labor_cost, material_cost = _split_materials(total, rules.include_materials)
    return BasePricing(
        model=PricingModel.TURNKEY.value,
        labor_cost=labor_cost,
        material_cost=material_cost,
        subtotal=total,
        total=total,
        home_sqft=home_sqft,
        rate=rate,
        job_scope=job_scope,
    )


def _rate_based(rules: BuilderRules, areas: Sequence[BuilderArea]) -> BasePricing:
    labor_total = 0.0
    total_sqft = 0.0
    lines: list[PricingLine] = []

    for area in areas:
        for item in area.items:
            category = item.category_name.lower()
            labor_rate = _keyword_rate(category, rules.labor_rates, _LABOR_RATE_KEYS)
            labor_cost = item.quantity * labor_rate
            labor_total += labor_cost

            if item.measurement_unit == "sqft":
                total_sqft += item.quantity

            lines.append(PricingLine(
                area_name=area.name,
                category=item.category_name,
                quantity=item.quantity,
                unit=item.measurement_unit,
                labor_rate=labor_rate,
                labor_cost=labor_cost,
            ))

    materials = calculate_material_cost(total_sqft, rules)
    subtotal = labor_total + materials.material_cost
    return BasePricing(
        model=PricingModel.RATE_BASED_SQFT.value,
        labor_cost=labor_total,
        material_cost=materials.material_cost,
        gallons=materials.gallons,
        subtotal=subtotal,
        total=subtotal,
        total_sqft=total_sqft,
        breakdown=lines,
    )


def _production_based(
    rules: BuilderRules, areas: Sequence[BuilderArea]
) -> BasePricing:
    hourly_rate = rules.hourly_labor_rate or 50.0
    labor_total = 0.0
    total_hours = 0.0
    total_sqft = 0.0
    lines: list[PricingLine] = []

    for area in areas:
        for item in area.items:
            category = item.category_name.lower()
            production_rate = _keyword_rate(
                category, rules.production_rates, _PRODUCTION_RATE_KEYS
            )

            # Items without a production rate take no labor time.
            if production_rate > 0:
                hours = item.quantity / production_rate
                labor_cost = hours * hourly_rate
                total_hours += hours
                labor_total += labor_cost
                lines.append(PricingLine(
                    area_name=area.name,
                    category=item.category_name,
                    quantity=item.quantity,
                    unit=item.measurement_unit,
                    production_rate=production_rate,
                    hours=hours,
                    hourly_rate=hourly_rate,
                    labor_cost=labor_cost,
                ))

            if item.measurement_unit == "sqft":
                total_sqft += item.quantity

    materials = calculate_material_cost(total_sqft, rules)
    subtotal = labor_total + materials.material_cost
    return BasePricing(
        model=PricingModel.PRODUCTION_BASED.value,
        labor_cost=labor_total,
        material_cost=materials.material_cost,
        gallons=materials.gallons,
        subtotal=subtotal,
        total=subtotal,
        total_sqft=total_sqft,
        total_hours=total_hours,
        breakdown=lines,
    )


def _unit_price(category: str, unit_prices: dict[str, float | None] | None) -> float:
    if unit_prices is None:
        return 0.0
    if "door" in category:
        return unit_prices.get("door") or 85.0
    if "window" in category:
        return unit_prices.get("window") or 75.0
    if "room" in category:
        if "small" in category:
            return unit_prices.get("room_small") or 350.0
        if "large" in category:
            return unit_prices.get("room_large") or 750.0
        return unit_prices.get("room_medium") or 500.0
    return 0.0


def _flat_rate(rules: BuilderRules, areas: Sequence[BuilderArea]) -> BasePricing:
    total = 0.0
    lines: list[PricingLine] = []

    for area in areas:
        for item in area.items:
            unit_price = _unit_price(item.category_name.lower(), rules.unit_prices)
            cost = item.quantity * unit_price
            total += cost
            lines.append(PricingLine(
                area_name=area.name,
                category=item.category_name,
                quantity=item.quantity,
                unit_price=unit_price,
                cost=cost,
            ))

    labor_cost, material_cost = _split_materials(total, rules.include_materials)
    return BasePricing(
        model=PricingModel.FLAT_RATE_UNIT.value,
        labor_cost=labor_cost,
        material_cost=material_cost,
        subtotal=total,
        total=total,
        breakdown=lines,
    )


def calculate_pricing(
    model: str,
    rules: BuilderRules | None = None,
    areas: Sequence[BuilderArea] = (),
    home_sqft: float = 0.0,
    job_scope: str = JobType.INTERIOR.value,
) -> BasePricing:
    """Price a whole quote under one of the builder pricing models.

    Args:
        model: A ``PricingModel`` value or a legacy scheme type.
        rules: Rates and material settings; defaults when omitted.
        areas: Builder areas, used by the itemised models.
        home_sqft: Whole-home square footage, used by turnkey.
        job_scope: ``interior`` or ``exterior``, used by turnkey.

    Returns:
        Base labor and material pricing, before any adjustments.

    Raises:
        ValidationError: If ``model`` is not recognised.
    """
    resolved = resolve_pricing_model(model)
    rules = rules or BuilderRules()
    areas = selected_areas(areas)

    if resolved is PricingModel.TURNKEY:
        pricing = _turnkey(rules, home_sqft, job_scope)
    elif resolved is PricingModel.RATE_BASED_SQFT:
        pricing = _rate_based(rules, areas)
    elif resolved is PricingModel.PRODUCTION_BASED:
        pricing = _production_based(rules, areas)
    else:
        pricing = _flat_rate(rules, areas)

    pricing.include_materials = rules.include_materials
    return pricing
