"""Labor-rate resolution for surfaces.

Surface types are free text ("Living Room Walls", "Exterior Trim"), so the
labor category is inferred by keyword before the rate table is consulted.
Keywords are checked in a fixed precedence order:

1. ``ceiling`` -> Ceilings
2. ``trim``, ``door`` or ``window`` -> Trim
3. ``cabinet`` -> Cabinets
4. anything else -> Walls

If the inferred category has no entry, the first entry in the table is
used rather than zero.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cadence.models.enums import JobType, LaborCategory

if TYPE_CHECKING:
    from cadence.models.catalog import LaborRateEntry, LaborRates

_CATEGORY_KEYWORDS: list[tuple[tuple[str, ...], LaborCategory]] = [
    (("ceiling",), LaborCategory.CEILINGS),
    (("trim", "door", "window"), LaborCategory.TRIM),
    (("cabinet",), LaborCategory.CABINETS),
]


def infer_labor_category(surface_type: str) -> LaborCategory:
    """Classify a free-text surface type into a labor category."""
    surface_lower = surface_type.lower()
    for keywords, category in _CATEGORY_KEYWORDS:
        if any(keyword in surface_lower for keyword in keywords):
            return category
    return LaborCategory.WALLS


def _rates_for_job_type(
    labor_rates: LaborRates | None, job_type: str
) -> list[LaborRateEntry]:
    if labor_rates is None:
        return []
    if job_type == JobType.INTERIOR:
        return labor_rates.interior
    return labor_rates.exterior


def resolve_labor_rate(
    labor_rates: LaborRates | None,
    surface_type: str,
    job_type: str = JobType.INTERIOR.value,
) -> float:
    """Resolve the per-unit labor rate for a surface.

    Args:
        labor_rates: Rate tables keyed by job type. Any job type other
            than ``interior`` reads the exterior table.
        surface_type: Free-text surface name used to infer the category.
        job_type: ``interior`` or ``exterior``.

    Returns:
        The matching category's rate, the first entry's rate when no
        category matches, or 0 when the table is empty.
    """
    rates = _rates_for_job_type(labor_rates, job_type)
    if not rates:
        return 0.0

    category = infer_labor_category(surface_type)
    for entry in rates:
        if entry.category == category:
            return entry.rate
    return rates[0].rate
