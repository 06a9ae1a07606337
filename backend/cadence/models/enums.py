"""Enums for the Cadence domain models."""

from enum import StrEnum


class JobType(StrEnum):
    """Job category of an area; selects the labor-rate table."""

    INTERIOR = "interior"
    EXTERIOR = "exterior"


class PricingSchemeType(StrEnum):
    """Recognised per-surface pricing formula families.

    Schemes carry their type as a plain string so that an unrecognised tag
    can still be loaded; the dispatcher prices those at zero.
    """

    SQFT_TURNKEY = "sqft_turnkey"
    SQFT_LABOR_PAINT = "sqft_labor_paint"
    HOURLY_TIME_MATERIALS = "hourly_time_materials"
    UNIT_PRICING = "unit_pricing"
    ROOM_FLAT_RATE = "room_flat_rate"


class LaborCategory(StrEnum):
    """Labor-rate table categories inferred from surface names."""

    WALLS = "Walls"
    CEILINGS = "Ceilings"
    TRIM = "Trim"
    CABINETS = "Cabinets"


class PricingModel(StrEnum):
    """Whole-quote pricing models used by the quote builder."""

    TURNKEY = "turnkey"
    RATE_BASED_SQFT = "rate_based_sqft"
    PRODUCTION_BASED = "production_based"
    FLAT_RATE_UNIT = "flat_rate_unit"


class ApplicationMethod(StrEnum):
    """How paint is applied; spraying loses coverage to overspray."""

    ROLL = "roll"
    SPRAY = "spray"
