"""Cadence quote pricing engine.

Usage::

    from cadence import create_default_engine, QuoteRequest

    engine = create_default_engine()
    quote = engine.calculate(QuoteRequest.model_validate(payload), tenant_id=1)
"""

from cadence.engine import QuoteContext, QuoteEngine, calculate_quote
from cadence.exceptions import CadenceError, NotFoundError, ValidationError
from cadence.factory import create_default_engine
from cadence.models.breakdown import (
    AreaBreakdown,
    PricingSchemeRef,
    QuoteBreakdown,
    QuoteSummary,
    SurfaceCost,
    SurfaceLineItem,
)
from cadence.models.catalog import (
    ContractorSettings,
    LaborRateEntry,
    LaborRates,
    PricingScheme,
    ProductConfig,
    SheenOption,
)
from cadence.models.enums import JobType, LaborCategory, PricingSchemeType
from cadence.models.quote import Area, QuoteRequest, Surface
from cadence.rates import infer_labor_category, resolve_labor_rate
from cadence.strategies import compute_surface_cost

__all__ = [
    "Area",
    "AreaBreakdown",
    "CadenceError",
    "ContractorSettings",
    "JobType",
    "LaborCategory",
    "LaborRateEntry",
    "LaborRates",
    "NotFoundError",
    "PricingScheme",
    "PricingSchemeRef",
    "PricingSchemeType",
    "ProductConfig",
    "QuoteBreakdown",
    "QuoteContext",
    "QuoteEngine",
    "QuoteRequest",
    "QuoteSummary",
    "SheenOption",
    "Surface",
    "SurfaceCost",
    "SurfaceLineItem",
    "ValidationError",
    "calculate_quote",
    "compute_surface_cost",
    "create_default_engine",
    "infer_labor_category",
    "resolve_labor_rate",
]
