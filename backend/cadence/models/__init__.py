"""Domain models for the Cadence pricing engine."""

from cadence.models.breakdown import (
    AreaBreakdown,
    PricingSchemeRef,
    QuoteBreakdown,
    QuoteSummary,
    SurfaceCost,
    SurfaceLineItem,
)
from cadence.models.builder import (
    AdjustedPricing,
    BasePricing,
    BuilderArea,
    BuilderItem,
    BuilderPricingRequest,
    BuilderRules,
    MaterialEstimate,
    PricingLine,
)
from cadence.models.catalog import (
    ContractorSettings,
    LaborRateEntry,
    LaborRates,
    PricingScheme,
    ProductConfig,
    SheenOption,
)
from cadence.models.enums import (
    ApplicationMethod,
    JobType,
    LaborCategory,
    PricingModel,
    PricingSchemeType,
)
from cadence.models.quote import Area, CompareRequest, QuoteRequest, Surface

__all__ = [
    "AdjustedPricing",
    "ApplicationMethod",
    "Area",
    "AreaBreakdown",
    "BasePricing",
    "BuilderArea",
    "BuilderItem",
    "BuilderPricingRequest",
    "BuilderRules",
    "CompareRequest",
    "ContractorSettings",
    "JobType",
    "LaborCategory",
    "LaborRateEntry",
    "LaborRates",
    "MaterialEstimate",
    "PricingLine",
    "PricingModel",
    "PricingScheme",
    "PricingSchemeRef",
    "PricingSchemeType",
    "ProductConfig",
    "QuoteBreakdown",
    "QuoteRequest",
    "QuoteSummary",
    "SheenOption",
    "Surface",
    "SurfaceCost",
    "SurfaceLineItem",
]
