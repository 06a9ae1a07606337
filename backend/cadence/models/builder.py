"""Models for the whole-quote pricing models and the adjustment chain."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from cadence.models.base import CamelModel, coerce_number
from cadence.models.enums import ApplicationMethod


class BuilderItem(CamelModel):
    """A labor line in a quote-builder area, e.g. 120 sqft of walls."""

    category_name: str = ""
    quantity: float = 0.0
    measurement_unit: str = "sqft"
    selected: bool = True

    @field_validator("quantity", mode="before")
    @classmethod
    def parse_quantity(cls, v: Any) -> float:
        return coerce_number(v)

    @field_validator("measurement_unit", mode="before")
    @classmethod
    def default_unit(cls, v: Any) -> Any:
        return v or "sqft"


class BuilderArea(CamelModel):
    """A named group of builder items."""

    name: str = "Unnamed Area"
    items: list[BuilderItem] = Field(default_factory=list)


class BuilderRules(CamelModel):
    """Scheme rules merged with contractor settings for the quote builder.

    Rate tables left as ``None`` mean the contractor has not configured
    them; items then price at zero for that model.
    """

    include_materials: bool = True
    coverage: float = 350.0
    application_method: ApplicationMethod = ApplicationMethod.ROLL
    coats: int = 2
    cost_per_gallon: float = 40.0

    turnkey_rate: float = 3.50
    interior_rate: float | None = None
    exterior_rate: float | None = None

    labor_rates: dict[str, float | None] | None = None
    production_rates: dict[str, float | None] | None = None
    hourly_labor_rate: float = 50.0
    unit_prices: dict[str, float | None] | None = None


class MaterialEstimate(CamelModel):
    """Paint required for a quote and what it costs."""

    material_cost: float = 0.0
    gallons: int = 0
    cost_per_gallon: float = 0.0
    coats: int | None = None
    coverage: float | None = None
    application_method: ApplicationMethod | None = None


class PricingLine(CamelModel):
    """Per-item detail from an itemised pricing model."""

    area_name: str
    category: str
    quantity: float
    unit: str | None = None
    labor_rate: float | None = None
    production_rate: float | None = None
    hours: float | None = None
    hourly_rate: float | None = None
    unit_price: float | None = None
    labor_cost: float = 0.0
    cost: float | None = None


class BasePricing(CamelModel):
    """Labor and material cost before markups, overhead, profit, and tax."""

    model: str
    labor_cost: float
    material_cost: float
    subtotal: float
    total: float
    include_materials: bool = True
    gallons: int | None = None
    total_sqft: float | None = None
    total_hours: float | None = None
    home_sqft: float | None = None
    rate: float | None = None
    job_scope: str | None = None
    breakdown: list[PricingLine] = Field(default_factory=list)


class AdjustedPricing(CamelModel):
    """Base pricing carried through markup, overhead, profit, and tax."""

    model: str
    labor_total: float
    material_total: float

    labor_markup_percent: float
    labor_markup_amount: float
    labor_cost_with_markup: float

    material_markup_percent: float
    material_markup_amount: float
    material_cost_with_markup: float

    overhead_percent: float
    overhead: float
    subtotal_before_profit: float

    profit_margin_percent: float
    profit_amount: float

    subtotal: float
    tax_percent: float
    tax: float
    total: float

    deposit_percent: float
    deposit: float
    balance: float
    quote_validity_days: int = 30

    total_sqft: float | None = None
    total_hours: float | None = None
    gallons: int | None = None
    breakdown: list[PricingLine] = Field(default_factory=list)


class BuilderPricingRequest(CamelModel):
    """Input to whole-quote pricing with the tenant's adjustment chain."""

    model: str
    areas: list[BuilderArea] = Field(default_factory=list)
    rules: BuilderRules | None = None
    home_sqft: float = 0.0
    job_scope: str = "interior"

    @field_validator("home_sqft", mode="before")
    @classmethod
    def parse_home_sqft(cls, v: Any) -> float:
        return coerce_number(v)
