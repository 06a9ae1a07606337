"""Contractor-owned configuration consumed by the pricing engine.

These records are created and edited by the surrounding application; the
engine only reads them.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from cadence.models.base import CamelModel, RecordId, coerce_number

DEFAULT_MARKUP_PERCENT = 15.0
DEFAULT_TAX_PERCENT = 0.0


class SheenOption(CamelModel):
    """A finish level offered for a product, priced per gallon."""

    sheen: str
    price: float = 0.0
    coverage: float = 0.0

    @field_validator("price", "coverage", mode="before")
    @classmethod
    def parse_number(cls, v: Any) -> float:
        return coerce_number(v)


class LaborRateEntry(CamelModel):
    """Per-unit labor rate for one labor category."""

    category: str
    rate: float = 0.0

    @field_validator("rate", mode="before")
    @classmethod
    def parse_rate(cls, v: Any) -> float:
        return coerce_number(v)


class LaborRates(CamelModel):
    """Labor-rate tables keyed by job type."""

    interior: list[LaborRateEntry] = Field(default_factory=list)
    exterior: list[LaborRateEntry] = Field(default_factory=list)


class ProductConfig(CamelModel):
    """A contractor's pricing configuration for one paint product."""

    id: RecordId
    tenant_id: RecordId | None = None
    name: str = ""
    sheens: list[SheenOption] = Field(default_factory=list)
    labor_rates: LaborRates = Field(default_factory=LaborRates)
    default_markup: float | None = None
    tax_rate: float | None = None
    is_active: bool = True

    def find_sheen(self, sheen: str) -> SheenOption | None:
        """Return the sheen option with an exactly matching name."""
        for option in self.sheens:
            if option.sheen == sheen:
                return option
        return None


class PricingScheme(CamelModel):
    """A named formula family plus its scheme-specific constants.

    ``type`` is kept as a plain string: see ``PricingSchemeType`` for the
    recognised values.
    """

    id: RecordId
    tenant_id: RecordId | None = None
    name: str = ""
    type: str
    pricing_rules: dict[str, Any] = Field(default_factory=dict)
    is_active: bool = True

    @field_validator("pricing_rules", mode="before")
    @classmethod
    def none_rules_to_empty(cls, v: Any) -> Any:
        return {} if v is None else v


class ContractorSettings(CamelModel):
    """Contractor-wide pricing defaults."""

    tenant_id: RecordId | None = None
    default_markup_percentage: float = DEFAULT_MARKUP_PERCENT
    tax_rate_percentage: float = DEFAULT_TAX_PERCENT

    # Quote builder adjustment chain
    labor_markup_percent: float = 0.0
    material_markup_percent: float = 0.0
    overhead_percent: float = 0.0
    net_profit_percent: float = 0.0
    deposit_percent: float = 50.0
    quote_validity_days: int = 30

    @field_validator(
        "default_markup_percentage",
        "tax_rate_percentage",
        "labor_markup_percent",
        "material_markup_percent",
        "overhead_percent",
        "net_profit_percent",
        "deposit_percent",
        mode="before",
    )
    @classmethod
    def parse_percent(cls, v: Any) -> float:
        return coerce_number(v)
