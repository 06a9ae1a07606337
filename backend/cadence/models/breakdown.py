"""Cost breakdown output models for the Cadence pricing engine."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from cadence.models.base import CamelModel, RecordId


class SurfaceCost(CamelModel):
    """Cost of a single surface under one pricing scheme."""

    labor_cost: float = 0.0
    material_cost: float = 0.0
    total: float = 0.0


class SurfaceLineItem(CamelModel):
    """A priced surface within an area.

    ``markup_percent`` records the rate that applies to this line (product
    override or contractor default). It is informational: the summary
    markup is always computed at the contractor default.
    """

    surface_type: str
    sqft: float
    sheen: str
    labor_cost: float
    material_cost: float
    subtotal: float
    markup_percent: float


class AreaBreakdown(CamelModel):
    """Priced surfaces of one area."""

    area_id: RecordId | None = None
    area_name: str = ""
    surfaces: list[SurfaceLineItem] = Field(default_factory=list)


class QuoteSummary(CamelModel):
    """Aggregate figures for a quote. Values are unrounded."""

    labor_total: float
    material_total: float
    subtotal: float
    markup: float
    markup_percent: float
    zip_markup: float
    zip_markup_percent: float
    tax: float
    tax_percent: float
    total: float


class PricingSchemeRef(CamelModel):
    """Identity of the scheme a quote was priced with."""

    id: RecordId
    name: str
    type: str


class QuoteBreakdown(CamelModel):
    """Complete output of a quote calculation.

    Carries no timestamps or other per-call state, so identical inputs
    serialise to identical JSON.
    """

    breakdown: list[AreaBreakdown]
    summary: QuoteSummary
    pricing_scheme: PricingSchemeRef

    def line_items(self) -> list[SurfaceLineItem]:
        """All line items across areas, in breakdown order."""
        return [item for area in self.breakdown for item in area.surfaces]

    def zero_cost_items(self) -> list[SurfaceLineItem]:
        """Line items that priced at zero and deserve a second look."""
        return [item for item in self.line_items() if item.subtotal == 0]

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat, display-formatted summary for the frontend."""
        from cadence.formatting import format_currency, format_percent

        s = self.summary
        return {
            "pricing_scheme": self.pricing_scheme.name,
            "pricing_scheme_type": self.pricing_scheme.type,
            "num_areas": len(self.breakdown),
            "num_line_items": len(self.line_items()),
            "num_zero_cost_items": len(self.zero_cost_items()),
            "labor_total_formatted": format_currency(s.labor_total),
            "material_total_formatted": format_currency(s.material_total),
            "subtotal_formatted": format_currency(s.subtotal),
            "markup_formatted": (
                f"{format_currency(s.markup)} ({format_percent(s.markup_percent)})"
            ),
            "zip_markup_formatted": (
                f"{format_currency(s.zip_markup)} "
                f"({format_percent(s.zip_markup_percent)})"
            ),
            "tax_formatted": f"{format_currency(s.tax)} ({format_percent(s.tax_percent)})",
            "total_formatted": format_currency(s.total),
        }
