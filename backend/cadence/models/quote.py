"""Quote input models: areas, surfaces, and calculation requests."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator

from cadence.models.base import CamelModel, RecordId, coerce_number
from cadence.models.enums import JobType


class Surface(CamelModel):
    """One paintable unit within an area, e.g. "living room walls".

    ``sqft`` doubles as a generic unit count for unit-priced schemes
    (doors, windows).
    """

    surface_type: str = Field(default="", alias="type")
    sqft: float = 0.0
    selected_product: RecordId | None = None
    selected_sheen: str | None = None
    selected: bool = False

    @field_validator("sqft", mode="before")
    @classmethod
    def parse_sqft(cls, v: Any) -> float:
        return coerce_number(v)

    @property
    def is_priceable(self) -> bool:
        """Selected, with both a product and a sheen chosen."""
        return bool(self.selected and self.selected_product and self.selected_sheen)


class Area(CamelModel):
    """A named grouping of surfaces, typically a room."""

    id: RecordId | None = None
    name: str = ""
    job_type: str = JobType.INTERIOR.value
    surfaces: list[Surface] = Field(default_factory=list)


class QuoteRequest(CamelModel):
    """Input to the quote aggregator.

    ``areas`` and ``pricing_scheme_id`` are optional at the model level so
    that their absence surfaces as a typed ``ValidationError`` from the
    engine rather than a schema error.
    """

    areas: list[Area] | None = None
    pricing_scheme_id: RecordId | None = None
    apply_zip_markup: bool = False
    zip_markup_percent: float | None = None

    @field_validator("zip_markup_percent", mode="before")
    @classmethod
    def parse_zip_markup_percent(cls, v: Any) -> float | None:
        if v is None:
            return None
        return coerce_number(v)


class CompareRequest(QuoteRequest):
    """Price the same areas under several pricing schemes side by side."""

    pricing_scheme_ids: list[RecordId] = Field(default_factory=list)
