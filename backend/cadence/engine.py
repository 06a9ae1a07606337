"""Quote aggregation for the Cadence pricing engine.

``calculate_quote`` prices every selected surface of every area and rolls
the results up into a summary:

1. **Defaults**: Contractor markup and tax come from the settings in the
   context (15% markup, 0% tax when no settings record exists).
2. **Per-surface pricing**: For each selected surface with a product and
   sheen chosen, look up the product configuration and sheen, resolve the
   labor rate, and apply the scheme's formula. Surfaces whose product or
   sheen cannot be found are skipped, not reported as errors.
3. **Totals**: ``subtotal = labor + material``; markup at the contractor
   default; optional ZIP markup on ``subtotal + markup``; tax on
   everything before it.

Nothing is rounded here. Rounding is a presentation concern.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from cadence.adjustments import apply_markups_and_tax
from cadence.builder import calculate_pricing
from cadence.exceptions import NotFoundError, ValidationError
from cadence.models.base import RecordId, same_id
from cadence.models.breakdown import (
    AreaBreakdown,
    PricingSchemeRef,
    QuoteBreakdown,
    QuoteSummary,
    SurfaceLineItem,
)
from cadence.models.catalog import (
    DEFAULT_MARKUP_PERCENT,
    DEFAULT_TAX_PERCENT,
    ContractorSettings,
    PricingScheme,
    ProductConfig,
)
from cadence.models.enums import JobType
from cadence.rates import resolve_labor_rate
from cadence.strategies import compute_surface_cost

if TYPE_CHECKING:
    from cadence.data.repository import CatalogRepository
    from cadence.models.builder import AdjustedPricing, BuilderArea, BuilderRules
    from cadence.models.quote import Area, QuoteRequest

logger = logging.getLogger(__name__)

ENGINE_VERSION = "0.1.0"


@dataclass(frozen=True)
class QuoteContext:
    """Everything the aggregator needs that the caller fetched beforehand.

    ``tenant_id`` of ``None`` disables the ownership check, for callers
    that have already scoped their records.
    """

    tenant_id: RecordId | None = None
    pricing_schemes: Sequence[PricingScheme] = field(default_factory=tuple)
    product_configs: Sequence[ProductConfig] = field(default_factory=tuple)
    settings: ContractorSettings | None = None

    def _owns(self, owner_id: RecordId | None) -> bool:
        return self.tenant_id is None or same_id(owner_id, self.tenant_id)

    def find_pricing_scheme(self, scheme_id: RecordId) -> PricingScheme | None:
        """Active scheme with this id owned by the tenant, if any."""
        for scheme in self.pricing_schemes:
            if (
                same_id(scheme.id, scheme_id)
                and scheme.is_active
                and self._owns(scheme.tenant_id)
            ):
                return scheme
        return None

    def find_product_config(self, product_id: RecordId) -> ProductConfig | None:
        """Active product configuration with this id owned by the tenant, if any."""
        for config in self.product_configs:
            if (
                same_id(config.id, product_id)
                and config.is_active
                and self._owns(config.tenant_id)
            ):
                return config
        return None

    @property
    def default_markup_percent(self) -> float:
        if self.settings is None:
            return DEFAULT_MARKUP_PERCENT
        return self.settings.default_markup_percentage

    @property
    def default_tax_percent(self) -> float:
        if self.settings is None:
            return DEFAULT_TAX_PERCENT
        return self.settings.tax_rate_percentage


def calculate_quote(request: QuoteRequest, context: QuoteContext) -> QuoteBreakdown:
    """Price a quote's areas under its pricing scheme.

    Args:
        request: Areas, pricing scheme id, and ZIP markup options.
        context: Pricing schemes, product configurations, and contractor
            settings already fetched for the caller's tenant.

    Returns:
        Per-area line items, the aggregate summary, and the identity of
        the pricing scheme used.

    Raises:
        ValidationError: If ``areas`` is empty or missing, or no pricing
            scheme id was given.
        NotFoundError: If the pricing scheme does not exist, is inactive,
            or belongs to another tenant.
    """
    if not request.areas:
        msg = "areas array required"
        raise ValidationError(msg)

    if request.pricing_scheme_id is None or request.pricing_scheme_id == "":
        msg = "pricing scheme id required"
        raise ValidationError(msg)

    pricing_scheme = context.find_pricing_scheme(request.pricing_scheme_id)
    if pricing_scheme is None:
        msg = "pricing scheme not found"
        raise NotFoundError(msg)

    default_markup = context.default_markup_percent
    default_tax = context.default_tax_percent

    labor_total = 0.0
    material_total = 0.0
    area_breakdown: list[AreaBreakdown] = []

    for area in request.areas:
        items = _price_area(area, pricing_scheme, context, default_markup)
        for item in items:
            labor_total += item.labor_cost
            material_total += item.material_cost
        if items:
            area_breakdown.append(
                AreaBreakdown(area_id=area.id, area_name=area.name, surfaces=items)
            )

    summary = _summarize(
        labor_total=labor_total,
        material_total=material_total,
        markup_percent=default_markup,
        tax_percent=default_tax,
        apply_zip_markup=request.apply_zip_markup,
        zip_markup_percent=request.zip_markup_percent or 0.0,
    )

    return QuoteBreakdown(
        breakdown=area_breakdown,
        summary=summary,
        pricing_scheme=PricingSchemeRef(
            id=pricing_scheme.id,
            name=pricing_scheme.name,
            type=pricing_scheme.type,
        ),
    )


def _price_area(
    area: Area,
    pricing_scheme: PricingScheme,
    context: QuoteContext,
    default_markup: float,
) -> list[SurfaceLineItem]:
    """Price the selected surfaces of one area, skipping unpriceable ones."""
    items: list[SurfaceLineItem] = []

    for surface in area.surfaces:
        if not surface.is_priceable:
            continue

        config = context.find_product_config(surface.selected_product)
        if config is None:
            logger.debug(
                "Skipping %r in area %r: product config %s not found",
                surface.surface_type,
                area.name,
                surface.selected_product,
            )
            continue

        sheen = config.find_sheen(surface.selected_sheen)
        if sheen is None:
            logger.debug(
                "Skipping %r in area %r: sheen %r not offered by product %s",
                surface.surface_type,
                area.name,
                surface.selected_sheen,
                config.id,
            )
            continue

        labor_rate = resolve_labor_rate(
            config.labor_rates, surface.surface_type, area.job_type
        )
        cost = compute_surface_cost(
            sqft=surface.sqft,
            labor_rate=labor_rate,
            sheen_price=sheen.price,
            sheen_coverage=sheen.coverage,
            pricing_scheme=pricing_scheme,
            surface_type=surface.surface_type,
        )

        items.append(
            SurfaceLineItem(
                surface_type=surface.surface_type,
                sqft=surface.sqft,
                sheen=surface.selected_sheen,
                labor_cost=cost.labor_cost,
                material_cost=cost.material_cost,
                subtotal=cost.total,
                markup_percent=config.default_markup or default_markup,
            )
        )

    return items


def _summarize(
    *,
    labor_total: float,
    material_total: float,
    markup_percent: float,
    tax_percent: float,
    apply_zip_markup: bool,
    zip_markup_percent: float,
) -> QuoteSummary:
    """Apply markup, ZIP markup, and tax to the labor and material totals.

    Markup uses the contractor-wide rate even when individual products
    carry their own override.
    """
    subtotal = labor_total + material_total
    markup = subtotal * (markup_percent / 100)
    zip_markup = (
        (subtotal + markup) * (zip_markup_percent / 100)
        if apply_zip_markup and zip_markup_percent
        else 0.0
    )
    tax = (subtotal + markup + zip_markup) * (tax_percent / 100)
    total = subtotal + markup + zip_markup + tax

    return QuoteSummary(
        labor_total=labor_total,
        material_total=material_total,
        subtotal=subtotal,
        markup=markup,
        markup_percent=markup_percent,
        zip_markup=zip_markup,
        zip_markup_percent=zip_markup_percent,
        tax=tax,
        tax_percent=tax_percent,
        total=total,
    )


class QuoteEngine:
    """Quote calculator bound to a catalog repository.

    The repository supplies the tenant's schemes, product configurations,
    and settings; the calculation itself is ``calculate_quote``.

    Args:
        repository: Read-only catalog of pricing schemes, product
            configurations, and contractor settings.

    Example::

        from cadence import create_default_engine, QuoteRequest

        engine = create_default_engine()
        quote = engine.calculate(QuoteRequest.model_validate(payload), tenant_id=1)
    """

    def __init__(self, repository: CatalogRepository) -> None:
        self._repository = repository

    @property
    def repository(self) -> CatalogRepository:
        return self._repository

    def calculate(
        self, request: QuoteRequest, tenant_id: RecordId | None
    ) -> QuoteBreakdown:
        """Price a quote for a tenant. See ``calculate_quote``."""
        context = self._repository.context_for(tenant_id)
        return calculate_quote(request, context)

    def compare(
        self,
        request: QuoteRequest,
        scheme_ids: Sequence[RecordId],
        tenant_id: RecordId | None,
    ) -> list[QuoteBreakdown]:
        """Price the same areas under each scheme, in the order given.

        Raises:
            ValidationError: If no scheme ids are given or the areas are
                empty.
            NotFoundError: On the first scheme that cannot be resolved.
        """
        if not scheme_ids:
            msg = "pricing scheme ids required"
            raise ValidationError(msg)

        context = self._repository.context_for(tenant_id)
        results: list[QuoteBreakdown] = []
        for scheme_id in scheme_ids:
            scoped = request.model_copy(update={"pricing_scheme_id": scheme_id})
            results.append(calculate_quote(scoped, context))
        return results

    def price_builder_quote(
        self,
        model: str,
        tenant_id: RecordId | None,
        areas: Sequence[BuilderArea] = (),
        *,
        rules: BuilderRules | None = None,
        home_sqft: float = 0.0,
        job_scope: str = JobType.INTERIOR.value,
    ) -> AdjustedPricing:
        """Price a whole quote with a builder model and the tenant's adjustments.

        Tenants without a settings record get no markups, overhead,
        profit, or tax.

        Raises:
            ValidationError: If ``model`` is not a recognised pricing model
                or legacy scheme type.
        """
        base = calculate_pricing(
            model, rules, areas, home_sqft=home_sqft, job_scope=job_scope
        )
        settings = self._repository.get_settings(tenant_id) or ContractorSettings()
        return apply_markups_and_tax(base, settings)
