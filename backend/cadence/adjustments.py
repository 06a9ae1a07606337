"""Markup, overhead, profit, tax, and deposit applied to base pricing.

The chain is applied in order, each step compounding on the last:

1. Labor markup on base labor, material markup on base material.
2. Overhead on the marked-up subtotal.
3. Profit on the subtotal after overhead.
4. Tax on the subtotal after profit.
5. Deposit as a share of the total; the balance is the rest.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cadence.models.builder import AdjustedPricing

if TYPE_CHECKING:
    from cadence.models.builder import BasePricing
    from cadence.models.catalog import ContractorSettings


def apply_markups_and_tax(
    base: BasePricing, settings: ContractorSettings
) -> AdjustedPricing:
    """Carry base pricing through the contractor's adjustment chain."""
    labor = base.labor_cost or 0.0
    material = base.material_cost or 0.0

    labor_markup = labor * (settings.labor_markup_percent / 100)
    labor_with_markup = labor + labor_markup

    material_markup = material * (settings.material_markup_percent / 100)
    material_with_markup = material + material_markup

    subtotal_before_overhead = labor_with_markup + material_with_markup
    overhead = subtotal_before_overhead * (settings.overhead_percent / 100)
    subtotal_before_profit = subtotal_before_overhead + overhead

    profit = subtotal_before_profit * (settings.net_profit_percent / 100)
    subtotal = subtotal_before_profit + profit

    tax = subtotal * (settings.tax_rate_percentage / 100)
    total = subtotal + tax

    deposit = total * (settings.deposit_percent / 100)

    return AdjustedPricing(
        model=base.model,
        labor_total=labor,
        material_total=material,
        labor_markup_percent=settings.labor_markup_percent,
        labor_markup_amount=labor_markup,
        labor_cost_with_markup=labor_with_markup,
        material_markup_percent=settings.material_markup_percent,
        material_markup_amount=material_markup,
        material_cost_with_markup=material_with_markup,
        overhead_percent=settings.overhead_percent,
        overhead=overhead,
        subtotal_before_profit=subtotal_before_profit,
        profit_margin_percent=settings.net_profit_percent,
        profit_amount=profit,
        subtotal=subtotal,
        tax_percent=settings.tax_rate_percentage,
        tax=tax,
        total=total,
        deposit_percent=settings.deposit_percent,
        deposit=deposit,
        balance=total - deposit,
        quote_validity_days=settings.quote_validity_days or 30,
        total_sqft=base.total_sqft,
        total_hours=base.total_hours,
        gallons=base.gallons,
        breakdown=base.breakdown,
    )
