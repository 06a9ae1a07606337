"""Factory functions for creating pre-configured QuoteEngine instances."""

from __future__ import annotations

from cadence.data.repository import CatalogRepository
from cadence.data.seed import (
    SEED_CONTRACTOR_SETTINGS,
    SEED_PRICING_SCHEMES,
    SEED_PRODUCT_CONFIGS,
)
from cadence.engine import QuoteEngine


def create_default_engine() -> QuoteEngine:
    """Create a QuoteEngine wired up with the built-in seed catalog.

    The seed catalog holds one demo contractor (tenant 1) with a scheme of
    every recognised type, so callers can try the engine without a
    database.

    Example::

        from cadence import create_default_engine, QuoteRequest

        engine = create_default_engine()
        quote = engine.calculate(request, tenant_id=1)
    """
    repository = CatalogRepository(
        pricing_schemes=SEED_PRICING_SCHEMES,
        product_configs=SEED_PRODUCT_CONFIGS,
        contractor_settings=SEED_CONTRACTOR_SETTINGS,
    )
    return QuoteEngine(repository)
