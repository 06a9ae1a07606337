"""Dependency construction for FastAPI endpoints."""

from __future__ import annotations

import logging
import os

from cadence.data.repository import CatalogRepository
from cadence.engine import QuoteEngine
from cadence.factory import create_default_engine

logger = logging.getLogger(__name__)

CATALOG_PATH_ENV = "CADENCE_CATALOG_PATH"


def create_engine() -> QuoteEngine:
    """Create a QuoteEngine from environment configuration.

    Reads ``CADENCE_CATALOG_PATH`` for a JSON catalog file. Falls back to
    the built-in seed catalog when the variable is unset.

    Raises:
        CatalogLoadError: If the configured catalog cannot be loaded.
    """
    catalog_path = os.environ.get(CATALOG_PATH_ENV, "").strip()
    if not catalog_path:
        logger.info("%s not set; using seed catalog", CATALOG_PATH_ENV)
        return create_default_engine()

    logger.info("Loading catalog from %s", catalog_path)
    return QuoteEngine(CatalogRepository.from_json_file(catalog_path))
