"""Catalog data layer for the Cadence pricing engine."""

from cadence.data.repository import CatalogFile, CatalogRepository

__all__ = [
    "CatalogFile",
    "CatalogRepository",
]
