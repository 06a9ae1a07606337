"""Catalog repository for looking up pricing configuration by tenant."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, TypeVar

from pydantic import Field
from pydantic import ValidationError as PydanticValidationError

from cadence.engine import QuoteContext
from cadence.exceptions import CatalogLoadError
from cadence.models.base import CamelModel, RecordId, same_id
from cadence.models.catalog import ContractorSettings, PricingScheme, ProductConfig

if TYPE_CHECKING:
    from collections.abc import Iterable

_Record = TypeVar("_Record", PricingScheme, ProductConfig, ContractorSettings)


class CatalogFile(CamelModel):
    """On-disk JSON layout of a catalog."""

    pricing_schemes: list[PricingScheme] = Field(default_factory=list)
    product_configs: list[ProductConfig] = Field(default_factory=list)
    contractor_settings: list[ContractorSettings] = Field(default_factory=list)


class CatalogRepository:
    """Read-only, in-memory store of pricing schemes, product configs, and settings.

    Stands in for the host application's data layer: it scopes records to
    a tenant and hands the engine an explicit ``QuoteContext``.
    """

    def __init__(
        self,
        pricing_schemes: Iterable[PricingScheme] = (),
        product_configs: Iterable[ProductConfig] = (),
        contractor_settings: Iterable[ContractorSettings] = (),
    ) -> None:
        self._schemes = tuple(pricing_schemes)
        self._products = tuple(product_configs)
        self._settings = tuple(contractor_settings)

    @classmethod
    def from_json_file(cls, path: str | Path) -> CatalogRepository:
        """Load a catalog from a JSON file.

        Raises:
            CatalogLoadError: If the file is missing, not JSON, or does not
                match the catalog layout.
        """
        catalog_path = Path(path)
        try:
            raw = json.loads(catalog_path.read_text(encoding="utf-8"))
            catalog = CatalogFile.model_validate(raw)
        except (OSError, json.JSONDecodeError, PydanticValidationError) as exc:
            msg = f"Could not load catalog from {catalog_path}: {exc}"
            raise CatalogLoadError(msg) from exc

        return cls(
            pricing_schemes=catalog.pricing_schemes,
            product_configs=catalog.product_configs,
            contractor_settings=catalog.contractor_settings,
        )

    def list_pricing_schemes(
        self, tenant_id: RecordId | None, *, active_only: bool = True
    ) -> list[PricingScheme]:
        """Pricing schemes owned by the tenant."""
        return [
            scheme
            for scheme in self._for_tenant(self._schemes, tenant_id)
            if scheme.is_active or not active_only
        ]

    def get_pricing_scheme(
        self, scheme_id: RecordId, tenant_id: RecordId | None
    ) -> PricingScheme | None:
        """Active pricing scheme with this id owned by the tenant.

        Returns None if there is no such scheme.
        """
        for scheme in self.list_pricing_schemes(tenant_id):
            if same_id(scheme.id, scheme_id):
                return scheme
        return None

    def get_product_config(
        self, product_id: RecordId, tenant_id: RecordId | None
    ) -> ProductConfig | None:
        """Active product configuration with this id owned by the tenant."""
        for config in self._for_tenant(self._products, tenant_id):
            if same_id(config.id, product_id) and config.is_active:
                return config
        return None

    def get_settings(self, tenant_id: RecordId | None) -> ContractorSettings | None:
        """The tenant's contractor settings, or None if it has none."""
        matches = self._for_tenant(self._settings, tenant_id)
        return matches[0] if matches else None

    def context_for(self, tenant_id: RecordId | None) -> QuoteContext:
        """Everything the engine needs to price a quote for this tenant."""
        return QuoteContext(
            tenant_id=tenant_id,
            pricing_schemes=self._for_tenant(self._schemes, tenant_id),
            product_configs=self._for_tenant(self._products, tenant_id),
            settings=self.get_settings(tenant_id),
        )

    @staticmethod
    def _for_tenant(
        records: tuple[_Record, ...], tenant_id: RecordId | None
    ) -> tuple[_Record, ...]:
        if tenant_id is None:
            return records
        return tuple(r for r in records if same_id(r.tenant_id, tenant_id))
