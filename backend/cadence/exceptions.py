"""Custom exception hierarchy for the Cadence pricing engine."""

from __future__ import annotations


class CadenceError(Exception):
    """Base exception for all Cadence errors."""

    @property
    def kind(self) -> str:
        """Error kind name callers map to a user-facing response."""
        return type(self).__name__


class ValidationError(CadenceError):
    """Raised when required quote input is missing or malformed."""


class NotFoundError(CadenceError):
    """Raised when a referenced pricing scheme does not exist for the tenant."""


class CatalogLoadError(CadenceError):
    """Raised when a catalog file cannot be read or parsed."""
