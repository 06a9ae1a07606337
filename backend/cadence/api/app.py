"""FastAPI application: create_app factory with /api endpoints."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, TypeVar

from dotenv import load_dotenv
from fastapi import FastAPI, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware

# Load .env from project root or backend/
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from cadence.engine import ENGINE_VERSION
from cadence.exceptions import CadenceError, NotFoundError, ValidationError
from cadence.models.builder import BuilderPricingRequest  # noqa: TCH001 (FastAPI resolves at runtime)
from cadence.models.quote import CompareRequest, QuoteRequest  # noqa: TCH001
from cadence.rules import generate_rules_summary

if TYPE_CHECKING:
    from collections.abc import Callable

    from cadence.engine import QuoteEngine

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


def _http_error(exc: CadenceError) -> HTTPException:
    """Map a library error onto an HTTP error response."""
    if isinstance(exc, ValidationError):
        return HTTPException(status_code=400, detail=str(exc))
    if isinstance(exc, NotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    logger.exception("Unexpected pricing error")
    return HTTPException(status_code=500, detail=str(exc))


def _run(call: Callable[[], _T]) -> _T:
    try:
        return call()
    except CadenceError as exc:
        raise _http_error(exc) from exc


def create_app(*, engine: QuoteEngine | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built quote engine for dependency injection (e.g.
        tests). If not provided, one is created from environment
        variables on first request.
    """
    app = FastAPI(title="Cadence", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own catalog
    app.state.engine = engine

    def _get_engine() -> QuoteEngine:
        eng: QuoteEngine | None = app.state.engine
        if eng is not None:
            return eng
        from cadence.api.deps import create_engine

        eng = _run(create_engine)
        app.state.engine = eng
        return eng

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    # ------------------------------------------------------------------
    # POST /api/quotes/calculate
    # ------------------------------------------------------------------

    @app.post("/api/quotes/calculate")
    def calculate(
        request: QuoteRequest,
        x_tenant_id: str = Header(...),
    ) -> dict[str, Any]:
        eng = _get_engine()
        result = _run(lambda: eng.calculate(request, tenant_id=x_tenant_id))
        return {
            "success": True,
            "data": result.model_dump(mode="json", by_alias=True),
        }

    # ------------------------------------------------------------------
    # POST /api/quotes/compare
    # ------------------------------------------------------------------

    @app.post("/api/quotes/compare")
    def compare(
        request: CompareRequest,
        x_tenant_id: str = Header(...),
    ) -> dict[str, Any]:
        eng = _get_engine()
        results = _run(
            lambda: eng.compare(
                request, request.pricing_scheme_ids, tenant_id=x_tenant_id
            )
        )
        return {
            "success": True,
            "data": [r.model_dump(mode="json", by_alias=True) for r in results],
        }

    # ------------------------------------------------------------------
    # POST /api/quotes/builder-pricing
    # ------------------------------------------------------------------

    @app.post("/api/quotes/builder-pricing")
    def builder_pricing(
        request: BuilderPricingRequest,
        x_tenant_id: str = Header(...),
    ) -> dict[str, Any]:
        eng = _get_engine()
        result = _run(
            lambda: eng.price_builder_quote(
                request.model,
                x_tenant_id,
                request.areas,
                rules=request.rules,
                home_sqft=request.home_sqft,
                job_scope=request.job_scope,
            )
        )
        return {
            "success": True,
            "data": result.model_dump(mode="json", by_alias=True),
        }

    # ------------------------------------------------------------------
    # GET /api/pricing-schemes/{scheme_id}/summary
    # ------------------------------------------------------------------

    @app.get("/api/pricing-schemes/{scheme_id}/summary")
    def pricing_scheme_summary(
        scheme_id: str,
        x_tenant_id: str = Header(...),
    ) -> dict[str, Any]:
        eng = _get_engine()
        scheme = eng.repository.get_pricing_scheme(scheme_id, x_tenant_id)
        if scheme is None:
            raise HTTPException(status_code=404, detail="pricing scheme not found")
        return {
            "success": True,
            "data": {
                **scheme.model_dump(mode="json", by_alias=True),
                "rulesSummary": generate_rules_summary(scheme.pricing_rules),
            },
        }

    return app
