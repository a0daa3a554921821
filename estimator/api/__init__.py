"""Registration of FastAPI routers."""

from __future__ import annotations

from fastapi import FastAPI

from estimator.api.routes.catalog import router as catalog_router
from estimator.api.routes.health import router as health_router
from estimator.api.routes.sessions import router as sessions_router


def register_routes(application: FastAPI) -> None:
    """Attaches all API modules to the FastAPI application."""
    application.include_router(health_router)
    application.include_router(catalog_router, prefix="/api/v1")
    application.include_router(sessions_router, prefix="/api/v1")
