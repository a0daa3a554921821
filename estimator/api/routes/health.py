"""Service health endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from estimator import __version__
from estimator.services.catalog.selection import service_catalog


router = APIRouter(tags=["health"])


@router.get("/health", summary="Quick availability check")
async def health() -> dict[str, str]:
    """Returns a short application status."""
    return {
        "status": "ok",
        "version": __version__,
        "services": str(len(service_catalog)),
    }
