"""Service catalog and stateless pricing endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from estimator.models.estimate import (
    CatalogResponse,
    CategoryResponse,
    PricingRequest,
    PricingResponse,
    ServiceResponse,
    TierResponse,
)
from estimator.services.catalog.selection import ServiceSelection
from estimator.services.pricing.calculator import pricing_calculator


router = APIRouter(tags=["catalog"])


@router.get("/catalog", response_model=CatalogResponse)
async def get_catalog() -> CatalogResponse:
    """Lists services grouped by category along with pricing tiers."""
    catalog = pricing_calculator.catalog
    defaults = catalog.default_selection()
    return CatalogResponse(
        categories=[
            CategoryResponse(
                category=category.value,
                services=[
                    ServiceResponse.from_definition(service, defaults[service.key])
                    for service in services
                ],
            )
            for category, services in catalog.by_category().items()
        ],
        tiers=[TierResponse.from_tier(tier) for tier in pricing_calculator.tiers],
    )


@router.post("/pricing", response_model=PricingResponse)
async def calculate_pricing(data: PricingRequest) -> PricingResponse:
    """Prices an enrollment and selection without keeping any state."""
    selection = ServiceSelection(pricing_calculator.catalog, data.selected)
    result = pricing_calculator.calculate(data.enrollment, selection)
    return PricingResponse.from_result(result)
