"""Estimate models shared by services and API routes."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, field_validator

from estimator.core.pricing_rules import (
    OPEN_ENDED_MAX,
    PricingTier,
    ServiceDefinition,
)

if TYPE_CHECKING:
    from estimator.services.pricing.calculator import CalculationResult


def _coerce_text(value: object) -> object:
    if value is None:
        return ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return value


class ClientInfo(BaseModel):
    """School and contact details entered during the call."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    school_name: str = ""
    contact_name: str = ""
    contact_email: str = ""
    enrollment: str = Field(
        default="",
        description="Enrollment as typed, may be blank or invalid",
    )

    @field_validator(
        "school_name",
        "contact_name",
        "contact_email",
        "enrollment",
        mode="before",
    )
    @classmethod
    def coerce_text(cls, value: object) -> object:
        """Accepts missing values and numbers as text."""
        return _coerce_text(value)


class ServiceResponse(BaseModel):
    key: str
    name: str
    category: str
    hours: float
    tasks: list[str]
    base_included: bool
    complexity_multiplier: float | None = None
    selected: bool | None = None

    @classmethod
    def from_definition(
        cls,
        service: ServiceDefinition,
        selected: bool | None = None,
    ) -> "ServiceResponse":
        """Builds a response item from a catalog entry."""
        multiplier = service.complexity_multiplier
        return cls(
            key=service.key,
            name=service.name,
            category=service.category.value,
            hours=float(service.hours),
            tasks=list(service.tasks),
            base_included=service.base_included,
            complexity_multiplier=float(multiplier) if multiplier is not None else None,
            selected=selected,
        )


class TierResponse(BaseModel):
    label: str
    min_enrollment: int
    max_enrollment: int | None
    base_price: int

    @classmethod
    def from_tier(cls, tier: PricingTier) -> "TierResponse":
        """Builds a response item; the open-ended tier has no upper bound."""
        max_enrollment: int | None = tier.max_enrollment
        if tier.max_enrollment == OPEN_ENDED_MAX:
            max_enrollment = None
        return cls(
            label=tier.label,
            min_enrollment=tier.min_enrollment,
            max_enrollment=max_enrollment,
            base_price=tier.base_price,
        )


class CategoryResponse(BaseModel):
    category: str
    services: list[ServiceResponse]


class CatalogResponse(BaseModel):
    categories: list[CategoryResponse]
    tiers: list[TierResponse]


class PricingRequest(BaseModel):
    enrollment: str = ""
    selected: dict[str, bool] | None = Field(
        default=None,
        description="Service flags applied on top of the catalog defaults",
    )

    @field_validator("enrollment", mode="before")
    @classmethod
    def coerce_enrollment_text(cls, value: object) -> object:
        """Accepts numeric enrollment values."""
        return _coerce_text(value)


class PricingResponse(BaseModel):
    enrollment: int
    tier: TierResponse
    total_hours: float
    additional_cost: float
    estimated_monthly: int
    estimated_annual: int
    selected_services: list[ServiceResponse]

    @classmethod
    def from_result(cls, result: "CalculationResult") -> "PricingResponse":
        """Builds a response from a calculation result."""
        return cls(
            enrollment=result.enrollment,
            tier=TierResponse.from_tier(result.tier),
            total_hours=float(result.total_hours),
            additional_cost=float(result.additional_cost),
            estimated_monthly=result.estimated_monthly,
            estimated_annual=result.estimated_annual,
            selected_services=[
                ServiceResponse.from_definition(service, selected=True)
                for service in result.selected_services
            ],
        )


class ClientUpdate(BaseModel):
    school_name: str | None = None
    contact_name: str | None = None
    contact_email: str | None = None
    enrollment: str | None = None

    @field_validator("enrollment", mode="before")
    @classmethod
    def coerce_enrollment_text(cls, value: object) -> object:
        """Accepts numeric enrollment values."""
        if value is None:
            return None
        return _coerce_text(value)


class SessionResponse(BaseModel):
    session_id: str
    created_at: str
    client: ClientInfo
    services: list[ServiceResponse]
    pricing: PricingResponse


class ToggleResponse(BaseModel):
    key: str
    selected: bool
    pricing: PricingResponse
