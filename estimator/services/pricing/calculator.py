"""Monthly and annual fee estimation for school accounting services."""

from __future__ import annotations

import re

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from loguru import logger

from estimator.core.exceptions import InvalidEnrollmentError
from estimator.core.pricing_rules import (
    BILLING_BLOCK_HOURS,
    BILLING_BLOCK_PRICE,
    PRICING_TIERS,
    PricingTier,
    ServiceDefinition,
    validate_tiers,
)
from estimator.services.catalog.selection import (
    ServiceCatalog,
    ServiceSelection,
    service_catalog,
)
from estimator.utils.text_formatters import format_currency, format_hours

LEADING_INTEGER_PATTERN = re.compile(r"\s*([+-]?[0-9]+)")


@dataclass(frozen=True)
class CalculationResult:
    """Result of a pricing calculation."""

    enrollment: int
    tier: PricingTier
    total_hours: Decimal
    additional_cost: Decimal
    estimated_monthly: int
    estimated_annual: int
    selected_services: tuple[ServiceDefinition, ...]

    def format_summary(self) -> str:
        """Formats a short summary for live display."""
        lines: list[str] = [
            f"Tier: {self.tier.label}",
            f"Monthly Service Fee: {format_currency(self.estimated_monthly)}",
            f"Annual Investment: {format_currency(self.estimated_annual)}",
            f"Total Hours/Month: {format_hours(self.total_hours)} hours",
        ]
        return "\n".join(lines)


def parse_enrollment(raw: object) -> int:
    """Reads the leading integer of the enrollment text.

    Leading whitespace and a sign are accepted and anything after the
    digits is ignored, so "75 students" and "75.5" both read as 75.

    Raises:
        InvalidEnrollmentError: If no digits lead the text or the value is negative.
    """
    if isinstance(raw, bool):
        raise InvalidEnrollmentError(raw)
    if isinstance(raw, int):
        value = raw
    else:
        match = LEADING_INTEGER_PATTERN.match(str(raw if raw is not None else ""))
        if match is None:
            raise InvalidEnrollmentError(raw)
        value = int(match.group(1))
    if value < 0:
        raise InvalidEnrollmentError(raw)
    return value


def coerce_enrollment(raw: object) -> int:
    """Parses enrollment text, treating anything invalid as zero."""
    try:
        return parse_enrollment(raw)
    except InvalidEnrollmentError as exc:
        logger.debug("Enrollment {!r} treated as 0: {}", raw, exc)
        return 0


class PricingCalculator:
    """Estimates the monthly fee for the selected services."""

    def __init__(
        self,
        catalog: ServiceCatalog | None = None,
        tiers: list[PricingTier] | None = None,
    ) -> None:
        self._catalog = catalog or service_catalog
        self._tiers = PRICING_TIERS if tiers is None else tiers
        validate_tiers(self._tiers)

    @property
    def catalog(self) -> ServiceCatalog:
        return self._catalog

    @property
    def tiers(self) -> list[PricingTier]:
        return list(self._tiers)

    def find_tier(self, enrollment: int) -> PricingTier:
        """Picks the first tier whose bracket contains the enrollment."""
        for tier in self._tiers:
            if tier.contains(enrollment):
                return tier
        logger.warning(
            "No pricing tier matched enrollment {}, falling back to '{}'",
            enrollment,
            self._tiers[0].label,
        )
        return self._tiers[0]

    def additional_cost(self, service: ServiceDefinition) -> Decimal:
        """Monthly cost a service adds on top of the tier base price."""
        if service.base_included:
            return Decimal(0)
        return (
            service.hours / BILLING_BLOCK_HOURS * BILLING_BLOCK_PRICE * service.multiplier
        )

    def calculate(
        self,
        enrollment_raw: object,
        selection: ServiceSelection | Mapping[str, bool],
    ) -> CalculationResult:
        """Calculates tier, hours and fees for a selection snapshot.

        Args:
            enrollment_raw: Enrollment as entered by the operator.
            selection: Selection state or a key to flag mapping. Catalog keys
                missing from the mapping count as not selected.

        Returns:
            Calculation result for display and proposal rendering.

        Raises:
            UnknownServiceKeyError: If the mapping names a key outside the catalog.
        """
        if isinstance(selection, ServiceSelection):
            flags = selection.snapshot()
        else:
            flags = selection
            self._catalog.ensure_known(flags)

        enrollment = coerce_enrollment(enrollment_raw)
        tier = self.find_tier(enrollment)

        selected_services = tuple(
            service for service in self._catalog if flags.get(service.key, False)
        )
        total_hours = sum(
            (service.hours for service in selected_services), Decimal(0)
        )
        additional_cost = sum(
            (self.additional_cost(service) for service in selected_services),
            Decimal(0),
        )

        estimated_monthly = int(
            (tier.base_price + additional_cost).quantize(
                Decimal(1), rounding=ROUND_HALF_UP
            )
        )
        estimated_annual = estimated_monthly * 12

        result = CalculationResult(
            enrollment=enrollment,
            tier=tier,
            total_hours=total_hours,
            additional_cost=additional_cost,
            estimated_monthly=estimated_monthly,
            estimated_annual=estimated_annual,
            selected_services=selected_services,
        )

        logger.info(
            "Pricing calculated: tier='{}', services={}, hours={}, monthly={}",
            tier.label,
            len(selected_services),
            total_hours,
            estimated_monthly,
        )

        return result


pricing_calculator = PricingCalculator()
