"""Pricing estimation for school accounting services."""

from estimator.services.pricing.calculator import (
    CalculationResult,
    PricingCalculator,
    coerce_enrollment,
    parse_enrollment,
    pricing_calculator,
)

__all__ = [
    "CalculationResult",
    "PricingCalculator",
    "coerce_enrollment",
    "parse_enrollment",
    "pricing_calculator",
]
