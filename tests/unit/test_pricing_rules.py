"""Tests for the service catalog data and pricing tiers."""

from decimal import Decimal

import pytest

from estimator.core.exceptions import TierTableError
from estimator.core.pricing_rules import (
    OPEN_ENDED_MAX,
    PRICING_TIERS,
    PricingTier,
    ServiceCategory,
    get_all_services,
    validate_tiers,
)
from estimator.services.catalog.selection import ServiceCatalog


def test_service_keys_are_unique() -> None:
    """Every service has its own key."""
    keys = [service.key for service in get_all_services()]
    assert len(keys) == len(set(keys)) == 11


def test_core_services_are_base_included_and_selected() -> None:
    """Core services start selected and are folded into the base price."""
    core = ServiceCatalog().by_category()[ServiceCategory.CORE_SERVICES]

    assert [service.key for service in core] == ["coreAccounting", "bankRec", "auditPrep"]
    assert all(service.base_included and service.default_selected for service in core)
    assert sum(service.hours for service in core) == Decimal("36.4")


def test_optional_services_start_unselected() -> None:
    """Student account and specialized services are opt-in and billed extra."""
    groups = ServiceCatalog().by_category()
    optional = [
        *groups[ServiceCategory.STUDENT_ACCOUNTS],
        *groups[ServiceCategory.SPECIALIZED],
    ]

    assert len(optional) == 8
    assert not any(service.default_selected for service in optional)
    assert not any(service.base_included for service in optional)


def test_multiplier_defaults_to_one() -> None:
    """Services without a complexity multiplier use 1."""
    services = {service.key: service for service in get_all_services()}

    assert services["studentAccounts"].complexity_multiplier is None
    assert services["studentAccounts"].multiplier == Decimal(1)
    assert services["studentAR"].multiplier == Decimal("1.0")


def test_default_tiers_are_valid() -> None:
    """Shipped tiers start at zero and end open-ended."""
    validate_tiers(PRICING_TIERS)

    assert PRICING_TIERS[0].min_enrollment == 0
    assert PRICING_TIERS[-1].max_enrollment == OPEN_ENDED_MAX


@pytest.mark.parametrize(
    "tiers",
    [
        [],
        [
            PricingTier(0, 50, 100, "A"),
            PricingTier(52, OPEN_ENDED_MAX, 200, "B"),
        ],
        [
            PricingTier(0, 50, 100, "A"),
            PricingTier(50, OPEN_ENDED_MAX, 200, "B"),
        ],
        [
            PricingTier(1, OPEN_ENDED_MAX, 100, "A"),
        ],
        [
            PricingTier(0, 50, 100, "A"),
            PricingTier(51, 999, 200, "B"),
        ],
    ],
    ids=["empty", "gap", "overlap", "not-from-zero", "bounded"],
)
def test_invalid_tier_tables_are_rejected(tiers: list[PricingTier]) -> None:
    """Tier tables with gaps, overlaps or a closed top end fail validation."""
    with pytest.raises(TierTableError):
        validate_tiers(tiers)
