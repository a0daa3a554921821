"""Pricing rules for remote school accounting services."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from estimator.core.exceptions import TierTableError


class ServiceCategory(str, Enum):
    """Service categories."""

    CORE_SERVICES = "Core Services"
    STUDENT_ACCOUNTS = "Student Accounts"
    SPECIALIZED = "Specialized"


@dataclass(frozen=True)
class ServiceDefinition:
    """Billable service line."""

    key: str
    name: str
    category: ServiceCategory
    hours: Decimal
    tasks: tuple[str, ...]
    base_included: bool = False
    default_selected: bool = False
    complexity_multiplier: Decimal | None = None

    @property
    def multiplier(self) -> Decimal:
        """Complexity multiplier, 1 when the service does not define one."""
        if self.complexity_multiplier is None:
            return Decimal(1)
        return self.complexity_multiplier


@dataclass(frozen=True)
class PricingTier:
    """Enrollment bracket with a flat base monthly price."""

    min_enrollment: int
    max_enrollment: int
    base_price: int
    label: str

    def contains(self, enrollment: int) -> bool:
        """Checks whether the enrollment falls inside the bracket."""
        return self.min_enrollment <= enrollment <= self.max_enrollment


# Services outside the tier base are billed $100 per 10 monthly hours.
BILLING_BLOCK_HOURS = Decimal(10)
BILLING_BLOCK_PRICE = Decimal(100)

OPEN_ENDED_MAX = sys.maxsize


PRICING_TIERS: list[PricingTier] = [
    PricingTier(
        min_enrollment=0,
        max_enrollment=50,
        base_price=2_200,
        label="Small Day School",
    ),
    PricingTier(
        min_enrollment=51,
        max_enrollment=100,
        base_price=2_500,
        label="Medium Day School",
    ),
    PricingTier(
        min_enrollment=101,
        max_enrollment=150,
        base_price=2_800,
        label="Large Day School / Small Boarding",
    ),
    PricingTier(
        min_enrollment=151,
        max_enrollment=250,
        base_price=3_200,
        label="Medium Boarding Academy",
    ),
    PricingTier(
        min_enrollment=251,
        max_enrollment=OPEN_ENDED_MAX,
        base_price=3_500,
        label="Large Boarding Academy",
    ),
]


CORE_SERVICES: list[ServiceDefinition] = [
    ServiceDefinition(
        key="coreAccounting",
        name="Core Accounting & Monthly Close",
        category=ServiceCategory.CORE_SERVICES,
        hours=Decimal("16"),
        tasks=(
            "Monthly closing",
            "Financial statements",
            "Board reporting packages",
            "Depreciation",
        ),
        base_included=True,
        default_selected=True,
    ),
    ServiceDefinition(
        key="bankRec",
        name="Bank Reconciliations (All Accounts)",
        category=ServiceCategory.CORE_SERVICES,
        hours=Decimal("16.4"),
        tasks=(
            "Operating",
            "Insurance",
            "Endowment",
            "Donation",
            "Capital accounts",
        ),
        base_included=True,
        default_selected=True,
    ),
    ServiceDefinition(
        key="auditPrep",
        name="Audit Preparation",
        category=ServiceCategory.CORE_SERVICES,
        hours=Decimal("4"),
        tasks=(
            "Documentation organization",
            "Digital backup systems",
            "Auditor support",
        ),
        base_included=True,
        default_selected=True,
    ),
]


STUDENT_ACCOUNT_SERVICES: list[ServiceDefinition] = [
    ServiceDefinition(
        key="studentAR",
        name="Student Accounts Receivable",
        category=ServiceCategory.STUDENT_ACCOUNTS,
        hours=Decimal("62"),
        tasks=(
            "Tuition tracking",
            "Invoicing in FACTS",
            "Aging monitoring",
            "Delinquent letters",
            "Dorm/Cafeteria/Athletic fees",
            "ASP deposits",
            "Wire transfers",
        ),
        complexity_multiplier=Decimal("1.0"),
    ),
    ServiceDefinition(
        key="studentAccounts",
        name="Student Account Management",
        category=ServiceCategory.STUDENT_ACCOUNTS,
        hours=Decimal("30"),
        tasks=(
            "Payment tracking",
            "Financial plans",
            "Parent communications",
            "Scholarship management",
        ),
    ),
    ServiceDefinition(
        key="studentAP",
        name="Student Payables",
        category=ServiceCategory.STUDENT_ACCOUNTS,
        hours=Decimal("6.8"),
        tasks=(
            "Student tithe",
            "Student payroll",
            "Annual 1099 preparation",
        ),
    ),
]


SPECIALIZED_SERVICES: list[ServiceDefinition] = [
    ServiceDefinition(
        key="endowment",
        name="Endowment Fund Management",
        category=ServiceCategory.SPECIALIZED,
        hours=Decimal("16"),
        tasks=(
            "Interest tracking",
            "Fluctuation monitoring",
            "Contributions",
            "Distribution calculations",
        ),
    ),
    ServiceDefinition(
        key="transportation",
        name="Transportation Accounting",
        category=ServiceCategory.SPECIALIZED,
        hours=Decimal("7.4"),
        tasks=(
            "IFTA reporting",
            "Transportation transfers",
            "Fuel documentation",
        ),
    ),
    ServiceDefinition(
        key="squareDeposits",
        name="Square/POS Reconciliation",
        category=ServiceCategory.SPECIALIZED,
        hours=Decimal("12"),
        tasks=(
            "Mission sale",
            "Farm store",
            "Business office transactions",
        ),
    ),
    ServiceDefinition(
        key="payroll",
        name="Payroll Processing Support",
        category=ServiceCategory.SPECIALIZED,
        hours=Decimal("8"),
        tasks=(
            "Expensing",
            "Bank charges",
            "Payroll withholding tracking",
        ),
    ),
    ServiceDefinition(
        key="hr",
        name="HR Documentation",
        category=ServiceCategory.SPECIALIZED,
        hours=Decimal("2.2"),
        tasks=(
            "Taskforce paperwork",
            "Volunteer insurance",
            "Per diem tracking",
            "Education reimbursements",
        ),
    ),
]


def validate_tiers(tiers: list[PricingTier]) -> None:
    """Checks that tiers are ascending, contiguous and start at zero.

    Raises:
        TierTableError: If the table leaves a gap, overlaps or is empty.
    """
    if not tiers:
        raise TierTableError("Pricing tier table is empty")

    expected_min = 0
    for tier in tiers:
        if tier.min_enrollment != expected_min:
            raise TierTableError(
                f"Tier '{tier.label}' starts at {tier.min_enrollment}, "
                f"expected {expected_min}"
            )
        if tier.max_enrollment < tier.min_enrollment:
            raise TierTableError(f"Tier '{tier.label}' has an empty range")
        if tier.base_price < 0:
            raise TierTableError(f"Tier '{tier.label}' has a negative base price")
        expected_min = tier.max_enrollment + 1

    if tiers[-1].max_enrollment != OPEN_ENDED_MAX:
        raise TierTableError("Last pricing tier must be open-ended")


def get_all_services() -> list[ServiceDefinition]:
    """Returns every service definition in display order."""
    return [*CORE_SERVICES, *STUDENT_ACCOUNT_SERVICES, *SPECIALIZED_SERVICES]


validate_tiers(PRICING_TIERS)
