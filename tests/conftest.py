"""Pytest configuration."""

import sys
from pathlib import Path

# Add the project root to PYTHONPATH
root_dir = Path(__file__).parent.parent
sys.path.insert(0, str(root_dir))

# Project imports only after sys.path is set up
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from estimator.main import app  # noqa: E402
from estimator.models.estimate import ClientInfo  # noqa: E402
from estimator.services.catalog.selection import (  # noqa: E402
    ServiceCatalog,
    ServiceSelection,
)
from estimator.services.documents.generator import ProposalGenerator  # noqa: E402
from estimator.services.pricing.calculator import PricingCalculator  # noqa: E402
from estimator.services.web.session import EstimatorSessionManager  # noqa: E402


@pytest.fixture()
def catalog() -> ServiceCatalog:
    """Catalog with the standard service definitions."""
    return ServiceCatalog()


@pytest.fixture()
def selection(catalog: ServiceCatalog) -> ServiceSelection:
    """Selection in its initial state: core services only."""
    return ServiceSelection(catalog)


@pytest.fixture()
def calculator(catalog: ServiceCatalog) -> PricingCalculator:
    """Calculator bound to the standard catalog and tiers."""
    return PricingCalculator(catalog=catalog)


@pytest.fixture()
def generator() -> ProposalGenerator:
    """Proposal generator with the default contact line."""
    return ProposalGenerator(contact_name="Kevin", contact_email="[your email]")


@pytest.fixture()
def client_info() -> ClientInfo:
    """Typical discovery call details."""
    return ClientInfo(
        school_name="Mountain View Academy",
        contact_name="Jane Doe",
        contact_email="jane@mva.edu",
        enrollment="75",
    )


@pytest.fixture()
def sessions(
    monkeypatch: pytest.MonkeyPatch,
    calculator: PricingCalculator,
    generator: ProposalGenerator,
) -> EstimatorSessionManager:
    """Fresh session manager swapped into the API routes."""
    manager = EstimatorSessionManager(
        calculator=calculator,
        generator=generator,
        max_sessions=10,
    )
    monkeypatch.setattr("estimator.api.routes.sessions.session_manager", manager)
    return manager


@pytest.fixture()
def api_client(sessions: EstimatorSessionManager) -> TestClient:
    """HTTP client for the application."""
    return TestClient(app)
