"""In-memory discovery call sessions."""

from __future__ import annotations

import uuid
from collections import OrderedDict
from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Optional

from loguru import logger

from estimator.core.exceptions import SessionNotFoundError
from estimator.core.settings import settings
from estimator.models.estimate import ClientInfo
from estimator.services.catalog.selection import ServiceSelection
from estimator.services.documents.generator import (
    ProposalGenerator,
    current_date,
    proposal_generator,
)
from estimator.services.pricing.calculator import (
    CalculationResult,
    PricingCalculator,
    pricing_calculator,
)
from estimator.utils.text_formatters import proposal_filename


@dataclass
class EstimatorSession:
    """Operator state for one discovery call."""

    session_id: str
    selection: ServiceSelection
    client: ClientInfo = field(default_factory=ClientInfo)
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class EstimatorSessionManager:
    """Keeps discovery call sessions in process memory."""

    def __init__(
        self,
        calculator: PricingCalculator | None = None,
        generator: ProposalGenerator | None = None,
        max_sessions: int | None = None,
    ) -> None:
        self.calculator = calculator or pricing_calculator
        self.generator = generator or proposal_generator
        self.max_sessions = max_sessions or settings.max_sessions
        self._sessions: OrderedDict[str, EstimatorSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def create_session(self, client: Optional[ClientInfo] = None) -> EstimatorSession:
        """Creates a session with the default service selection."""
        session = EstimatorSession(
            session_id=str(uuid.uuid4()),
            selection=ServiceSelection(self.calculator.catalog),
            client=client or ClientInfo(),
        )
        self._sessions[session.session_id] = session

        while len(self._sessions) > self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.warning("Session {} evicted, limit {} reached", evicted_id, self.max_sessions)

        logger.info("Session {} created", session.session_id)
        return session

    def get_session(self, session_id: str) -> EstimatorSession:
        """Returns a session.

        Raises:
            SessionNotFoundError: If the session does not exist.
        """
        session = self._sessions.get(session_id)
        if session is None:
            logger.warning("Session {} not found", session_id)
            raise SessionNotFoundError(session_id)
        self._sessions.move_to_end(session_id)
        return session

    def delete_session(self, session_id: str) -> None:
        """Removes a session."""
        self.get_session(session_id)
        del self._sessions[session_id]
        logger.info("Session {} deleted", session_id)

    def update_client(self, session_id: str, **changes: object) -> ClientInfo:
        """Replaces the given client fields and returns the new client info.

        Raises:
            pydantic.ValidationError: If a field is unknown or has an invalid value.
        """
        session = self.get_session(session_id)
        session.client = ClientInfo.model_validate({**session.client.model_dump(), **changes})
        return session.client

    def toggle_service(self, session_id: str, key: str) -> bool:
        """Flips one service in the session selection."""
        session = self.get_session(session_id)
        return session.selection.toggle(key)

    def calculate(self, session_id: str) -> CalculationResult:
        """Prices the session's current client info and selection."""
        session = self.get_session(session_id)
        return self.calculator.calculate(session.client.enrollment, session.selection)

    def render_proposal(
        self,
        session_id: str,
        generated_at: Optional[date] = None,
    ) -> tuple[str, str]:
        """
        Renders the session's proposal.

        Returns:
            Tuple of (download file name, proposal text).
        """
        session = self.get_session(session_id)
        result = self.calculate(session_id)
        text = self.generator.generate_proposal(
            session.client,
            result,
            generated_at or current_date(),
        )
        return proposal_filename(session.client.school_name), text


session_manager = EstimatorSessionManager()
