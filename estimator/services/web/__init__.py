"""Operator sessions for the web estimator."""

from estimator.services.web.session import (
    EstimatorSession,
    EstimatorSessionManager,
    session_manager,
)

__all__ = [
    "EstimatorSession",
    "EstimatorSessionManager",
    "session_manager",
]
