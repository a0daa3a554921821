"""Exceptions raised by the estimator core."""

from __future__ import annotations


class EstimatorError(Exception):
    """Base estimator exception."""


class InvalidEnrollmentError(EstimatorError, ValueError):
    """Enrollment text is not a non-negative integer."""

    def __init__(self, raw: object) -> None:
        self.raw = raw
        super().__init__(f"Invalid enrollment value: {raw!r}")


class UnknownServiceKeyError(EstimatorError, LookupError):
    """Service key is absent from the catalog."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Unknown service key: {key!r}")


class SessionNotFoundError(EstimatorError, LookupError):
    """Estimator session does not exist or has been evicted."""

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}")


class TierTableError(EstimatorError):
    """Pricing tiers do not cover enrollment without gaps or overlaps."""
