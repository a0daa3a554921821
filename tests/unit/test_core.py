"""Tests for settings and logging setup."""

import logging

import pytest

from loguru import logger

from estimator import __version__
from estimator.core.logging import InterceptHandler, configure_logging
from estimator.core.settings import Settings


def test_settings_defaults() -> None:
    """Defaults reproduce the standard proposal contact line."""
    settings = Settings()

    assert settings.proposal_contact_name == "Kevin"
    assert settings.proposal_contact_email == "[your email]"
    assert settings.max_sessions >= 1


def test_allowed_origins_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Comma-separated origins in the environment are split and trimmed."""
    monkeypatch.setenv(
        "ESTIMATOR_ALLOWED_ORIGINS",
        "https://a.example, https://b.example,",
    )

    settings = Settings()

    assert settings.allowed_origins == ["https://a.example", "https://b.example"]


def test_allowed_origins_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("ESTIMATOR_ALLOWED_ORIGINS", raising=False)

    assert Settings().allowed_origins == ["*"]


def test_intercept_handler_forwards_to_loguru() -> None:
    """Standard logging records end up in Loguru sinks."""
    messages: list[str] = []
    sink_id = logger.add(messages.append, format="{level}|{message}")
    std_logger = logging.getLogger("estimator.tests.intercept")
    handler = InterceptHandler()
    std_logger.addHandler(handler)
    std_logger.propagate = False
    try:
        std_logger.warning("proposal %s saved", "A")
    finally:
        std_logger.removeHandler(handler)
        logger.remove(sink_id)

    assert any(message.startswith("WARNING|proposal A saved") for message in messages)


def test_configured_records_carry_app_context() -> None:
    """Every record is tagged with the app name, version and environment."""
    configure_logging()
    records: list[dict] = []
    sink_id = logger.add(lambda message: records.append(message.record["extra"]))
    try:
        logger.info("pricing ready")
    finally:
        logger.remove(sink_id)

    assert records[-1]["app"] == "estimator"
    assert records[-1]["version"] == __version__
    assert records[-1]["environment"] in {"development", "staging", "production"}
