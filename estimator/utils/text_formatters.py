"""Helpers for formatting estimate values as text."""

from __future__ import annotations

import re
from datetime import date
from decimal import Decimal


WHITESPACE_PATTERN = re.compile(r"\s+")
UNSAFE_FILENAME_PATTERN = re.compile(r'[\\/:*?"<>|\x00-\x1f\x7f]')

PROPOSAL_FILENAME_SUFFIX = "_Preliminary_Proposal.txt"
DEFAULT_FILENAME_STEM = "School"


def format_currency(amount: int) -> str:
    """
    Formats whole dollars with thousands separators.

    Args:
        amount: Amount in dollars.

    Returns:
        String like ``$30,000``.
    """
    return f"${amount:,}"


def format_hours(hours: Decimal) -> str:
    """Formats hours without trailing zeros (``16``, ``16.4``)."""
    normalized = hours.normalize()
    if normalized == normalized.to_integral_value():
        return str(normalized.quantize(Decimal(1)))
    return format(normalized, "f")


def format_date(value: date) -> str:
    """Formats a date as M/D/YYYY."""
    return f"{value.month}/{value.day}/{value.year}"


def proposal_filename(school_name: str | None) -> str:
    """Builds the download file name for a proposal.

    Path separators and characters that file systems reject become spaces,
    and leading or trailing dots are dropped, so the name never leaves the
    output directory.
    """
    cleaned = UNSAFE_FILENAME_PATTERN.sub(" ", school_name or "")
    stem = WHITESPACE_PATTERN.sub(" ", cleaned).strip(" .").replace(" ", "_")
    return f"{stem or DEFAULT_FILENAME_STEM}{PROPOSAL_FILENAME_SUFFIX}"
