#!/usr/bin/env python3
"""
Generate a preliminary proposal from the command line.

Usage:
    python scripts/generate_proposal.py --school "Mountain View Academy" \
        --enrollment 75 --service studentAR --service payroll
    python scripts/generate_proposal.py --school "Pine Hill" --stdout
"""

import argparse
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

# Add the project root to the import path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from loguru import logger  # noqa: E402

from estimator.core.exceptions import UnknownServiceKeyError  # noqa: E402
from estimator.models.estimate import ClientInfo  # noqa: E402
from estimator.services.catalog.selection import ServiceSelection  # noqa: E402
from estimator.services.documents.generator import (  # noqa: E402
    current_date,
    proposal_generator,
)
from estimator.services.pricing.calculator import pricing_calculator  # noqa: E402


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a preliminary proposal")
    parser.add_argument("--school", default="", help="School name")
    parser.add_argument("--contact", default="", help="Contact name")
    parser.add_argument("--email", default="", help="Contact email")
    parser.add_argument("--enrollment", default="", help="Student enrollment")
    parser.add_argument(
        "--service",
        action="append",
        default=[],
        metavar="KEY",
        help="Toggle a service (repeatable)",
    )
    parser.add_argument("--output-dir", type=Path, default=None, help="Target directory")
    parser.add_argument("--stdout", action="store_true", help="Print instead of saving")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Builds the proposal and saves or prints it."""
    args = build_parser().parse_args(argv)

    client = ClientInfo(
        school_name=args.school,
        contact_name=args.contact,
        contact_email=args.email,
        enrollment=args.enrollment,
    )
    selection = ServiceSelection(pricing_calculator.catalog)
    try:
        for key in args.service:
            selection.toggle(key)
    except UnknownServiceKeyError as exc:
        logger.error("{}. Known keys: {}", exc, ", ".join(selection.catalog.keys()))
        return 2

    result = pricing_calculator.calculate(client.enrollment, selection)
    text = proposal_generator.generate_proposal(client, result, current_date())

    if args.stdout:
        print(text)
        return 0

    path = proposal_generator.save_proposal(text, client.school_name, args.output_dir)
    print(path)
    return 0


if __name__ == "__main__":
    sys.exit(main())
