"""Preliminary proposal generator."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Any, Optional

from loguru import logger

from estimator.core.settings import settings
from estimator.models.estimate import ClientInfo
from estimator.services.documents.templates import TemplateManager, template_manager
from estimator.services.pricing.calculator import CalculationResult
from estimator.utils.text_formatters import (
    format_currency,
    format_date,
    format_hours,
    proposal_filename,
)


PROPOSAL_TEMPLATE = "preliminary_proposal.txt"
PROPOSAL_MEDIA_TYPE = "text/plain"
SCHOOL_NAME_PLACEHOLDER = "[School Name]"


class ProposalGenerator:
    """Renders preliminary proposals from pricing results."""

    def __init__(
        self,
        templates: TemplateManager | None = None,
        contact_name: str | None = None,
        contact_email: str | None = None,
    ) -> None:
        self.templates = templates or template_manager
        self.contact_name = contact_name or settings.proposal_contact_name
        self.contact_email = contact_email or settings.proposal_contact_email

    def build_context(
        self,
        client: ClientInfo,
        result: CalculationResult,
        generated_at: date,
    ) -> dict[str, Any]:
        """Builds the template context for a proposal."""
        return {
            "generated_on": format_date(generated_at),
            "school_name": client.school_name.strip() or SCHOOL_NAME_PLACEHOLDER,
            "contact_name": client.contact_name.strip(),
            "contact_email": client.contact_email.strip(),
            "enrollment": client.enrollment.strip(),
            "services": [
                {
                    "name": service.name,
                    "hours": format_hours(service.hours),
                    "tasks": service.tasks,
                }
                for service in result.selected_services
            ],
            "tier_label": result.tier.label,
            "monthly_fee": format_currency(result.estimated_monthly),
            "annual_fee": format_currency(result.estimated_annual),
            "contact_line_name": self.contact_name,
            "contact_line_email": self.contact_email,
        }

    def generate_proposal(
        self,
        client: ClientInfo,
        result: CalculationResult,
        generated_at: date,
    ) -> str:
        """
        Renders the proposal text.

        Args:
            client: School and contact details as entered by the operator.
            result: Pricing calculation to present.
            generated_at: Date printed in the header. Datetimes are accepted.

        Returns:
            Proposal as plain text without surrounding whitespace.
        """
        context = self.build_context(client, result, generated_at)
        text = self.templates.render_template(PROPOSAL_TEMPLATE, context).strip()
        logger.info(
            "Proposal generated for '{}' ({} services, {} characters)",
            context["school_name"],
            len(result.selected_services),
            len(text),
        )
        return text

    def save_proposal(
        self,
        text: str,
        school_name: str,
        output_dir: Optional[Path] = None,
    ) -> Path:
        """
        Writes a proposal to disk.

        Args:
            text: Rendered proposal.
            school_name: School name the file is named after.
            output_dir: Target directory, defaults to the configured one.

        Returns:
            Path of the written file.

        Raises:
            ValueError: If the file name would resolve outside the directory.
        """
        directory = Path(output_dir or settings.proposal_output_dir)
        if not directory.exists():
            directory.mkdir(parents=True, exist_ok=True)
            logger.info("Created proposal directory {}", directory)

        file_path = directory / proposal_filename(school_name)
        if file_path.resolve().parent != directory.resolve():
            raise ValueError(f"Proposal path escapes {directory}: {file_path}")
        file_path.write_text(text, encoding="utf-8")

        logger.info("Proposal saved: {}", file_path)
        return file_path


def current_date() -> date:
    """Today's date in local time."""
    return datetime.now().date()


# Singleton
proposal_generator = ProposalGenerator()
