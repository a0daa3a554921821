"""Proposal document generation."""

from estimator.services.documents.generator import (
    PROPOSAL_MEDIA_TYPE,
    ProposalGenerator,
    proposal_generator,
)
from estimator.services.documents.templates import TemplateManager, template_manager

__all__ = [
    "PROPOSAL_MEDIA_TYPE",
    "ProposalGenerator",
    "proposal_generator",
    "TemplateManager",
    "template_manager",
]
