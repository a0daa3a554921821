"""Document template manager."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template
from loguru import logger


TEMPLATES_PATH = Path(__file__).parent / "templates"


class TemplateManager:
    """Loads and renders plain-text document templates."""

    def __init__(self, templates_path: Path | None = None) -> None:
        self.templates_path = templates_path or TEMPLATES_PATH
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_path)),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def get_template(self, template_name: str) -> Template:
        """Gets a template by name."""
        try:
            template = self.env.get_template(template_name)
            logger.debug("Template {} loaded", template_name)
            return template
        except Exception as exc:  # noqa: BLE001
            logger.error("Failed to load template {}: {}", template_name, exc)
            raise

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """Renders a template with the given context."""
        template = self.get_template(template_name)

        try:
            rendered = template.render(**context)
            logger.debug("Template {} rendered", template_name)
            return rendered
        except Exception as exc:  # noqa: BLE001
            logger.error("Failed to render template {}: {}", template_name, exc)
            raise

    def list_templates(self) -> list[str]:
        """Lists available templates."""
        if not self.templates_path.exists():
            return []

        templates = sorted(f.name for f in self.templates_path.glob("*.txt"))

        logger.debug("Found {} templates", len(templates))
        return templates


# Singleton
template_manager = TemplateManager()
