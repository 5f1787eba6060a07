"""
Template renderer.

Phase 4 of the pipeline: render every resolved table through every
template. Rendering is all-or-nothing, the first failure aborts the batch.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import jinja2

from ..analyzer import ResolvedSchema, ResolvedTable
from ..config import RenderConfig
from ..errors import TemplateRegistrationError, TemplateRenderError
from ..schema_ast import TypeAlias
from .environment import build_environment

logger = logging.getLogger(__name__)

# template identifier -> [(table name, rendered text), ...]
RenderedBatch = dict[str, list[tuple[str, str]]]


def build_context(table: ResolvedTable, types: dict[str, TypeAlias]) -> dict[str, Any]:
    """
    Build the data a template sees for one table.

    Args:
        table: The resolved table
        types: Global alias map

    Returns:
        Dictionary with `name`, `schema`, `fields` and `types`
    """
    return {
        "name": table.name,
        "schema": table.schema,
        "fields": [
            {
                "name": f.name,
                "type": f.type,
                "is_primary": f.is_primary,
            }
            for f in table.fields
        ],
        "types": {name: {"target_type": alias.target_type} for name, alias in types.items()},
    }


class TemplateRenderer:
    """Renders resolved tables through Jinja2 templates."""

    def __init__(self, config: RenderConfig | None = None):
        """
        Initialize the renderer.

        Args:
            config: Render options, defaults to RenderConfig()
        """
        self.config = config or RenderConfig()

    def render_all(self, resolved: ResolvedSchema, template_path: str | Path) -> RenderedBatch:
        """
        Render every table of the schema with every template.

        Args:
            resolved: The resolved schema
            template_path: A template file or a directory of templates

        Returns:
            Mapping of template identifier (file stem) to (table name, text) pairs,
            tables in resolved-schema order

        Raises:
            TemplateRegistrationError: If a template cannot be loaded
            TemplateRenderError: If rendering any table fails
        """
        templates = self.load_templates(template_path)

        result: RenderedBatch = {}
        for template_id, template in templates.items():
            rendered = []
            for name, table in resolved.tables.items():
                rendered.append((name, self.render_table(template_id, template, table, resolved.types)))
            result[template_id] = rendered
            logger.info("Rendered %d table(s) with template %s", len(rendered), template_id)
        return result

    def render_table(self, template_id: str, template: jinja2.Template, table: ResolvedTable, types: dict[str, TypeAlias]) -> str:
        """Render a single table, wrapping any failure in TemplateRenderError."""
        try:
            return template.render(build_context(table, types))
        except Exception as e:
            raise TemplateRenderError(template_id, table.name, str(e)) from e

    def load_templates(self, template_path: str | Path) -> dict[str, jinja2.Template]:
        """
        Load and compile templates.

        Args:
            template_path: A template file or a directory of templates.
                Subdirectories and hidden files of a directory are ignored.

        Returns:
            Compiled templates keyed by file stem, in file-name order

        Raises:
            TemplateRegistrationError: If the path is missing, holds no template or a template is invalid
        """
        path = Path(template_path)
        if path.is_dir():
            template_dir = path
            try:
                files = sorted((p for p in path.iterdir() if p.is_file() and not p.name.startswith(".")), key=lambda p: p.name)
            except OSError as e:
                raise TemplateRegistrationError(f"Cannot read template directory {path}: {e}") from e
        elif path.is_file():
            template_dir = path.parent
            files = [path]
        else:
            raise TemplateRegistrationError(f"Template path does not exist: {path}")

        env = build_environment(self.config, template_dir)
        templates: dict[str, jinja2.Template] = {}
        for file_path in files:
            template_id = file_path.stem
            if template_id in templates:
                raise TemplateRegistrationError(f"Two templates share the identifier '{template_id}' in {template_dir}")
            try:
                templates[template_id] = env.get_template(file_path.name)
            except (jinja2.TemplateError, OSError, UnicodeDecodeError) as e:
                raise TemplateRegistrationError(f"Failed to register template {file_path}: {e}") from e
            logger.debug("Registered template %s from %s", template_id, file_path)

        if not templates:
            raise TemplateRegistrationError(f"No templates found in {path}")
        return templates
