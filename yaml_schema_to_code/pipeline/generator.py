"""
Pipeline generator.

Chains the pipeline phases:
Loader -> Merger -> Analyzer -> Renderer -> OutputWriter
"""

from __future__ import annotations

import logging
from pathlib import Path

from .analyzer import ResolvedSchema, SchemaAnalyzer
from .config import GeneratorConfig
from .loader import SchemaLoader
from .merger import MergeConflict, SchemaMerger
from .output import OutputWriter
from .renderer import RenderedBatch, TemplateRenderer
from .schema_ast import Schema

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates code from a directory of YAML schemas and a set of templates."""

    def __init__(self, schema_dir: str | Path, template_path: str | Path, config: GeneratorConfig | None = None):
        """
        Initialize the generator.

        Args:
            schema_dir: Directory of schema documents
            template_path: Template file or directory of templates
            config: Generation configuration
        """
        self.schema_dir = Path(schema_dir)
        self.template_path = Path(template_path)
        self.config = config or GeneratorConfig()
        self.conflicts: list[MergeConflict] = []

    def load_schema(self) -> Schema:
        """Load and merge all schema fragments."""
        fragments = SchemaLoader(self.schema_dir).load()
        merger = SchemaMerger()
        schema = merger.merge(fragments)
        self.conflicts = merger.conflicts
        return schema

    def resolve(self) -> ResolvedSchema:
        """Load, merge and resolve the schema."""
        return SchemaAnalyzer().analyze(self.load_schema())

    def generate(self) -> RenderedBatch:
        """
        Run the pipeline up to rendering.

        Returns:
            Rendered text per template and table

        Raises:
            GenerationError: On any fatal pipeline failure
        """
        resolved = self.resolve()
        return TemplateRenderer(self.config.render).render_all(resolved, self.template_path)

    def write(self, output_dir: str | Path) -> list[Path]:
        """
        Run the whole pipeline and write the generated files.

        Nothing is written unless every table rendered successfully.

        Args:
            output_dir: Root directory of the generated files

        Returns:
            Paths of the written files

        Raises:
            GenerationError: On any fatal pipeline failure
        """
        extension = self.config.resolve_extension()
        rendered = self.generate()
        return OutputWriter(output_dir, extension, self.config.output).write_all(rendered)
