"""
Pipeline - YAML table schemas to code through Jinja2 templates.

1. Phase 1 (Loader/Parser): Read schema documents into fragments
2. Phase 2 (Merger): Merge fragments into one schema, last file wins
3. Phase 3 (Analyzer): Flatten inheritance and substitute type aliases
4. Phase 4 (Renderer): Render each resolved table through each template
5. Phase 5 (Output): Write generated files atomically
"""

from __future__ import annotations

from .analyzer import ResolvedField, ResolvedSchema, ResolvedTable, SchemaAnalyzer
from .config import GeneratorConfig, OutputConfig, OutputMode, RenderConfig
from .errors import (
    ConfigError,
    CyclicInheritanceError,
    GenerationError,
    OutputWriteError,
    SchemaLoadError,
    SchemaParseError,
    TemplateRegistrationError,
    TemplateRenderError,
)
from .generator import PipelineGenerator
from .loader import SchemaLoader
from .merger import AtomicWriter, MergeConflict, SchemaMerger
from .output import OutputWriter
from .renderer import TemplateRenderer

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "RenderConfig",
    "OutputConfig",
    "OutputMode",
    "SchemaLoader",
    "SchemaMerger",
    "MergeConflict",
    "SchemaAnalyzer",
    "ResolvedField",
    "ResolvedTable",
    "ResolvedSchema",
    "TemplateRenderer",
    "OutputWriter",
    "AtomicWriter",
    "GenerationError",
    "ConfigError",
    "SchemaLoadError",
    "SchemaParseError",
    "CyclicInheritanceError",
    "TemplateRegistrationError",
    "TemplateRenderError",
    "OutputWriteError",
]
