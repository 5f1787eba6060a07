"""YAML Schema to Code Generator

A Python package for generating data-access code from YAML table schemas.
Schemas spread over several files are merged, table inheritance is
flattened, type aliases are substituted and every table is rendered
through user-supplied Jinja2 templates.
"""

__version__ = "1.0.0"

from .pipeline import (
    GenerationError,
    GeneratorConfig,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    RenderConfig,
)

__all__ = [
    "PipelineGenerator",
    "GeneratorConfig",
    "RenderConfig",
    "OutputConfig",
    "OutputMode",
    "GenerationError",
]
