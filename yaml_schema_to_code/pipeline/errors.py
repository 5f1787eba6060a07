"""
Exceptions raised by the generation pipeline.

Everything derives from GenerationError so callers (the CLI in particular)
can report any fatal pipeline failure in one place.
"""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for all pipeline errors."""


class ConfigError(GenerationError):
    """Raised when the generator configuration is invalid."""


class SchemaLoadError(GenerationError):
    """Raised when the schema directory cannot be read at all."""


class SchemaParseError(GenerationError):
    """Raised when a schema document does not have the expected structure.

    Attributes:
        source: File (or label) the document came from
        path: Location of the offending node inside the document
    """

    def __init__(self, message: str, source: str = "", path: str = ""):
        self.source = source
        self.path = path
        location = ":".join(p for p in (source, path) if p)
        super().__init__(f"{location}: {message}" if location else message)


class CyclicInheritanceError(GenerationError):
    """Raised when a chain of `extends` references loops back on itself."""

    def __init__(self, chain: list[str]):
        self.chain = chain
        super().__init__(f"Cyclic inheritance detected: {' -> '.join(chain)}")


class TemplateRegistrationError(GenerationError):
    """Raised when a template cannot be loaded or compiled."""


class TemplateRenderError(GenerationError):
    """Raised when rendering a table through a template fails."""

    def __init__(self, template: str, table: str, message: str):
        self.template = template
        self.table = table
        super().__init__(f"Failed to render table '{table}' with template '{template}': {message}")


class OutputWriteError(GenerationError):
    """Raised when a generated file cannot be written."""
