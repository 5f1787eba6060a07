"""
Resolved schema definitions.

These nodes represent tables after inheritance flattening and type
substitution, ready for rendering.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ..schema_ast import TypeAlias


@dataclass(frozen=True)
class ResolvedField:
    """A field with its final target-language type."""

    name: str = ""
    type: str = ""  # After alias substitution
    declared_type: str = ""  # As written in the schema
    is_primary: bool | None = None


@dataclass
class ResolvedTable:
    """A concrete table with all inherited fields materialized."""

    name: str = ""
    schema: str | None = None
    extends: str | None = None

    # Own fields first, then the fields of each ancestor
    fields: list[ResolvedField] = field(default_factory=list)


@dataclass
class ResolvedSchema:
    """The merged and flattened schema handed to rendering."""

    # Concrete tables only, in merged-schema order
    tables: dict[str, ResolvedTable] = field(default_factory=dict)

    # Global alias map
    types: dict[str, TypeAlias] = field(default_factory=dict)
