"""
Node definitions for YAML table schemas.

These nodes represent the parsed structure of schema documents before
merging, inheritance flattening or type substitution.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TypeAlias:
    """A named mapping from a schema type token to a target-language type."""

    name: str = ""
    target_type: str = ""


@dataclass(frozen=True)
class Field:
    """A declared table field."""

    name: str = ""
    type: str = ""  # Primitive or alias name, as written in the schema
    is_primary: bool | None = None


@dataclass
class Table:
    """A table definition, as declared (inherited fields not included)."""

    name: str = ""
    schema: str | None = None  # Namespace label
    extends: str | None = None  # Name of the parent table
    is_abstract: bool = False
    fields: list[Field] = field(default_factory=list)

    # Aliases visible only while resolving this table
    types: dict[str, TypeAlias] = field(default_factory=dict)


@dataclass
class SchemaFragment:
    """The contents of a single schema document."""

    source: str = ""  # File the fragment was read from
    tables: list[Table] = field(default_factory=list)
    types: dict[str, TypeAlias] = field(default_factory=dict)


@dataclass
class Schema:
    """One logical schema, the result of merging all fragments."""

    tables: dict[str, Table] = field(default_factory=dict)
    types: dict[str, TypeAlias] = field(default_factory=dict)

    def get_table(self, name: str) -> Table | None:
        return self.tables.get(name)
