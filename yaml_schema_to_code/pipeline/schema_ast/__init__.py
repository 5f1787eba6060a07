"""
Schema AST module.

Contains the node definitions and parser for YAML table schemas.
"""

from __future__ import annotations

from .nodes import Field, Schema, SchemaFragment, Table, TypeAlias
from .parser import SchemaParser

__all__ = [
    "Field",
    "Table",
    "TypeAlias",
    "SchemaFragment",
    "Schema",
    "SchemaParser",
]
