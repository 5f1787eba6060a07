"""
Analyzer module.

Contains inheritance flattening, type substitution and the resolved
schema definitions.
"""

from __future__ import annotations

from .analyzer import SchemaAnalyzer
from .inheritance_resolver import InheritanceResolver
from .ir_nodes import ResolvedField, ResolvedSchema, ResolvedTable
from .type_resolver import TypeResolver

__all__ = [
    "ResolvedField",
    "ResolvedTable",
    "ResolvedSchema",
    "InheritanceResolver",
    "TypeResolver",
    "SchemaAnalyzer",
]
