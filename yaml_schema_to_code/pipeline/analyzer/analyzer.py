"""
Schema analyzer that turns the merged schema into a resolved schema.

Phase 3 of the pipeline: flatten inheritance, then substitute field types.
"""

from __future__ import annotations

import logging

from ..schema_ast import Schema
from .inheritance_resolver import InheritanceResolver
from .ir_nodes import ResolvedField, ResolvedSchema, ResolvedTable
from .type_resolver import TypeResolver

logger = logging.getLogger(__name__)


class SchemaAnalyzer:
    """Analyzes a merged schema and builds the resolved schema."""

    def analyze(self, schema: Schema) -> ResolvedSchema:
        """
        Resolve a merged schema.

        Abstract tables are only used as ancestors and do not appear in
        the result. The input schema is left untouched.

        Args:
            schema: The merged schema

        Returns:
            ResolvedSchema ready for rendering

        Raises:
            CyclicInheritanceError: If an `extends` chain loops
        """
        flattened = InheritanceResolver(schema).resolve()
        type_resolver = TypeResolver(schema.types)

        resolved = ResolvedSchema(types=dict(schema.types))
        for name, fields in flattened.items():
            table = schema.tables[name]
            resolved.tables[name] = ResolvedTable(
                name=table.name,
                schema=table.schema,
                extends=table.extends,
                fields=[
                    ResolvedField(
                        name=f.name,
                        type=type_resolver.resolve(f.type, table.types),
                        declared_type=f.type,
                        is_primary=f.is_primary,
                    )
                    for f in fields
                ],
            )

        logger.info("Resolved %d table(s), %d abstract table(s) skipped", len(resolved.tables), len(schema.tables) - len(resolved.tables))
        return resolved
