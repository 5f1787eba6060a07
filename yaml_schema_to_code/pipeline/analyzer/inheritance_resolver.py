"""
Inheritance resolver for `extends` chains.

Flattens table hierarchies in two passes: abstract tables first, so that
concrete tables can pick up a whole chain of abstract ancestors in one
lookup, then every concrete table.
"""

from __future__ import annotations

import logging

from ..errors import CyclicInheritanceError
from ..schema_ast import Field, Schema, Table

logger = logging.getLogger(__name__)


class InheritanceResolver:
    """Materializes inherited fields of every table in a schema."""

    def __init__(self, schema: Schema):
        """
        Initialize the resolver.

        Args:
            schema: The merged schema
        """
        self.schema = schema

        # abstract table name -> fully flattened field list
        self.abstract_fields: dict[str, list[Field]] = {}

        # (table, parent) links already reported as broken
        self.reported_links: set[tuple[str, str]] = set()

    def resolve(self) -> dict[str, list[Field]]:
        """
        Flatten all tables.

        Fields are ordered own fields first, then the parent's, then the
        grandparent's and so on. Fields redeclared at several levels are
        all kept.

        Returns:
            Mapping of concrete table name to its flattened field list

        Raises:
            CyclicInheritanceError: If an `extends` chain loops
        """
        # First pass: abstract tables
        for name, table in self.schema.tables.items():
            if table.is_abstract:
                self.abstract_fields[name] = self._flatten(table)

        # Second pass: concrete tables, reusing the flattened abstract tables
        flattened = {}
        for name, table in self.schema.tables.items():
            if not table.is_abstract:
                flattened[name] = self._flatten(table)
        return flattened

    def _flatten(self, table: Table) -> list[Field]:
        """Walk the `extends` chain of a table, accumulating fields.

        Stops at a table without parent, at an already flattened abstract
        table (whose fields are complete) or at an unknown parent, which is
        logged and leaves the table with the fields gathered so far.
        """
        fields = list(table.fields)
        chain = [table.name]
        current = table

        while current.extends is not None:
            parent_name = current.extends
            if parent_name in chain:
                raise CyclicInheritanceError(chain + [parent_name])

            flattened_parent = self.abstract_fields.get(parent_name)
            if flattened_parent is not None:
                fields.extend(flattened_parent)
                break

            parent = self.schema.get_table(parent_name)
            if parent is None:
                self._report_missing_parent(table, current, parent_name)
                break

            fields.extend(parent.fields)
            chain.append(parent_name)
            current = parent

        return fields

    def _report_missing_parent(self, table: Table, current: Table, parent_name: str) -> None:
        """Log a broken `extends` link once, however many descendants reach it."""
        link = (current.name, parent_name)
        if link in self.reported_links:
            return
        self.reported_links.add(link)

        if current is table:
            logger.error("Table %s extends unknown table %s", current.name, parent_name)
        else:
            logger.error("Table %s extends unknown table %s (ancestor of %s)", current.name, parent_name, table.name)
