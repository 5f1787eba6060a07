"""
Fragment merger.

Folds schema fragments into a single Schema. Names defined by more than
one fragment are merged silently when the definitions are equal; otherwise
a warning is logged and the later fragment wins. Fields are never merged
individually, a conflicting table is replaced as a whole.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from ..schema_ast import Schema, SchemaFragment, Table, TypeAlias

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MergeConflict:
    """A name defined differently by two fragments."""

    kind: str  # "table" or "type"
    name: str
    previous_source: str
    source: str


@dataclass
class SchemaMerger:
    """Merges fragments in order, last definition wins."""

    # Conflicts found by the latest merge call
    conflicts: list[MergeConflict] = field(default_factory=list)

    def merge(self, fragments: Iterable[SchemaFragment]) -> Schema:
        """
        Merge fragments into one schema.

        Args:
            fragments: Fragments in the order they should be applied

        Returns:
            The merged schema
        """
        self.conflicts = []
        schema = Schema()
        table_sources: dict[str, str] = {}
        type_sources: dict[str, str] = {}

        for fragment in fragments:
            pending: list[MergeConflict] = []

            for table in fragment.tables:
                conflict = self._fold(schema.tables, table_sources, "table", table.name, table, fragment.source)
                if conflict:
                    pending.append(conflict)

            for name, alias in fragment.types.items():
                conflict = self._fold(schema.types, type_sources, "type", name, alias, fragment.source)
                if conflict:
                    pending.append(conflict)

            for conflict in sorted(pending, key=lambda c: (c.kind, c.name)):
                logger.warning(
                    "Overlapping %s '%s' defined in multiple files, %s overrides %s",
                    conflict.kind,
                    conflict.name,
                    conflict.source,
                    conflict.previous_source,
                )
                self.conflicts.append(conflict)

        return schema

    def _fold(
        self,
        target: dict[str, Table] | dict[str, TypeAlias],
        sources: dict[str, str],
        kind: str,
        name: str,
        value: Table | TypeAlias,
        source: str,
    ) -> MergeConflict | None:
        """Insert value under name, returning a conflict if it replaces a different definition."""
        conflict = None
        previous = target.get(name)
        if previous is not None and previous != value:
            conflict = MergeConflict(kind=kind, name=name, previous_source=sources[name], source=source)
        target[name] = value
        sources[name] = source
        return conflict
