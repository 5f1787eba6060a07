"""
Merger module.

Merges schema fragments into one schema and provides atomic writes
for the generated files.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter
from .schema_merger import MergeConflict, SchemaMerger

__all__ = [
    "SchemaMerger",
    "MergeConflict",
    "AtomicWriter",
]
