"""
Schema document parser.

Phase 1 of the pipeline: turn one loaded YAML document into a
SchemaFragment, checking only the structure resolution depends on.
"""

from __future__ import annotations

from typing import Any

from ..errors import SchemaParseError
from .nodes import Field, SchemaFragment, Table, TypeAlias


class SchemaParser:
    """Parses YAML schema documents into fragments."""

    # Spellings accepted for the target type of an alias, preferred first
    TARGET_TYPE_KEYS = ("target_type", "rustType", "rust_type")

    def parse(self, document: Any, source: str = "") -> SchemaFragment:
        """
        Parse a schema document.

        Args:
            document: Result of yaml.safe_load (None for an empty file)
            source: Where the document came from (for error messages)

        Returns:
            SchemaFragment with tables in document order

        Raises:
            SchemaParseError: If the document structure is invalid
        """
        fragment = SchemaFragment(source=source)
        if document is None:
            return fragment

        if not isinstance(document, dict):
            raise SchemaParseError(f"expected a mapping at top level, got {type(document).__name__}", source)

        tables = document.get("tables") or []
        if not isinstance(tables, list):
            raise SchemaParseError("'tables' must be a list", source, "tables")

        for index, raw_table in enumerate(tables):
            fragment.tables.append(self._parse_table(raw_table, source, f"tables[{index}]"))

        fragment.types = self._parse_types(document.get("types"), source, "types")
        return fragment

    def _parse_table(self, raw: Any, source: str, path: str) -> Table:
        """Parse a single table entry."""
        if not isinstance(raw, dict):
            raise SchemaParseError("table must be a mapping", source, path)

        name = raw.get("name")
        if not isinstance(name, str) or not name:
            raise SchemaParseError("table requires a non-empty 'name'", source, path)
        path = f"{path}({name})"

        extends = self._optional_str(raw, "extends", source, path)
        schema = self._optional_str(raw, "schema", source, path)

        is_abstract = raw.get("is_abstract", False)
        if not isinstance(is_abstract, bool):
            raise SchemaParseError("'is_abstract' must be a boolean", source, path)

        raw_fields = raw.get("fields") or []
        if not isinstance(raw_fields, list):
            raise SchemaParseError("'fields' must be a list", source, f"{path}.fields")

        fields = [self._parse_field(f, source, f"{path}.fields[{i}]") for i, f in enumerate(raw_fields)]

        return Table(
            name=name,
            schema=schema,
            extends=extends,
            is_abstract=is_abstract,
            fields=fields,
            types=self._parse_types(raw.get("types"), source, f"{path}.types"),
        )

    def _parse_field(self, raw: Any, source: str, path: str) -> Field:
        """Parse a field entry."""
        if not isinstance(raw, dict):
            raise SchemaParseError("field must be a mapping", source, path)

        name = raw.get("name")
        field_type = raw.get("type")
        if not isinstance(name, str) or not name:
            raise SchemaParseError("field requires a non-empty 'name'", source, path)
        if not isinstance(field_type, str) or not field_type:
            raise SchemaParseError(f"field '{name}' requires a non-empty 'type'", source, path)

        is_primary = raw.get("is_primary")
        if is_primary is not None and not isinstance(is_primary, bool):
            raise SchemaParseError(f"'is_primary' of field '{name}' must be a boolean", source, path)

        return Field(name=name, type=field_type, is_primary=is_primary)

    def _parse_types(self, raw: Any, source: str, path: str) -> dict[str, TypeAlias]:
        """Parse a mapping of alias name to alias definition."""
        if raw is None:
            return {}
        if not isinstance(raw, dict):
            raise SchemaParseError("'types' must be a mapping", source, path)

        aliases = {}
        for name, value in raw.items():
            name = str(name)
            aliases[name] = TypeAlias(name=name, target_type=self._parse_target_type(value, source, f"{path}.{name}"))
        return aliases

    def _parse_target_type(self, value: Any, source: str, path: str) -> str:
        # Shorthand: `UUID: String`
        if isinstance(value, str) and value:
            return value

        if isinstance(value, dict):
            for key in self.TARGET_TYPE_KEYS:
                target = value.get(key)
                if isinstance(target, str) and target:
                    return target

        raise SchemaParseError("type alias requires a non-empty 'target_type'", source, path)

    def _optional_str(self, raw: dict, key: str, source: str, path: str) -> str | None:
        value = raw.get(key)
        if value is None:
            return None
        if not isinstance(value, str):
            raise SchemaParseError(f"'{key}' must be a string", source, path)
        return value
