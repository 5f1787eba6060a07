"""
Schema loader - reads schema documents from a directory.

Files are read in file-name order so that merge diagnostics and
last-file-wins outcomes do not depend on the filesystem.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from .errors import SchemaLoadError, SchemaParseError
from .schema_ast import SchemaFragment, SchemaParser

logger = logging.getLogger(__name__)


class SchemaLoader:
    """
    Load schema fragments from a directory.

    Expected structure:
        schemas/
        ├── common.yml      # shared abstract tables and type aliases
        ├── users.yml
        └── orders.yml

    Every regular, non-hidden file directly inside the directory is
    treated as a schema document.
    """

    def __init__(self, schema_dir: str | Path, parser: SchemaParser | None = None) -> None:
        self.schema_dir = Path(schema_dir)
        self.parser = parser or SchemaParser()

    def load(self) -> list[SchemaFragment]:
        """
        Load all schema documents of the directory.

        Files that cannot be read or parsed are logged and skipped.

        Returns:
            One fragment per successfully parsed file, in file-name order

        Raises:
            SchemaLoadError: If the directory itself cannot be listed
        """
        fragments = []
        for file_path in self._find_schema_files():
            try:
                fragments.append(self.load_file(file_path))
            except (OSError, UnicodeDecodeError, yaml.YAMLError, SchemaParseError) as e:
                logger.warning("Failed to read schema file %s, skipping: %s", file_path, e)
        logger.info("Loaded %d schema fragment(s) from %s", len(fragments), self.schema_dir)
        return fragments

    def load_file(self, file_path: str | Path) -> SchemaFragment:
        """
        Load a single schema document.

        Raises:
            OSError: If the file cannot be read
            yaml.YAMLError: If the file is not valid YAML
            SchemaParseError: If the document structure is invalid
        """
        file_path = Path(file_path)
        with open(file_path, encoding="utf-8") as f:
            document = yaml.safe_load(f)
        logger.debug("Parsed schema file %s", file_path)
        return self.parser.parse(document, str(file_path))

    def _find_schema_files(self) -> list[Path]:
        try:
            entries = list(self.schema_dir.iterdir())
        except OSError as e:
            raise SchemaLoadError(f"Cannot read schema directory {self.schema_dir}: {e}") from e

        files = [p for p in entries if p.is_file() and not p.name.startswith(".")]
        return sorted(files, key=lambda p: p.name)
