"""
Tests for loading schema fragments from a directory.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from yaml_schema_to_code.pipeline import SchemaLoader, SchemaLoadError

LIBRARY_DIR = Path(__file__).parent / "test_data" / "schemas" / "library"


def write_schema(directory: Path, name: str, document) -> Path:
    path = directory / name
    path.write_text(yaml.safe_dump(document) if not isinstance(document, str) else document, encoding="utf-8")
    return path


class TestSchemaLoader:
    def test_load_library(self):
        fragments = SchemaLoader(LIBRARY_DIR).load()

        assert [Path(f.source).name for f in fragments] == ["common.yml", "orders.yml", "users.yml"]
        assert [t.name for t in fragments[0].tables] == ["entity", "audited"]
        assert set(fragments[0].types) == {"UUID", "Timestamp"}

    def test_files_loaded_in_name_order(self, tmp_path):
        for name in ["b.yml", "c.yaml", "a.yml"]:
            write_schema(tmp_path, name, {"tables": [{"name": name.split(".")[0]}]})

        fragments = SchemaLoader(tmp_path).load()

        assert [t.name for f in fragments for t in f.tables] == ["a", "b", "c"]

    def test_invalid_files_are_skipped(self, tmp_path, caplog):
        write_schema(tmp_path, "a_good.yml", {"tables": [{"name": "user"}]})
        write_schema(tmp_path, "b_broken.yml", "tables: [unclosed\n")
        write_schema(tmp_path, "c_invalid.yml", {"tables": [{"fields": []}]})
        (tmp_path / "d_binary.yml").write_bytes(b"\xff\xfe\x00bad")
        write_schema(tmp_path, "e_good.yml", {"tables": [{"name": "order"}]})

        with caplog.at_level(logging.WARNING):
            fragments = SchemaLoader(tmp_path).load()

        assert [t.name for f in fragments for t in f.tables] == ["user", "order"]
        skipped = [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]
        assert len(skipped) == 3
        assert "b_broken.yml" in skipped[0]
        assert "c_invalid.yml" in skipped[1]
        assert "d_binary.yml" in skipped[2]

    def test_hidden_files_and_subdirectories_are_ignored(self, tmp_path):
        write_schema(tmp_path, ".hidden.yml", {"tables": [{"name": "hidden"}]})
        (tmp_path / "nested").mkdir()
        write_schema(tmp_path / "nested", "inner.yml", {"tables": [{"name": "inner"}]})
        write_schema(tmp_path, "user.yml", {"tables": [{"name": "user"}]})

        fragments = SchemaLoader(tmp_path).load()

        assert [t.name for f in fragments for t in f.tables] == ["user"]

    def test_empty_file_gives_empty_fragment(self, tmp_path):
        write_schema(tmp_path, "empty.yml", "")

        fragments = SchemaLoader(tmp_path).load()

        assert len(fragments) == 1
        assert fragments[0].tables == []

    def test_missing_directory_is_fatal(self, tmp_path):
        with pytest.raises(SchemaLoadError, match="Cannot read schema directory"):
            SchemaLoader(tmp_path / "missing").load()

    def test_file_instead_of_directory_is_fatal(self, tmp_path):
        path = write_schema(tmp_path, "user.yml", {"tables": []})
        with pytest.raises(SchemaLoadError):
            SchemaLoader(path).load()

    def test_load_file_propagates_errors(self, tmp_path):
        path = write_schema(tmp_path, "broken.yml", "tables: [unclosed\n")
        with pytest.raises(yaml.YAMLError):
            SchemaLoader(tmp_path).load_file(path)
