"""
Tests for the generator configuration.
"""

from __future__ import annotations

import pytest

from yaml_schema_to_code.pipeline import ConfigError, GeneratorConfig, OutputMode


class TestGeneratorConfig:
    def test_defaults(self):
        config = GeneratorConfig()

        assert config.language == "rust"
        assert config.resolve_extension() == "rs"
        assert config.output.mode == OutputMode.FORCE
        assert config.render.strict_undefined is True

    def test_from_dict(self):
        config = GeneratorConfig.from_dict(
            {
                "language": "python",
                "render": {"trim_blocks": False},
                "output": {"mode": "error", "atomic_write": False},
                "language_extensions": {"zig": "zig"},
            }
        )

        assert config.resolve_extension() == "py"
        assert config.render.trim_blocks is False
        assert config.render.lstrip_blocks is True
        assert config.output.mode == OutputMode.ERROR_IF_EXISTS
        assert config.output.atomic_write is False
        assert config.language_extensions["zig"] == "zig"
        assert config.language_extensions["rust"] == "rs"

    def test_round_trip(self):
        config = GeneratorConfig.from_dict({"language": "go", "extension": ".gen.go", "output": {"mode": "error"}})

        assert GeneratorConfig.from_dict(config.to_dict()) == config

    def test_extension_override(self):
        config = GeneratorConfig(language="go", extension=".gen.go")

        assert config.resolve_extension() == "gen.go"

    def test_unknown_language(self):
        with pytest.raises(ConfigError, match="Unknown target language 'cobol'"):
            GeneratorConfig(language="cobol").resolve_extension()

    def test_unknown_language_with_extension(self):
        assert GeneratorConfig(language="cobol", extension="cbl").resolve_extension() == "cbl"

    @pytest.mark.parametrize(
        "data",
        [
            {"unknown_key": True},
            {"output": {"mode": "merge"}},
            {"render": {"autoescape": True}},
            {"render": True},
            {"render": {"trim_blocks": "yes"}},
            {"output": "force"},
            {"output": {"overwrite": True}},
            {"output": {"atomic_write": "false"}},
            {"language": 3},
            {"extension": 5},
            {"language_extensions": ["rs"]},
            {"language_extensions": {"zig": 1}},
            {"to_dict": 1},
            {"from_dict": 1},
            {"resolve_extension": "rs"},
            ["language", "rust"],
        ],
    )
    def test_invalid_config(self, data):
        with pytest.raises(ConfigError):
            GeneratorConfig.from_dict(data)

    def test_methods_are_not_overwritten_by_config_keys(self):
        with pytest.raises(ConfigError, match="Unknown configuration key: resolve_extension"):
            GeneratorConfig.from_dict({"resolve_extension": "rs"})

        assert GeneratorConfig().resolve_extension() == "rs"
