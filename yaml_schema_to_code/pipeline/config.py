"""
Configuration for the code generator pipeline.

The configuration is a plain value passed down to each stage; nothing in
the pipeline keeps process-wide state.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum

from .errors import ConfigError

# Known target language labels and the file extension of generated files
DEFAULT_LANGUAGE_EXTENSIONS: dict[str, str] = {
    "rust": "rs",
    "python": "py",
    "cs": "cs",
    "go": "go",
    "typescript": "ts",
    "java": "java",
    "kotlin": "kt",
    "sql": "sql",
}


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when a generated file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Raise error if file exists
    FORCE = "force"  # Default: overwrite


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        atomic_write: Whether to write through a temporary file and rename it
    """

    mode: OutputMode = OutputMode.FORCE
    atomic_write: bool = True


@dataclass
class RenderConfig:
    """Options of the Jinja2 environment used to render templates."""

    trim_blocks: bool = True
    lstrip_blocks: bool = True
    keep_trailing_newline: bool = True

    # Fail on undefined template variables instead of rendering them empty
    strict_undefined: bool = True


@dataclass
class GeneratorConfig:
    """Configuration options for code generation."""

    # Target language label (e.g. "rust"), used to pick the file extension
    language: str = "rust"

    # Explicit extension for generated files, overrides the language mapping
    extension: str = ""

    language_extensions: dict[str, str] = field(default_factory=lambda: dict(DEFAULT_LANGUAGE_EXTENSIONS))

    render: RenderConfig = field(default_factory=RenderConfig)

    output: OutputConfig = field(default_factory=OutputConfig)

    def resolve_extension(self) -> str:
        """Get the extension of generated files for the configured language.

        Returns:
            Extension without leading dot

        Raises:
            ConfigError: If the language is unknown and no extension is set
        """
        if self.extension:
            return self.extension.lstrip(".")
        try:
            return self.language_extensions[self.language]
        except KeyError:
            known = ", ".join(sorted(self.language_extensions))
            raise ConfigError(f"Unknown target language '{self.language}' (known: {known}); set 'extension' in the config to use it") from None

    @staticmethod
    def from_dict(d: dict) -> GeneratorConfig:
        """Create a config from a dictionary.

        Raises:
            ConfigError: On unknown keys or values of the wrong type
        """
        if not isinstance(d, dict):
            raise ConfigError(f"Configuration must be a mapping, got {type(d).__name__}")

        config = GeneratorConfig()
        for k, v in d.items():
            if k == "render":
                config.render = _render_config_from_dict(v)
            elif k == "output":
                config.output = _output_config_from_dict(v)
            elif k == "language_extensions":
                if not isinstance(v, dict) or not all(isinstance(e, str) for e in v.values()):
                    raise ConfigError("'language_extensions' must map language labels to extension strings")
                config.language_extensions.update({str(label): ext for label, ext in v.items()})
            elif k in ("language", "extension"):
                if not isinstance(v, str):
                    raise ConfigError(f"'{k}' must be a string, got {type(v).__name__}")
                setattr(config, k, v)
            else:
                raise ConfigError(f"Unknown configuration key: {k}")
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "language": self.language,
            "extension": self.extension,
            "language_extensions": dict(self.language_extensions),
            "render": {
                "trim_blocks": self.render.trim_blocks,
                "lstrip_blocks": self.render.lstrip_blocks,
                "keep_trailing_newline": self.render.keep_trailing_newline,
                "strict_undefined": self.render.strict_undefined,
            },
            "output": {
                "mode": self.output.mode.value,
                "atomic_write": self.output.atomic_write,
            },
        }


def _check_keys(section: str, v: dict, cls) -> None:
    known = {f.name for f in fields(cls)}
    unknown = sorted(set(v) - known)
    if unknown:
        raise ConfigError(f"Unknown '{section}' configuration key(s): {', '.join(map(str, unknown))}")


def _render_config_from_dict(v) -> RenderConfig:
    if not isinstance(v, dict):
        raise ConfigError(f"'render' must be a mapping, got {type(v).__name__}")
    _check_keys("render", v, RenderConfig)
    for k, option in v.items():
        if not isinstance(option, bool):
            raise ConfigError(f"'render.{k}' must be a boolean, got {type(option).__name__}")
    return RenderConfig(**v)


def _output_config_from_dict(v) -> OutputConfig:
    if not isinstance(v, dict):
        raise ConfigError(f"'output' must be a mapping, got {type(v).__name__}")
    _check_keys("output", v, OutputConfig)

    mode = v.get("mode", OutputMode.FORCE)
    try:
        mode = OutputMode(mode)
    except ValueError:
        raise ConfigError(f"Invalid output mode: {mode!r}") from None

    atomic_write = v.get("atomic_write", True)
    if not isinstance(atomic_write, bool):
        raise ConfigError(f"'output.atomic_write' must be a boolean, got {type(atomic_write).__name__}")
    return OutputConfig(mode=mode, atomic_write=atomic_write)
