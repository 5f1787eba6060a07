"""
Jinja2 environment setup.

Each renderer builds its own environment from a RenderConfig, so filters
and options are never registered on shared global state.
"""

from __future__ import annotations

from pathlib import Path

import jinja2

from ...utils import snake_to_camel_case, snake_to_pascal_case, upper_first
from ..config import RenderConfig

# Filters available in every template
DEFAULT_FILTERS = {
    "upper_first": upper_first,
    "snake_to_pascal": snake_to_pascal_case,
    "snake_to_camel": snake_to_camel_case,
}


def build_environment(config: RenderConfig, template_dir: Path) -> jinja2.Environment:
    """
    Create a Jinja2 environment loading templates from a directory.

    Args:
        config: Render options
        template_dir: Directory templates (and their includes) are loaded from

    Returns:
        Configured environment
    """
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(template_dir)),
        trim_blocks=config.trim_blocks,
        lstrip_blocks=config.lstrip_blocks,
        keep_trailing_newline=config.keep_trailing_newline,
        undefined=jinja2.StrictUndefined if config.strict_undefined else jinja2.Undefined,
        autoescape=False,
    )
    env.filters.update(DEFAULT_FILTERS)
    return env
