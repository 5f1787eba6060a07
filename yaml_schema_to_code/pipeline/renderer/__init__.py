"""
Renderer module.

Wraps Jinja2: environment setup and rendering of resolved tables.
"""

from __future__ import annotations

from .environment import DEFAULT_FILTERS, build_environment
from .template_renderer import RenderedBatch, TemplateRenderer, build_context

__all__ = [
    "TemplateRenderer",
    "RenderedBatch",
    "build_context",
    "build_environment",
    "DEFAULT_FILTERS",
]
