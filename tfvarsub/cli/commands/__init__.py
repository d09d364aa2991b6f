"""CLI command handlers."""

from .apply import apply_definitions
from .export import export_definitions
from .render import render_template

__all__ = ['apply_definitions', 'export_definitions', 'render_template']
