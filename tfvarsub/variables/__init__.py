"""
Placeholder substitution module.
Resolves var.<name> placeholders against a symbol table.
"""

from .substitution import (
    PlaceholderSubstitutor,
    SubstitutionResult,
    read_template,
    render_value,
    write_template,
)

__all__ = ['PlaceholderSubstitutor', 'SubstitutionResult', 'read_template', 'render_value', 'write_template']
