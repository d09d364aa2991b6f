"""
Definition file parsing.
Builds typed symbol tables from ``key = value`` definition text.
"""

from .parser import LineCursor, load_definition_file, parse_definitions, parse_text

__all__ = ['LineCursor', 'load_definition_file', 'parse_definitions', 'parse_text']
