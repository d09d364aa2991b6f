"""
tfvarsub: merge variable definition files and substitute var.<name>
placeholders in templates.
"""

from tfvarsub.definitions import parse_definitions, parse_text
from tfvarsub.exceptions import InvalidObjectValue, MalformedLine, ParseError, UnterminatedObject
from tfvarsub.symbols import build_symbol_table, merge_tables
from tfvarsub.variables import PlaceholderSubstitutor

__version__ = '0.1.0'

__all__ = [
    'parse_definitions',
    'parse_text',
    'ParseError',
    'MalformedLine',
    'InvalidObjectValue',
    'UnterminatedObject',
    'build_symbol_table',
    'merge_tables',
    'PlaceholderSubstitutor',
]
