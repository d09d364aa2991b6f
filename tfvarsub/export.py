"""YAML export of the merged symbol table."""

from typing import Any, Dict, Optional, TextIO

import yaml

from tfvarsub.values import SymbolTable


def to_plain(table: SymbolTable) -> Dict[str, Any]:
    """Convert a symbol table to plain Python data."""
    return {key: value.to_plain() for key, value in table.items()}


def dump_yaml(table: SymbolTable, stream: Optional[TextIO] = None) -> Optional[str]:
    """
    Serialize a symbol table as a YAML document.

    Objects become mappings, lists become sequences and scalars keep their
    type. Keys are sorted.

    Returns:
        The YAML text when no stream is given, otherwise None
    """
    return yaml.safe_dump(
        to_plain(table),
        stream,
        default_flow_style=False,
        sort_keys=True,
        allow_unicode=True
    )
