"""Symbol table construction from one or more definition files."""

import logging
from pathlib import Path
from typing import Iterable, Union

from tfvarsub.definitions import load_definition_file
from tfvarsub.values import SymbolTable


logger = logging.getLogger(__name__)


def merge_tables(tables: Iterable[SymbolTable]) -> SymbolTable:
    """
    Merge symbol tables in order.

    A key defined more than once takes the value from the table merged
    last. Overrides are not errors.
    """
    merged: SymbolTable = {}
    for table in tables:
        for key, value in table.items():
            if key in merged:
                logger.debug(f"Overriding '{key}' with later definition")
            merged[key] = value
    return merged


def build_symbol_table(paths: Iterable[Union[str, Path]]) -> SymbolTable:
    """
    Parse each definition file in order and merge the results.

    Raises:
        ParseError: If any file fails to parse; no partial table is returned
        OSError: If a file cannot be read
    """
    return merge_tables(load_definition_file(path) for path in paths)
