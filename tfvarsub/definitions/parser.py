"""
Definition file parser.

Turns line-oriented ``key = value`` text into a symbol table of typed
values. Supported value forms:
- ``{ ... }`` objects, on one line or spanning several, nested to any depth
- ``"quoted"`` strings (no escape processing)
- ``["a", "b"]`` single-line lists of strings
- decimal numbers, ``true`` / ``false``, and bare words kept verbatim
"""

import logging
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

from tfvarsub.exceptions import InvalidObjectValue, MalformedLine, UnterminatedObject
from tfvarsub.values import (
    BoolValue,
    ListValue,
    NumberValue,
    ObjectValue,
    StringValue,
    SymbolTable,
    Value,
    parse_number,
)


logger = logging.getLogger(__name__)

COMMENT_PREFIXES = ('#', '//')


class LineCursor:
    """
    Pull-based cursor over definition lines.

    The top-level loop and the object parser share one cursor, so lines
    consumed by a nested object are never seen again by the caller.
    """

    def __init__(self, lines: Iterable[str], source: Optional[str] = None):
        self._lines: Iterator[Tuple[int, str]] = enumerate(lines, start=1)
        self.source = source
        self.line_number = 0

    def advance(self) -> Optional[str]:
        """Return the next trimmed data line, or None at end of input.

        Blank lines and comment lines are skipped.
        """
        for line_number, raw in self._lines:
            self.line_number = line_number
            line = raw.strip()
            if not line or line.startswith(COMMENT_PREFIXES):
                continue
            return line
        return None


def split_assignment(line: str, cursor: LineCursor) -> Tuple[str, str]:
    """Split ``key = value`` on the first '=' and trim both sides."""
    if '=' not in line:
        raise MalformedLine(f"malformed line: {line}", cursor.line_number, cursor.source)
    key, value = line.split('=', 1)
    return key.strip(), value.strip()


def parse_value(value: str, cursor: LineCursor) -> Value:
    """Classify a top-level right-hand side into a typed value."""
    if value.startswith('{'):
        return parse_object(value, cursor)

    if value.startswith('"') and value.endswith('"'):
        return StringValue(value.strip('"'))

    if value.startswith('['):
        if not value.endswith(']'):
            raise MalformedLine(f"unterminated list literal: {value}", cursor.line_number, cursor.source)
        return parse_list(value)

    number = parse_number(value)
    if number is not None:
        return NumberValue(number)

    if value in ('true', 'false'):
        return BoolValue(value == 'true')

    return StringValue(value)


def parse_list(value: str) -> ListValue:
    """Parse a single-line list literal. Every member stays a string."""
    body = value.strip('[]').strip()
    if not body:
        return ListValue([])

    elements = body.split(',')
    # A single trailing comma does not add an empty member
    if len(elements) > 1 and not elements[-1].strip():
        elements.pop()

    return ListValue([StringValue(element.strip().strip('"')) for element in elements])


def parse_object(value: str, cursor: LineCursor) -> ObjectValue:
    """
    Parse an object literal whose opening brace starts ``value``.

    Same-line objects (``{key = "value"}``) are resolved immediately.
    Otherwise lines are pulled from the cursor until one starts with '}'.

    Raises:
        InvalidObjectValue: a same-line object has an unquoted value
        MalformedLine: a body line has no '='
        UnterminatedObject: input ends before the closing brace
    """
    obj = ObjectValue()
    opened_at = cursor.line_number
    first = value[1:].strip()

    if first.endswith('}'):
        body = first[:-1]
        if '=' in body:
            key, entry = (part.strip() for part in body.split('=', 1))
            if not (entry.startswith('"') and entry.endswith('"')):
                raise InvalidObjectValue(
                    f"invalid object value format: {first}", cursor.line_number, cursor.source
                )
            obj.fields[key] = StringValue(entry.strip('"'))
        return obj

    # A trailing comment on the opening line carries no entry
    if first and not first.startswith(COMMENT_PREFIXES):
        _add_object_entry(obj, first, cursor)

    while True:
        line = cursor.advance()
        if line is None:
            raise UnterminatedObject(
                f"unterminated object opened at line {opened_at}", cursor.line_number, cursor.source
            )
        if line.startswith('}'):
            return obj
        _add_object_entry(obj, line, cursor)


def _add_object_entry(obj: ObjectValue, line: str, cursor: LineCursor) -> None:
    """Store one ``key = value`` body line of a multi-line object."""
    key, entry = split_assignment(line, cursor)

    if entry.startswith('{'):
        obj.fields[key] = parse_object(entry, cursor)
    elif entry.startswith('"') and entry.endswith('"'):
        obj.fields[key] = StringValue(entry.strip('"'))
    else:
        # Bare words inside objects are kept verbatim, without type inference
        obj.fields[key] = StringValue(entry)


def parse_definitions(lines: Iterable[str], source: Optional[str] = None) -> SymbolTable:
    """
    Parse definition lines into a symbol table.

    Args:
        lines: Definition text, one line per item (newlines optional)
        source: Name used in error messages, usually the file path

    Returns:
        Mapping of identifier to typed value; a repeated key keeps the last value

    Raises:
        ParseError: On the first malformed construct; nothing is returned
    """
    cursor = LineCursor(lines, source)
    table: SymbolTable = {}

    while True:
        line = cursor.advance()
        if line is None:
            return table
        key, value = split_assignment(line, cursor)
        table[key] = parse_value(value, cursor)


def parse_text(text: str, source: Optional[str] = None) -> SymbolTable:
    """Parse definition text held in a single string."""
    return parse_definitions(text.splitlines(), source)


def load_definition_file(path: Union[str, Path]) -> SymbolTable:
    """Read and parse one definition file."""
    path = Path(path)
    logger.debug(f"Parsing definition file: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        table = parse_definitions(f, source=str(path))

    logger.debug(f"Parsed {len(table)} definitions from {path}")
    return table
