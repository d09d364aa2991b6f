"""
Typed values held in the symbol table.

A value is exactly one of five variants. The union is closed: code that
dispatches on a value handles each variant explicitly.
"""

import math
import re
from decimal import Decimal
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Union


@dataclass
class BoolValue:
    """Unquoted ``true`` / ``false``."""
    value: bool

    def to_plain(self) -> bool:
        return self.value

    def __str__(self) -> str:
        return 'true' if self.value else 'false'


@dataclass
class NumberValue:
    """Decimal number with float64 precision; integers are not distinguished."""
    value: float

    def to_plain(self) -> Union[int, float]:
        # Integral values export as int
        if math.isfinite(self.value) and self.value.is_integer():
            return int(self.value)
        return self.value

    def __str__(self) -> str:
        return format_number(self.value)


@dataclass
class StringValue:
    value: str

    def to_plain(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


@dataclass
class ListValue:
    """Ordered list of strings. Members are never coerced to other types."""
    items: List[StringValue] = field(default_factory=list)

    def to_plain(self) -> List[str]:
        return [item.value for item in self.items]

    def __str__(self) -> str:
        return '[' + ' '.join(str(item) for item in self.items) + ']'


@dataclass
class ObjectValue:
    """Mapping of identifiers to nested values."""
    fields: Dict[str, 'Value'] = field(default_factory=dict)

    def to_plain(self) -> Dict[str, object]:
        return {key: value.to_plain() for key, value in self.fields.items()}

    def __str__(self) -> str:
        entries = ' '.join(f"{key}:{self.fields[key]}" for key in sorted(self.fields))
        return f"map[{entries}]"


Value = Union[BoolValue, NumberValue, StringValue, ListValue, ObjectValue]

SymbolTable = Dict[str, Value]


def format_number(number: float) -> str:
    """
    Format a float as the shortest decimal text that reads back to the same value.

    Trailing ``.0`` is dropped and exponent notation is expanded, so
    ``3.0`` gives ``3`` and ``1e-07`` gives ``0.0000001``.
    """
    if math.isnan(number):
        return 'nan'
    if math.isinf(number):
        return 'inf' if number > 0 else '-inf'

    text = repr(number)
    if 'e' in text or 'E' in text:
        text = format(Decimal(text), 'f')
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


_DECIMAL_PATTERN = re.compile(r'[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')
_SPECIAL_PATTERN = re.compile(r'[+-]?(inf|infinity|nan)', re.IGNORECASE)


def parse_number(text: str) -> Optional[float]:
    """
    Parse decimal text as a float64.

    Returns None when the text is not a decimal number or when its
    magnitude is outside the float64 range.
    """
    if _SPECIAL_PATTERN.fullmatch(text):
        return float(text)
    if not _DECIMAL_PATTERN.fullmatch(text):
        return None

    number = float(text)
    if math.isinf(number):
        return None
    return number
