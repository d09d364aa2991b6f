"""
Placeholder substitution.
Replaces ``var.<name>`` tokens in template text with literal values from a
symbol table, quoted so the result stays a valid typed literal.
"""

import logging
import re
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Set, Tuple, Union

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

# Spellings accepted as booleans when deciding whether a string can be emitted bare
BOOL_LITERALS = frozenset({'1', 't', 'T', 'TRUE', 'true', 'True', '0', 'f', 'F', 'FALSE', 'false', 'False'})

TEMPLATE_ERRORS = 'surrogateescape'


def is_bare_literal(text: str) -> bool:
    """True if string content reads as a boolean or a number."""
    return text in BOOL_LITERALS or parse_number(text) is not None


def render_value(value: Value) -> str:
    """
    Render a value as the literal token that replaces its placeholder.

    - bool: true / false
    - number: shortest round-trip decimal
    - string: bare when it reads as a bool or number, otherwise double-quoted
    - list / object: display text, double-quoted
    """
    if isinstance(value, BoolValue):
        return str(value)
    elif isinstance(value, NumberValue):
        return str(value)
    elif isinstance(value, StringValue):
        if is_bare_literal(value.value):
            return value.value
        return f'"{value.value}"'
    elif isinstance(value, (ListValue, ObjectValue)):
        return f'"{value}"'
    else:
        raise TypeError(f"Unsupported value type: {type(value).__name__}")


def read_template(path: Union[str, Path]) -> str:
    """Read template text so that writing it back reproduces the original bytes.

    Line endings are kept and bytes that are not valid UTF-8 survive as
    surrogate escapes.
    """
    with open(path, 'r', encoding='utf-8', errors=TEMPLATE_ERRORS, newline='') as f:
        return f.read()


def write_template(path: Union[str, Path], text: str) -> None:
    """Write template text produced by read_template."""
    with open(path, 'w', encoding='utf-8', errors=TEMPLATE_ERRORS, newline='') as f:
        f.write(text)


@dataclass
class SubstitutionResult:
    """Outcome of substituting one template file."""
    path: Path
    changed: bool = False
    replaced: int = 0
    unresolved: List[str] = field(default_factory=list)


class PlaceholderSubstitutor:
    """
    Substitutes ``var.<name>`` placeholders in text.

    Names are runs of ASCII letters, digits and underscores; a match stops at
    the first other character. Unknown names are left exactly as written.
    Instances hold no per-call state, so one substitutor can serve any
    number of templates.
    """

    PLACEHOLDER_PATTERN = re.compile(r'var\.(\w+)', re.ASCII)

    def substitute(self, text: str, table: SymbolTable) -> str:
        """
        Substitute placeholders in a string.

        Args:
            text: Template text containing var.<name> references
            table: Symbol table to resolve names against

        Returns:
            Text with every resolvable placeholder replaced
        """
        result, _, _ = self._substitute(text, table)
        return result

    def find_unresolved(self, text: str, table: SymbolTable) -> List[str]:
        """Sorted names referenced in text that the table does not define."""
        names = {match.group(1) for match in self.PLACEHOLDER_PATTERN.finditer(text)}
        return sorted(name for name in names if name not in table)

    def _substitute(self, text: str, table: SymbolTable) -> Tuple[str, int, List[str]]:
        replaced = 0
        unresolved: Set[str] = set()

        def replace_var(match):
            nonlocal replaced
            name = match.group(1)

            if name not in table:
                unresolved.add(name)
                return match.group(0)

            replaced += 1
            return render_value(table[name])

        result = self.PLACEHOLDER_PATTERN.sub(replace_var, text)
        return result, replaced, sorted(unresolved)

    def render_file(
        self,
        path: Union[str, Path],
        table: SymbolTable,
        write: bool = True,
        backup: bool = False
    ) -> SubstitutionResult:
        """
        Substitute placeholders in a template file, rewriting it in place.

        Args:
            path: Template file
            table: Symbol table to resolve names against
            write: Write the result back when the content changed
            backup: Copy the original to ``<name>.bak`` before writing

        Returns:
            SubstitutionResult describing what changed
        """
        path = Path(path)
        logger.debug(f"Scanning template: {path}")

        original = read_template(path)

        rendered, replaced, unresolved = self._substitute(original, table)
        result = SubstitutionResult(
            path=path,
            changed=rendered != original,
            replaced=replaced,
            unresolved=unresolved
        )

        if result.changed and write:
            if backup:
                backup_path = path.with_name(path.name + '.bak')
                shutil.copy2(path, backup_path)
                logger.debug(f"Backed up {path} to {backup_path}")

            write_template(path, rendered)
            logger.debug(f"Rewrote {path} ({replaced} placeholders)")

        return result
