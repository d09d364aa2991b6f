"""Definition parsing exceptions."""

from typing import Optional


class ParseError(Exception):
    """Raised when a definition file cannot be parsed.

    Parsing stops at the first error; the CLI catches it and maps it to
    the parse-error exit code.
    """

    exit_code = 2

    def __init__(self, message: str, line_number: Optional[int] = None, source: Optional[str] = None):
        self.message = message
        self.line_number = line_number
        self.source = source

        location = source or "<definitions>"
        if line_number is not None:
            location = f"{location}:{line_number}"

        super().__init__(f"{location}: {message}")


class MalformedLine(ParseError):
    """A definition line has no '=' or an unbalanced list literal."""


class InvalidObjectValue(ParseError):
    """A single-line object body holds something other than a quoted string."""


class UnterminatedObject(ParseError):
    """Input ended while an object literal was still open."""
