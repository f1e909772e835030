"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "OperandErrorKind",
    "ParseErrorKind",
    "SourceSpan",
]


class ParseErrorKind(StrEnum):
    """Failure kinds of rule string parsing.

    Inherits from ``StrEnum`` so that ``str(kind)`` and direct string
    comparisons work without accessing ``.value``.
    """

    UNEXPECTED_TOKEN = "unexpected_token"
    UNEXPECTED_END = "unexpected_end"
    INVALID_OPERAND = "invalid_operand"
    INVALID_NUMBER = "invalid_number"


class OperandErrorKind(StrEnum):
    """Failure kinds of operand derivation from numeric input."""

    INVALID_DECIMAL_STRING = "invalid_decimal_string"
    OVERFLOW = "overflow"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Rule syntax errors (parser failures)
        2000-2999: Operand errors (numeric input)
        3000-3999: Provider errors (rule data lookup)
        4000-4999: Engine construction errors
    """

    # Rule syntax errors (1000-1999)
    UNEXPECTED_TOKEN = 1001
    UNEXPECTED_END = 1002
    INVALID_OPERAND = 1003
    INVALID_NUMBER = 1004

    # Operand errors (2000-2999)
    INVALID_DECIMAL_STRING = 2001
    OPERAND_OVERFLOW = 2002

    # Provider errors (3000-3999)
    LOCALE_NOT_FOUND = 3001

    # Engine construction errors (4000-4999)
    ENGINE_BUILD_FAILED = 4001


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location inside a rule string for error reporting.

    Rule strings are single-line, so a span is a pair of character offsets.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive)
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A rule, operand or provider problem, ready for rendering.

    Attributes:
        code: Numbered error code
        message: One-sentence description
        span: Location in the rule string (None for non-syntax errors)
        source: Rule string the span points into (None for non-syntax errors)
        hint: Suggestion for fixing the error
        help_url: Documentation URL for this error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    source: str | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """The bare message, as used by exception str()."""
        return self.message

    def format_error(self) -> str:
        """Render with the default multi-line formatter.

        Example output:
            error[UNEXPECTED_TOKEN]: Unexpected 'x' at position 5
              --> position 5
               | i = 1 x
               |       ^
              = help: Relations are joined with 'and' or 'or'

        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
