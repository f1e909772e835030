"""Diagnostic system for plural engine errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, OperandErrorKind, ParseErrorKind, SourceSpan
from .errors import (
    EngineBuildError,
    LocaleNotFoundError,
    OperandError,
    PluralEngineError,
    RuleParseError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EngineBuildError",
    "ErrorTemplate",
    "LocaleNotFoundError",
    "OperandError",
    "OperandErrorKind",
    "OutputFormat",
    "ParseErrorKind",
    "PluralEngineError",
    "RuleParseError",
    "SourceSpan",
]
