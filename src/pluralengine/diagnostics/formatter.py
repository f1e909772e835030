"""Rendering of rule diagnostics for terminals, logs and tools.

Three layouts are supported: a multi-line rustc-like report that echoes the
rule text with a caret under the offending span, a one-line summary, and a
JSON object.

Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]

_ANSI_SEVERITY = {
    "error": "\033[1;31m",
    "warning": "\033[1;33m",
}
_ANSI_RESET = "\033[0m"


class OutputFormat(StrEnum):
    """Diagnostic layouts."""

    RUST = "rust"
    SIMPLE = "simple"
    JSON = "json"


def _escape_control_chars(text: str) -> str:
    """Replace control characters so rule text cannot forge log lines."""
    return "".join(ch if ch.isprintable() else repr(ch)[1:-1] for ch in text)


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Turns Diagnostic objects into text.

    Attributes:
        output_format: Layout to produce
        sanitize: Hide the rule source and cap message length, for output
            that may reach untrusted readers
        color: Wrap the severity label in ANSI escapes
        max_content_length: Message cap applied when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(ErrorTemplate.unexpected_end("i = ", 4)))
        UNEXPECTED_END: Unexpected end of rule at position 4
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Render one diagnostic in the configured layout."""
        match self.output_format:
            case OutputFormat.RUST:
                return "\n".join(self._report_lines(diagnostic))
            case OutputFormat.SIMPLE:
                return f"{diagnostic.code.name}: {self._clean(diagnostic.message)}"
            case OutputFormat.JSON:
                return json.dumps(self._as_dict(diagnostic), ensure_ascii=False)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Render several diagnostics, one blank line between each."""
        return "\n\n".join(map(self.format, diagnostics))

    def _severity_label(self, diagnostic: Diagnostic) -> str:
        label = "warning" if diagnostic.severity == "warning" else "error"
        if not self.color:
            return label
        return f"{_ANSI_SEVERITY[label]}{label}{_ANSI_RESET}"

    def _report_lines(self, diagnostic: Diagnostic) -> list[str]:
        lines = [
            f"{self._severity_label(diagnostic)}[{diagnostic.code.name}]: "
            f"{self._clean(diagnostic.message)}"
        ]

        span = diagnostic.span
        if span is not None:
            lines.append(f"  --> position {span.start}")
            if diagnostic.source is not None and not self.sanitize:
                underline = "^" * max(1, span.end - span.start)
                lines.append(f"   | {_escape_control_chars(diagnostic.source)}")
                lines.append(f"   | {' ' * span.start}{underline}")

        if diagnostic.hint:
            lines.append(f"  = help: {self._clean(diagnostic.hint)}")
        if diagnostic.help_url:
            lines.append(f"  = note: see {diagnostic.help_url}")
        return lines

    def _as_dict(self, diagnostic: Diagnostic) -> dict[str, str | int | None]:
        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._clean(diagnostic.message),
            "severity": diagnostic.severity,
        }
        if diagnostic.span is not None:
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end
        optional = {
            "source": diagnostic.source,
            "hint": diagnostic.hint or None,
        }
        data.update({key: self._clean(text) for key, text in optional.items() if text is not None})
        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url
        return data

    def _clean(self, text: str) -> str:
        """Escape control characters; truncate too when sanitizing."""
        text = _escape_control_chars(text)
        if self.sanitize and len(text) > self.max_content_length:
            return f"{text[: self.max_content_length]}..."
        return text
