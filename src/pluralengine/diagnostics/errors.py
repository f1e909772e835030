"""Plural engine exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.
Construction-time failures (rule parsing, operand derivation, provider
lookup, engine assembly) raise these; category selection never does.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from types import MappingProxyType

from .codes import Diagnostic, OperandErrorKind, ParseErrorKind
from .templates import ErrorTemplate

__all__ = [
    "EngineBuildError",
    "LocaleNotFoundError",
    "OperandError",
    "PluralEngineError",
    "RuleParseError",
]


class PluralEngineError(Exception):
    """Base exception for all plural engine errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize PluralEngineError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class RuleParseError(PluralEngineError):
    """Rule string does not conform to the plural rule grammar.

    Attributes:
        kind: Which grammar violation occurred
        position: Character offset in the rule string
        source: The rule string
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        kind: ParseErrorKind,
        position: int,
        source: str = "",
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.position = position
        self.source = source

    def __repr__(self) -> str:
        return f"RuleParseError(kind={self.kind!r}, position={self.position})"


class OperandError(PluralEngineError):
    """Numeric input cannot be turned into plural operands.

    Attributes:
        kind: INVALID_DECIMAL_STRING or OVERFLOW
        input_value: The rejected input, as text
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        kind: OperandErrorKind,
        input_value: str = "",
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.input_value = input_value


class LocaleNotFoundError(PluralEngineError):
    """Provider has no rules for a locale and rule type.

    Attributes:
        locale_code: Requested locale
        rule_type: Requested rule type
    """

    def __init__(self, locale_code: str, rule_type: str) -> None:
        super().__init__(ErrorTemplate.locale_not_found(locale_code, rule_type))
        self.locale_code = locale_code
        self.rule_type = rule_type


class EngineBuildError(PluralEngineError):
    """Rule set could not be assembled because some rules failed to parse.

    Construction is atomic: no engine exists when this is raised.

    Attributes:
        locale_code: Locale of the rejected rule set
        rule_type: Rule type of the rejected rule set
        errors: Read-only mapping of category name to its parse error
    """

    def __init__(
        self,
        locale_code: str,
        rule_type: str,
        errors: Mapping[str, RuleParseError],
    ) -> None:
        super().__init__(
            ErrorTemplate.engine_build_failed(locale_code, rule_type, errors.keys())
        )
        self.locale_code = locale_code
        self.rule_type = rule_type
        self.errors: Mapping[str, RuleParseError] = MappingProxyType(dict(errors))
