"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps messages testable and consistently worded.
    """

    _RULES_URL = "https://www.unicode.org/reports/tr35/tr35-numbers.html#Language_Plural_Rules"
    _OPERANDS_URL = "https://www.unicode.org/reports/tr35/tr35-numbers.html#Operands"
    _CHARTS_URL = "https://www.unicode.org/cldr/charts/47/supplemental/language_plural_rules.html"

    @staticmethod
    def unexpected_token(
        source: str, position: int, found: str, expected: Iterable[str] = ()
    ) -> Diagnostic:
        """Token that the rule grammar does not allow at this point.

        Args:
            source: Rule string being parsed
            position: Character offset of the offending token
            found: Text of the offending token
            expected: Token descriptions that would have been accepted

        Returns:
            Diagnostic for UNEXPECTED_TOKEN
        """
        expected = tuple(expected)
        msg = f"Unexpected '{found}' at position {position}"
        hint = f"Expected {' or '.join(expected)}" if expected else None
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_TOKEN,
            message=msg,
            span=SourceSpan(position, position + max(1, len(found))),
            source=source,
            hint=hint,
            help_url=ErrorTemplate._RULES_URL,
        )

    @staticmethod
    def unexpected_end(
        source: str, position: int, expected: Iterable[str] = ()
    ) -> Diagnostic:
        """Rule string ended in the middle of a relation.

        Args:
            source: Rule string being parsed
            position: Offset of the end of input
            expected: Token descriptions that would have been accepted

        Returns:
            Diagnostic for UNEXPECTED_END
        """
        expected = tuple(expected)
        msg = f"Unexpected end of rule at position {position}"
        hint = f"Expected {' or '.join(expected)}" if expected else None
        return Diagnostic(
            code=DiagnosticCode.UNEXPECTED_END,
            message=msg,
            span=SourceSpan(position, position),
            source=source,
            hint=hint,
            help_url=ErrorTemplate._RULES_URL,
        )

    @staticmethod
    def invalid_operand(source: str, position: int, name: str) -> Diagnostic:
        """Identifier used where an operand is required.

        Args:
            source: Rule string being parsed
            position: Offset of the identifier
            name: The identifier text

        Returns:
            Diagnostic for INVALID_OPERAND
        """
        msg = f"Unknown operand '{name}' at position {position}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_OPERAND,
            message=msg,
            span=SourceSpan(position, position + max(1, len(name))),
            source=source,
            hint="Operands are n, i, v, w, f, t, c and e",
            help_url=ErrorTemplate._OPERANDS_URL,
        )

    @staticmethod
    def invalid_number(source: str, position: int, text: str, reason: str) -> Diagnostic:
        """Numeric literal that cannot be used in a rule.

        Args:
            source: Rule string being parsed
            position: Offset of the literal
            text: The literal text
            reason: Why the literal is rejected

        Returns:
            Diagnostic for INVALID_NUMBER
        """
        msg = f"Invalid number '{text}' at position {position}: {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_NUMBER,
            message=msg,
            span=SourceSpan(position, position + max(1, len(text))),
            source=source,
            help_url=ErrorTemplate._RULES_URL,
        )

    @staticmethod
    def invalid_decimal_string(value: str, reason: str) -> Diagnostic:
        """Numeric input that is not a decimal number.

        Args:
            value: The rejected input, as text
            reason: Why it was rejected

        Returns:
            Diagnostic for INVALID_DECIMAL_STRING
        """
        msg = f"Cannot derive plural operands from '{value}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_DECIMAL_STRING,
            message=msg,
            hint="Pass a decimal string such as '1.50' or a value with fraction_digits",
            help_url=ErrorTemplate._OPERANDS_URL,
        )

    @staticmethod
    def operand_overflow(value: str, reason: str) -> Diagnostic:
        """Numeric input outside the representable operand range.

        Args:
            value: The rejected input, as text
            reason: Which limit was exceeded

        Returns:
            Diagnostic for OPERAND_OVERFLOW
        """
        msg = f"Plural operands of '{value}' overflow: {reason}"
        return Diagnostic(
            code=DiagnosticCode.OPERAND_OVERFLOW,
            message=msg,
            help_url=ErrorTemplate._OPERANDS_URL,
        )

    @staticmethod
    def locale_not_found(locale_code: str, rule_type: str) -> Diagnostic:
        """No rule data for a locale.

        Args:
            locale_code: Requested locale
            rule_type: Requested rule type (cardinal or ordinal)

        Returns:
            Diagnostic for LOCALE_NOT_FOUND
        """
        msg = f"No {rule_type} plural rules for locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_NOT_FOUND,
            message=msg,
            hint="Check the locale code or register rules for it in the provider",
            help_url=ErrorTemplate._CHARTS_URL,
        )

    @staticmethod
    def engine_build_failed(
        locale_code: str, rule_type: str, categories: Iterable[str]
    ) -> Diagnostic:
        """One or more rule strings of a rule set failed to parse.

        Args:
            locale_code: Locale of the rule set
            rule_type: Rule type of the rule set
            categories: Categories whose rules were rejected

        Returns:
            Diagnostic for ENGINE_BUILD_FAILED
        """
        names = ", ".join(categories)
        msg = (
            f"Cannot build {rule_type} plural rules for '{locale_code}': "
            f"invalid rules for {names}"
        )
        return Diagnostic(
            code=DiagnosticCode.ENGINE_BUILD_FAILED,
            message=msg,
            hint="Inspect EngineBuildError.errors for per-category parse errors",
            help_url=ErrorTemplate._RULES_URL,
        )
