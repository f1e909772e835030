"""CLDR plural operands derived from a number with explicit precision.

Plural rules do not look at a number directly but at a fixed set of
properties of its displayed form:

    n  absolute value
    i  integer digits of n
    v  number of visible fraction digits, with trailing zeros
    w  number of visible fraction digits, without trailing zeros
    f  visible fraction digits, with trailing zeros, as an integer
    t  visible fraction digits, without trailing zeros, as an integer
    c  compact decimal exponent (e is a synonym)

"1.10" and "1.1" are equal numbers but different operands (v=2 vs v=1), so
precision has to be supplied explicitly: either as a decimal string, as a
Decimal (whose exponent is its precision), or as a value together with an
explicit fraction digit count. A bare float is rejected because its
displayed precision cannot be recovered from the binary value.

Reference: https://www.unicode.org/reports/tr35/tr35-numbers.html#Operands

Python 3.13+. Zero external dependencies.
"""

import re
from dataclasses import dataclass
from decimal import ROUND_HALF_EVEN, Context, Decimal, InvalidOperation

from pluralengine.constants import (
    MAX_COMPACT_EXPONENT,
    MAX_FRACTION_DIGITS,
    MAX_INTEGER_OPERAND,
)
from pluralengine.diagnostics import ErrorTemplate, OperandError, OperandErrorKind
from pluralengine.enums import Operand

__all__ = ["PluralOperands"]

# sign, integer digits, fraction digits, compact exponent ("1.2c3" is 1200)
_DECIMAL_PATTERN = re.compile(r"([+-]?)([0-9]+)(?:\.([0-9]+))?(?:[ce]([0-9]+))?")

_MAX_INTEGER_DIGITS: int = len(str(MAX_INTEGER_OPERAND))

# Wide enough for every in-range value at every allowed precision.
_QUANTIZE_CONTEXT = Context(prec=_MAX_INTEGER_DIGITS + MAX_FRACTION_DIGITS + 2)


def _invalid(value: object, reason: str) -> OperandError:
    text = str(value)
    return OperandError(
        ErrorTemplate.invalid_decimal_string(text, reason),
        kind=OperandErrorKind.INVALID_DECIMAL_STRING,
        input_value=text,
    )


def _overflow(value: object, reason: str) -> OperandError:
    text = str(value)
    return OperandError(
        ErrorTemplate.operand_overflow(text, reason),
        kind=OperandErrorKind.OVERFLOW,
        input_value=text,
    )


@dataclass(frozen=True, slots=True)
class PluralOperands:
    """Operands of one number, as consumed by plural rule conditions.

    Use the factory class methods; they enforce the precision contract and
    the operand range limits.

    Examples:
        >>> PluralOperands.from_string("1.10")
        PluralOperands(n=Decimal('1.10'), i=1, v=2, w=1, f=10, t=1, c=0)
        >>> PluralOperands.from_value(1, fraction_digits=2).v
        2
        >>> PluralOperands.from_string("1.2c3").i
        1200
    """

    n: Decimal
    i: int
    v: int
    w: int
    f: int
    t: int
    c: int = 0

    @property
    def e(self) -> int:
        """Exponent operand; CLDR defines e as a synonym of c."""
        return self.c

    def get(self, operand: Operand) -> Decimal | int:
        """Value of one named operand."""
        match operand:
            case Operand.N:
                return self.n
            case Operand.I:
                return self.i
            case Operand.V:
                return self.v
            case Operand.W:
                return self.w
            case Operand.F:
                return self.f
            case Operand.T:
                return self.t
            case Operand.C | Operand.E:
                return self.c

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def from_string(cls, text: str) -> "PluralOperands":
        """Operands of a decimal string.

        Accepts an optional sign, digits, optional ``.`` and fraction digits,
        and an optional compact exponent ``c``/``e`` as used in CLDR samples.

        Raises:
            OperandError: INVALID_DECIMAL_STRING for malformed text,
                OVERFLOW for values outside the operand range
        """
        match = _DECIMAL_PATTERN.fullmatch(text)
        if match is None:
            raise _invalid(text, "not a decimal number")
        _, integer_digits, fraction_digits, exponent = match.groups()

        compact = 0
        if exponent is not None:
            if len(exponent) > 3 or int(exponent) > MAX_COMPACT_EXPONENT:
                raise _overflow(text, f"exponent above {MAX_COMPACT_EXPONENT}")
            compact = int(exponent)

        return cls._from_digits(text, integer_digits, fraction_digits or "", compact)

    @classmethod
    def from_int(cls, value: int) -> "PluralOperands":
        """Operands of an integer (no visible fraction digits).

        Raises:
            OperandError: OVERFLOW if abs(value) exceeds the 64-bit range
        """
        if isinstance(value, bool):
            raise _invalid(value, "booleans are not numbers")
        magnitude = abs(value)
        if magnitude > MAX_INTEGER_OPERAND:
            raise _overflow(value, "integer part exceeds 64-bit range")
        return cls(n=Decimal(magnitude), i=magnitude, v=0, w=0, f=0, t=0)

    @classmethod
    def from_decimal(cls, value: Decimal) -> "PluralOperands":
        """Operands of a Decimal; its exponent is the displayed precision.

        ``Decimal("1.50")`` has v=2, ``Decimal("15E-1")`` has v=1.

        Raises:
            OperandError: INVALID_DECIMAL_STRING for NaN and infinities,
                OVERFLOW for values outside the operand range
        """
        _, digit_tuple, exponent = value.as_tuple()
        # NaN and infinities carry a string marker instead of an exponent
        if not isinstance(exponent, int):
            raise _invalid(value, "not a finite number")
        if value.is_zero() and exponent >= 0:
            return cls(n=Decimal(0), i=0, v=0, w=0, f=0, t=0)
        if exponent > 0 and len(digit_tuple) + exponent > _MAX_INTEGER_DIGITS + 1:
            raise _overflow(value, "integer part exceeds 64-bit range")
        if -exponent > MAX_FRACTION_DIGITS:
            raise _overflow(value, f"more than {MAX_FRACTION_DIGITS} fraction digits")

        digits = "".join(map(str, digit_tuple))
        if exponent >= 0:
            return cls._from_digits(value, digits + "0" * exponent, "", 0)
        digits = digits.rjust(-exponent + 1, "0")
        return cls._from_digits(value, digits[:exponent], digits[exponent:], 0)

    @classmethod
    def from_value(
        cls, value: int | float | Decimal, fraction_digits: int
    ) -> "PluralOperands":
        """Operands of a value displayed with exactly fraction_digits digits.

        The value is rounded half-even to the requested precision, the same
        way a number formatter showing that many digits would display it.
        Floats go through their shortest repr, as Babel formats them.

        Args:
            value: Number to classify
            fraction_digits: Visible fraction digit count (v operand)

        Raises:
            ValueError: If fraction_digits is negative
            OperandError: INVALID_DECIMAL_STRING for NaN/infinity/bool,
                OVERFLOW for values outside the operand range
        """
        if fraction_digits < 0:
            msg = f"fraction_digits must be >= 0, got {fraction_digits}"
            raise ValueError(msg)
        if fraction_digits > MAX_FRACTION_DIGITS:
            raise _overflow(value, f"more than {MAX_FRACTION_DIGITS} fraction digits")
        if isinstance(value, bool):
            raise _invalid(value, "booleans are not numbers")

        decimal_value = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
        if not decimal_value.is_finite():
            raise _invalid(value, "not a finite number")
        if abs(decimal_value) >= MAX_INTEGER_OPERAND + 1:
            raise _overflow(value, "integer part exceeds 64-bit range")

        try:
            quantized = decimal_value.quantize(
                Decimal(1).scaleb(-fraction_digits),
                rounding=ROUND_HALF_EVEN,
                context=_QUANTIZE_CONTEXT,
            )
        except InvalidOperation as e:
            raise _overflow(value, str(e)) from e
        return cls.from_decimal(quantized)

    @classmethod
    def create(
        cls,
        value: str | int | float | Decimal,
        fraction_digits: int | None = None,
    ) -> "PluralOperands":
        """Operands of any supported input, dispatching on its type.

        Args:
            value: Decimal string, int, Decimal, or float (float requires
                fraction_digits)
            fraction_digits: Explicit visible precision; not allowed for strings

        Raises:
            OperandError: If the input violates the precision contract or limits
            TypeError: For unsupported input types
            ValueError: If fraction_digits is combined with a string
        """
        if fraction_digits is not None:
            if isinstance(value, str):
                msg = "fraction_digits cannot be combined with a decimal string"
                raise ValueError(msg)
            return cls.from_value(value, fraction_digits)

        match value:
            case bool():
                raise _invalid(value, "booleans are not numbers")
            case str():
                return cls.from_string(value)
            case int():
                return cls.from_int(value)
            case Decimal():
                return cls.from_decimal(value)
            case float():
                raise _invalid(value, "float input requires explicit fraction_digits")
            case _:
                msg = f"Unsupported numeric type: {type(value).__name__}"
                raise TypeError(msg)

    @classmethod
    def _from_digits(
        cls,
        source: object,
        integer_digits: str,
        fraction_digits: str,
        compact: int,
    ) -> "PluralOperands":
        """Build operands from the unsigned digit strings of a number.

        A compact exponent moves the decimal point right; c keeps the
        exponent so rules can tell "1.2c3" (compact) from "1200".
        """
        if compact:
            digits = integer_digits + fraction_digits
            point = len(integer_digits) + compact
            integer_digits = digits[:point].ljust(point, "0")
            fraction_digits = digits[point:]

        if len(integer_digits.lstrip("0")) > _MAX_INTEGER_DIGITS:
            raise _overflow(source, "integer part exceeds 64-bit range")
        i = int(integer_digits)
        if i > MAX_INTEGER_OPERAND:
            raise _overflow(source, "integer part exceeds 64-bit range")
        if len(fraction_digits) > MAX_FRACTION_DIGITS:
            raise _overflow(source, f"more than {MAX_FRACTION_DIGITS} fraction digits")

        significant = fraction_digits.rstrip("0")
        n = Decimal(f"{i}.{fraction_digits}") if fraction_digits else Decimal(i)
        return cls(
            n=n,
            i=i,
            v=len(fraction_digits),
            w=len(significant),
            f=int(fraction_digits or "0"),
            t=int(significant or "0"),
            c=compact,
        )
