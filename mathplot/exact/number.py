"""
ExactNumber: a rational multiple of an integer power of pi or e.

Stores ``(numerator / denominator) * symbol ** symbol_factor`` with integer
numerator, denominator and factor, and symbol one of none, pi or e. Values are
always reduced: ``gcd(|numerator|, denominator) == 1`` and ``denominator > 0``.
Only one symbol is tracked per value.

Axis ticks are computed with these so that a step of pi/4 stays pi/4 after
any number of additions instead of drifting in floating point.
"""

from __future__ import annotations

import math
import re
from enum import Enum
from fractions import Fraction
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from ..core.config import settings
from ..core.errors import IncompatibleSymbol, InvalidValue, UnsupportedOperation
from .value import ExactValue, TextMeasurer

_TOKEN_PATTERN = re.compile(r"^(-)?([0-9]+)?(pi|e)?$")
_DECIMAL_PATTERN = re.compile(r"^-?[0-9]+\.[0-9]+$")


class Symbol(str, Enum):
    """The irrational multiplier tracked by an ExactNumber."""

    NONE = ""
    PI = "pi"
    E = "e"

    @property
    def constant(self) -> float:
        return _SYMBOL_CONSTANTS[self]

    @property
    def glyph(self) -> str:
        return _SYMBOL_GLYPHS[self]

    @property
    def tex(self) -> str:
        return _SYMBOL_TEX[self]


_SYMBOL_CONSTANTS = {Symbol.NONE: 1.0, Symbol.PI: math.pi, Symbol.E: math.e}
_SYMBOL_GLYPHS = {Symbol.NONE: "", Symbol.PI: "π", Symbol.E: "e"}
_SYMBOL_TEX = {Symbol.NONE: "", Symbol.PI: r"\pi", Symbol.E: "e"}


def gcd(a: int, b: int) -> int:
    """Greatest common divisor by the Euclidean algorithm; always >= 0."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def reduce_fraction(num: int, den: int) -> tuple[int, int]:
    """
    Reduce fraction to lowest terms.

    Ensures denominator is positive. ``den`` must be nonzero.
    """
    divisor = gcd(num, den)
    num, den = num // divisor, den // divisor
    if den < 0:
        num, den = -num, abs(den)
    return num, den


def float_to_fraction(value: float, digits: int | None = None) -> tuple[int, int]:
    """
    Convert a float to ``(numerator, denominator)`` with a power-of-ten denominator.

    The float is rounded to ``digits`` decimal places first (default
    ``settings.DECIMAL_DIGITS``), so 0.1 becomes 1/10 but 1/3 only becomes
    333333333/1000000000.
    """
    if not math.isfinite(value):
        raise InvalidValue(f"Invalid number: {value}", value)

    digits = settings.DECIMAL_DIGITS if digits is None else digits
    rounded = round(value, digits)
    if rounded == int(rounded):
        return int(rounded), 1

    text = f"{rounded:.{digits}f}".rstrip("0")
    whole, _, mantissa = text.partition(".")
    return int(whole + mantissa), 10 ** len(mantissa)


def _parse_component(value: Any, allow_decimal: bool) -> tuple[int, int, int, int]:
    """
    Parse one side of a fraction into ``(numerator, denominator, pi, e)``.

    Accepts ints, floats, decimal strings and tokens like "2", "-pi", "3e".
    """
    if isinstance(value, bool):
        raise InvalidValue(f"Invalid number: {value!r}", value)

    if isinstance(value, int):
        return value, 1, 0, 0

    if isinstance(value, float):
        if math.isfinite(value) and value == int(value):
            return int(value), 1, 0, 0
        if not allow_decimal:
            raise InvalidValue(f"Invalid number: {value!r} is not a whole number", value)
        num, den = float_to_fraction(value)
        return num, den, 0, 0

    if isinstance(value, str):
        token = value.strip()
        if allow_decimal and _DECIMAL_PATTERN.match(token):
            num, den = float_to_fraction(float(token))
            return num, den, 0, 0

        match = _TOKEN_PATTERN.match(token)
        if match is None or (match.group(2) is None and match.group(3) is None):
            raise InvalidValue(f"Invalid number: {value!r}", value)

        sign, digits, symbol = match.groups()
        mult = int(digits) if digits is not None else 1
        if sign:
            mult = -mult
        pi = 1 if symbol == "pi" else 0
        e = 1 if symbol == "e" else 0
        return mult, 1, pi, e

    raise InvalidValue(f"Invalid number: {value!r}", value)


def _term(coefficient: int, name: str, power: int) -> str:
    """Render ``coefficient * name ** power`` compactly, e.g. "2pi", "pi", "3"."""
    if power == 0 or not name:
        return str(coefficient)
    symbol = name if power == 1 else f"{name}^{power}"
    return symbol if coefficient == 1 else f"{coefficient}{symbol}"


class ExactNumber(BaseModel, ExactValue):
    """
    An exact rational, optionally scaled by an integer power of pi or e.

    Examples:
        >>> ExactNumber(1, 2)        # 1/2
        >>> ExactNumber("1", "2")    # 1/2
        >>> ExactNumber(1, 2, 1)     # pi/2
        >>> ExactNumber("pi", 2)     # pi/2
        >>> ExactNumber("pi/2")      # pi/2
        >>> ExactNumber(1, 1, 0, 1)  # e
        >>> ExactNumber(0.5)         # 1/2
    """

    model_config = ConfigDict(frozen=True)

    numerator: int = Field(description="Reduced numerator, carries the sign")
    denominator: int = Field(default=1, gt=0, description="Reduced denominator")
    symbol: Symbol = Field(default=Symbol.NONE, description="Tracked symbol")
    symbol_factor: int = Field(default=0, description="Power of the tracked symbol")

    def __init__(
        self,
        numerator: int | float | str,
        denominator: int | float | str = 1,
        pi_factor: int = 0,
        e_factor: int = 0,
        *,
        symbol: Symbol | str | None = None,
        symbol_factor: int = 0,
    ):
        """
        Create an ExactNumber.

        Args:
            numerator: Integer, float, decimal string, token ("2pi", "-e") or
                fraction string ("pi/2")
            denominator: Integer or token (default 1)
            pi_factor: Extra power of pi to multiply by
            e_factor: Extra power of e to multiply by
            symbol, symbol_factor: Keyword form of the symbolic factor, as
                produced by ``model_dump()``

        Raises:
            InvalidValue: Malformed token, non-integer denominator, zero denominator
            IncompatibleSymbol: The value would carry both pi and e factors
        """
        for factor in (pi_factor, e_factor, symbol_factor):
            if isinstance(factor, bool) or not isinstance(factor, int):
                raise InvalidValue(f"Symbol factor must be an integer, got {factor!r}", factor)

        if symbol is not None and symbol_factor:
            symbol = Symbol(symbol)
            if symbol is Symbol.PI:
                pi_factor += symbol_factor
            elif symbol is Symbol.E:
                e_factor += symbol_factor

        if isinstance(numerator, str) and "/" in numerator:
            parts = numerator.split("/")
            if len(parts) != 2:
                raise InvalidValue(f"Invalid number: {numerator!r}", numerator)
            if denominator != 1:
                raise InvalidValue(
                    f"Denominator given twice: {numerator!r} and {denominator!r}", numerator
                )
            numerator, denominator = parts

        top_num, top_den, top_pi, top_e = _parse_component(numerator, allow_decimal=True)
        bottom_num, bottom_den, bottom_pi, bottom_e = _parse_component(
            denominator, allow_decimal=False
        )

        num = top_num * bottom_den
        den = top_den * bottom_num
        pi_factor += top_pi - bottom_pi
        e_factor += top_e - bottom_e

        if den == 0:
            raise InvalidValue("Denominator cannot be zero", denominator)

        num, den = reduce_fraction(num, den)

        if pi_factor and e_factor:
            if num != 0:
                raise IncompatibleSymbol("construct", f"pi^{pi_factor}", f"e^{e_factor}")
            pi_factor = e_factor = 0

        if pi_factor:
            resolved_symbol, factor = Symbol.PI, pi_factor
        elif e_factor:
            resolved_symbol, factor = Symbol.E, e_factor
        else:
            resolved_symbol, factor = Symbol.NONE, 0

        super().__init__(
            numerator=num, denominator=den, symbol=resolved_symbol, symbol_factor=factor
        )

    @classmethod
    def from_parts(cls, numerator: int, denominator: int, symbol: Symbol, factor: int) -> ExactNumber:
        """Build from integer parts and a ``(symbol, factor)`` pair."""
        if symbol is Symbol.PI:
            return cls(numerator, denominator, factor)
        if symbol is Symbol.E:
            return cls(numerator, denominator, 0, factor)
        return cls(numerator, denominator)

    # Properties

    @property
    def approx(self) -> float:
        """
        Floating-point approximation: numerator * symbol^factor / denominator.

        Magnitudes beyond the float range approximate to signed infinity.
        """
        if self.numerator == 0:
            return 0.0
        try:
            scale = self.symbol.constant ** self.symbol_factor
            return float(Fraction(self.numerator, self.denominator)) * scale
        except OverflowError:
            return math.copysign(math.inf, self.numerator)

    @property
    def symbol_key(self) -> tuple[Symbol, int]:
        return self.symbol, self.symbol_factor

    @property
    def is_integer(self) -> bool:
        """True for symbol-free whole numbers."""
        return self.denominator == 1 and self.symbol_factor == 0

    @property
    def is_zero(self) -> bool:
        return self.numerator == 0

    @property
    def is_negative(self) -> bool:
        return self.numerator < 0

    # Arithmetic

    def add(self, other: Any) -> ExactNumber:
        """
        Sum of two values with the same symbolic factor.

        Raises:
            IncompatibleSymbol: Operands carry different (symbol, factor) pairs
        """
        other = coerce(other)
        symbol, factor = self._additive_symbol(other, "add")
        return ExactNumber.from_parts(
            self.numerator * other.denominator + other.numerator * self.denominator,
            self.denominator * other.denominator,
            symbol,
            factor,
        )

    def subtract(self, other: Any) -> ExactNumber:
        """
        Difference of two values with the same symbolic factor.

        Raises:
            IncompatibleSymbol: Operands carry different (symbol, factor) pairs
        """
        other = coerce(other)
        symbol, factor = self._additive_symbol(other, "subtract")
        return ExactNumber.from_parts(
            self.numerator * other.denominator - other.numerator * self.denominator,
            self.denominator * other.denominator,
            symbol,
            factor,
        )

    def multiply(self, other: Any) -> ExactNumber:
        """
        Product; factors of the same symbol add.

        Raises:
            IncompatibleSymbol: One operand carries pi and the other e
        """
        other = coerce(other)
        symbol, factor = self._multiplicative_symbol(other, 1, "multiply")
        return ExactNumber.from_parts(
            self.numerator * other.numerator,
            self.denominator * other.denominator,
            symbol,
            factor,
        )

    def divide(self, other: Any) -> ExactNumber:
        """
        Quotient; factors of the same symbol subtract.

        Raises:
            InvalidValue: Division by zero
            IncompatibleSymbol: One operand carries pi and the other e
        """
        other = coerce(other)
        if other.numerator == 0:
            raise InvalidValue(f"Cannot divide {self.to_string()} by zero", other.to_string())
        symbol, factor = self._multiplicative_symbol(other, -1, "divide")
        return ExactNumber.from_parts(
            self.numerator * other.denominator,
            self.denominator * other.numerator,
            symbol,
            factor,
        )

    def power(self, other: Any) -> ExactNumber:
        """
        Raise to an integer power.

        Raises:
            UnsupportedOperation: The exponent is fractional or symbolic
            InvalidValue: Zero raised to a negative power
        """
        exponent = coerce(other)
        if not exponent.is_integer:
            raise UnsupportedOperation(
                f"Raising to a non-integer power is not supported: {exponent.to_string()}",
                exponent.to_string(),
            )

        n = exponent.numerator
        if n >= 0:
            num, den = self.numerator ** n, self.denominator ** n
        else:
            if self.numerator == 0:
                raise InvalidValue("Zero cannot be raised to a negative power", self.to_string())
            num, den = self.denominator ** -n, self.numerator ** -n

        return ExactNumber.from_parts(num, den, self.symbol, self.symbol_factor * n)

    def nth_root(self, degree: Any) -> ExactNumber:
        """
        Exact ``degree``-th root, defined only for perfect powers.

        Raises:
            UnsupportedOperation: The degree is not a positive integer, or the
                root is not of the form (a/b)*symbol^c
        """
        degree = coerce(degree)
        if not degree.is_integer or degree.numerator <= 0:
            raise UnsupportedOperation(
                f"Root degree must be a positive integer: {degree.to_string()}",
                degree.to_string(),
            )

        n = degree.numerator
        if self.symbol_factor % n != 0:
            raise UnsupportedOperation(
                f"{self.to_string()} has no exact root of degree {n}", self.to_string()
            )
        if self.numerator < 0 and n % 2 == 0:
            raise UnsupportedOperation(
                f"Even root of negative value {self.to_string()}", self.to_string()
            )

        num = _integer_root(abs(self.numerator), n)
        den = _integer_root(self.denominator, n)
        if num is None or den is None:
            raise UnsupportedOperation(
                f"{self.to_string()} has no exact root of degree {n}", self.to_string()
            )
        if self.numerator < 0:
            num = -num

        return ExactNumber.from_parts(num, den, self.symbol, self.symbol_factor // n)

    def abs(self) -> ExactNumber:
        """Absolute value: same denominator and symbol, nonnegative numerator."""
        return ExactNumber.from_parts(
            abs(self.numerator), self.denominator, self.symbol, self.symbol_factor
        )

    # Comparison

    def equals(self, other: Any) -> bool:
        """
        Exact equality. Any two zeros are equal regardless of symbol.
        """
        other = coerce(other)
        if self.numerator == 0 and other.numerator == 0:
            return True
        return (
            self.numerator == other.numerator
            and self.denominator == other.denominator
            and self.symbol_key == other.symbol_key
        )

    def greater_than(self, other: Any) -> bool:
        """Compare floating-point approximations."""
        return self.approx > _approx_of(other)

    def less_than(self, other: Any) -> bool:
        """Compare floating-point approximations."""
        return self.approx < _approx_of(other)

    # Symbol bookkeeping

    def _additive_symbol(self, other: ExactNumber, operation: str) -> tuple[Symbol, int]:
        if self.symbol_key == other.symbol_key:
            return self.symbol_key
        # zero carries no symbol information
        if self.numerator == 0:
            return other.symbol_key
        if other.numerator == 0:
            return self.symbol_key
        raise IncompatibleSymbol(operation, self.to_string(), other.to_string())

    def _multiplicative_symbol(
        self, other: ExactNumber, sign: int, operation: str
    ) -> tuple[Symbol, int]:
        if other.symbol_factor == 0:
            return self.symbol_key
        if self.symbol_factor == 0:
            return other.symbol, sign * other.symbol_factor
        if self.symbol is other.symbol:
            return self.symbol, self.symbol_factor + sign * other.symbol_factor
        if self.numerator == 0 or other.numerator == 0:
            return Symbol.NONE, 0
        raise IncompatibleSymbol(operation, self.to_string(), other.to_string())

    # String representations

    def to_string(self) -> str:
        """
        Compact text form, e.g. "pi/2", "-2pi", "3/4", "pi^2".

        The constructor parses it back whenever the symbol factor is -1, 0 or 1.
        """
        if self.numerator == 0:
            return "0"
        name = self.symbol.value
        top = _term(abs(self.numerator), name, max(self.symbol_factor, 0))
        sign = "-" if self.numerator < 0 else ""
        if self.denominator == 1 and self.symbol_factor >= 0:
            return f"{sign}{top}"
        bottom = _term(self.denominator, name, max(-self.symbol_factor, 0))
        return f"{sign}{top}/{bottom}"

    def to_tex(self) -> str:
        """Convert to LaTeX representation."""
        if self.numerator == 0:
            return "0"
        name = self.symbol.tex
        top = _term(abs(self.numerator), name, max(self.symbol_factor, 0))
        sign = "-" if self.numerator < 0 else ""
        if self.denominator == 1 and self.symbol_factor >= 0:
            return f"{sign}{top}"
        bottom = _term(self.denominator, name, max(-self.symbol_factor, 0))
        return f"{sign}\\frac{{{top}}}{{{bottom}}}"

    # Drawable representation

    @property
    def numerator_label(self) -> str:
        """Unsigned numerator label, e.g. "π", "3π", "2"."""
        return _term(abs(self.numerator), self.symbol.glyph, max(self.symbol_factor, 0))

    @property
    def denominator_label(self) -> str:
        """Denominator label; "1" for whole numbers."""
        return _term(self.denominator, self.symbol.glyph, max(-self.symbol_factor, 0))

    @property
    def is_fraction(self) -> bool:
        """True when the label is drawn with a fraction bar."""
        return self.denominator_label != "1"

    def draw_width(self, measurer: TextMeasurer) -> float:
        from .drawing import number_width

        return number_width(self, measurer)

    def draw_height(self) -> float:
        from .drawing import number_height

        return number_height(self)

    # Python operators

    def __add__(self, other: Any) -> ExactNumber:
        if not _is_operand(other):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> ExactNumber:
        if not _is_operand(other):
            return NotImplemented
        return coerce(other).add(self)

    def __sub__(self, other: Any) -> ExactNumber:
        if not _is_operand(other):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> ExactNumber:
        if not _is_operand(other):
            return NotImplemented
        return coerce(other).subtract(self)

    def __mul__(self, other: Any) -> ExactNumber:
        if not _is_operand(other):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> ExactNumber:
        if not _is_operand(other):
            return NotImplemented
        return coerce(other).multiply(self)

    def __truediv__(self, other: Any) -> ExactNumber:
        if not _is_operand(other):
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other: Any) -> ExactNumber:
        if not _is_operand(other):
            return NotImplemented
        return coerce(other).divide(self)

    def __pow__(self, other: Any) -> ExactNumber:
        if not _is_operand(other):
            return NotImplemented
        return self.power(other)

    def __rpow__(self, other: Any) -> ExactNumber:
        if not _is_operand(other):
            return NotImplemented
        return coerce(other).power(self)

    def __neg__(self) -> ExactNumber:
        return ExactNumber.from_parts(
            -self.numerator, self.denominator, self.symbol, self.symbol_factor
        )

    def __pos__(self) -> ExactNumber:
        return self

    def __abs__(self) -> ExactNumber:
        return self.abs()

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, float):
            # floats compare by their exact binary value, like int and Fraction do
            if self.numerator != 0 and self.symbol_factor != 0:
                return False
            return Fraction(self.numerator, self.denominator) == other
        if not _is_operand(other):
            return NotImplemented
        return self.equals(other)

    def __hash__(self) -> int:
        # symbol-free values hash like the equal int, float or Fraction
        if self.numerator == 0 or self.symbol_factor == 0:
            return hash(Fraction(self.numerator, self.denominator))
        return hash((self.numerator, self.denominator, self.symbol, self.symbol_factor))

    def __lt__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.less_than(other)

    def __gt__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.greater_than(other)

    def __le__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.equals(other) or self.less_than(other)

    def __ge__(self, other: Any) -> bool:
        if not _is_operand(other):
            return NotImplemented
        return self.equals(other) or self.greater_than(other)

    def __float__(self) -> float:
        return self.approx

    def __bool__(self) -> bool:
        return self.numerator != 0

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ExactNumber({self.to_string()!r})"


def _is_operand(value: Any) -> bool:
    return isinstance(value, (ExactNumber, int, float)) and not isinstance(value, bool)


def coerce(value: Any) -> ExactNumber:
    """Promote ints, floats and tokens to ExactNumber; pass ExactNumber through."""
    if isinstance(value, ExactNumber):
        return value
    return ExactNumber(value)


def _approx_of(value: Any) -> float:
    if isinstance(value, ExactNumber):
        return value.approx
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return coerce(value).approx


def _integer_root(value: int, degree: int) -> int | None:
    """Exact integer ``degree``-th root of ``value >= 0``, or None."""
    if value in (0, 1) or degree == 1:
        return value
    try:
        guess = int(round(value ** (1.0 / degree)))
    except OverflowError:
        return None
    for candidate in (guess - 1, guess, guess + 1):
        if candidate >= 0 and candidate ** degree == value:
            return candidate
    return None
