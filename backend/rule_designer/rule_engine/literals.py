"""Literal coercion and loose value semantics shared by the generator and interpreter.

Condition and action values are always authored as raw strings. ``coerce`` is
the single place that decides whether such a string is a number, a boolean or
plain text; both the DRL generator and the interpreter consume its result.

The comparison helpers mirror the loose semantics the designer has always
used for simulated execution: numeric comparisons go through ``to_number``
(NaN compares false), string operators go through ``stringify``, and
equality converts types before comparing (``"25" == 25`` holds).
"""

import math
import re
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any


class _Undefined:
    """Marker for a value that is absent from the input tree."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()

_DECIMAL = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$")
_RADIX = re.compile(r"^0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_RADIX_BASE = {"x": 16, "o": 8, "b": 2}


class LiteralKind(Enum):
    NUMBER = "number"
    BOOLEAN = "boolean"
    TEXT = "text"


@dataclass(frozen=True)
class Coerced:
    """A raw literal resolved to its most specific primitive type.

    Attributes:
        kind: Which primitive the literal resolved to
        value: The typed value (int/float, bool or str)
        text: The literal exactly as authored
    """

    kind: LiteralKind
    value: Any
    text: str

    def to_drl(self) -> str:
        """Render the literal as a DRL token: bare for numbers/booleans, quoted otherwise."""
        if self.kind is LiteralKind.TEXT:
            return f'"{self.text}"'
        return self.text


def parse_number(text: str) -> int | float | None:
    """Parse text as a numeric literal, or return None if it is not one.

    Surrounding whitespace is ignored and blank text is 0. Decimal and
    exponent forms, ``Infinity`` and 0x/0o/0b prefixed integers are accepted.
    Integral finite values come back as ``int``.
    """
    stripped = text.strip()
    if not stripped:
        return 0

    match = _RADIX.match(stripped)
    if match:
        digits = match.group(1)
        return int(digits[1:], _RADIX_BASE[digits[0].lower()])

    if stripped in ("Infinity", "+Infinity"):
        return math.inf
    if stripped == "-Infinity":
        return -math.inf

    if not _DECIMAL.match(stripped):
        return None

    number = float(stripped)
    if math.isfinite(number) and number.is_integer():
        return int(number)
    return number


def coerce(text: str) -> Coerced:
    """Coerce a raw literal into a number, a boolean or text."""
    number = parse_number(text)
    if number is not None:
        return Coerced(LiteralKind.NUMBER, number, text)
    if text == "true":
        return Coerced(LiteralKind.BOOLEAN, True, text)
    if text == "false":
        return Coerced(LiteralKind.BOOLEAN, False, text)
    return Coerced(LiteralKind.TEXT, text, text)


def _format_float(value: float) -> str:
    """Shortest round-trip digits of a finite float, positioned for display.

    Plain notation is used while the integer part has at most 21 digits and
    the fraction has at most 5 leading zeros; otherwise ``1.5e-7`` / ``1e+21``.
    """
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).lstrip("0")
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    digits = stripped

    count = len(digits)
    point = exponent + count
    if count <= point <= 21:
        return sign + digits + "0" * (point - count)
    if 0 < point <= 21:
        return sign + digits[:point] + "." + digits[point:]
    if -6 < point <= 0:
        return sign + "0." + "0" * -point + digits

    power = point - 1
    mantissa = digits[0] + ("." + digits[1:] if count > 1 else "")
    return f"{sign}{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"


def stringify(value: Any) -> str:
    """String form of a value as the designer displays and compares it."""
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        return _format_float(value)
    if isinstance(value, str):
        return value
    if isinstance(value, dict):
        return "[object Object]"
    if isinstance(value, (list, tuple)):
        return ",".join(
            "" if item is None or item is UNDEFINED else stringify(item)
            for item in value
        )
    return str(value)


def to_number(value: Any) -> int | float:
    """Numeric form of a value; NaN when it has none."""
    if value is UNDEFINED:
        return math.nan
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        number = parse_number(value)
        return math.nan if number is None else number
    if isinstance(value, (list, tuple)):
        return to_number(stringify(value))
    return math.nan


def loose_equals(left: Any, right: Any) -> bool:
    """Abstract (type-converting) equality between two values."""
    if left is None or left is UNDEFINED:
        return right is None or right is UNDEFINED
    if right is None or right is UNDEFINED:
        return False

    if isinstance(left, bool):
        return loose_equals(int(left), right)
    if isinstance(right, bool):
        return loose_equals(left, int(right))

    left_compound = isinstance(left, (dict, list, tuple))
    right_compound = isinstance(right, (dict, list, tuple))
    if left_compound and right_compound:
        return left is right
    if left_compound:
        return loose_equals(stringify(left), right)
    if right_compound:
        return loose_equals(left, stringify(right))

    left_numeric = isinstance(left, (int, float))
    right_numeric = isinstance(right, (int, float))
    if left_numeric and right_numeric:
        return left == right
    if left_numeric:
        return left == to_number(right)
    if right_numeric:
        return to_number(left) == right
    return left == right
