"""Float literals and the constrained double they carry."""

from __future__ import annotations

import math
import re
import struct
from dataclasses import dataclass
from decimal import Decimal
from functools import total_ordering
from typing import Any, ClassVar

from kaitai_expr.exceptions import InvalidFloatError, InvalidFloatKind
from kaitai_expr.expressions.primitive import Primitive

# Magnitudes inside [MIN_PLAIN, MAX_PLAIN) are written without an exponent.
MIN_PLAIN = 1e-4
MAX_PLAIN = 1e16

_DIGITS_ONLY = re.compile(r"[0-9]+")


def classify_float(value: float) -> InvalidFloatKind | None:
    """Return why *value* is rejected, or None when it is acceptable."""
    if not math.isfinite(value):
        return InvalidFloatKind.NON_FINITE
    if math.copysign(1.0, value) < 0:
        return InvalidFloatKind.NEGATIVE
    return None


@total_ordering
@dataclass(frozen=True, slots=True, eq=False, repr=False)
class PositiveFiniteFloat:
    """A double that is guaranteed finite and non-negative.

    Negative zero is rejected as well: its sign bit is set even though its
    magnitude is zero. Negative literals are expressed by wrapping a positive
    float in a negating UnaryExpression.

    Equality, hashing and ordering work on the IEEE-754 bit pattern. For the
    values this type admits, bit order and numeric order agree.
    """

    value: float

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Expected a float, got {type(value).__name__}")
        try:
            value = float(value)
        except OverflowError:
            raise InvalidFloatError(InvalidFloatKind.NON_FINITE, self.value) from None
        kind = classify_float(value)
        if kind is not None:
            raise InvalidFloatError(kind, value)
        object.__setattr__(self, "value", value)

    @classmethod
    def try_from(cls, value: float) -> PositiveFiniteFloat:
        """Validate a raw double, raising InvalidFloatError on rejection."""
        return cls(value)

    def to_bits(self) -> int:
        return struct.unpack("<Q", struct.pack("<d", self.value))[0]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PositiveFiniteFloat):
            return NotImplemented
        return self.to_bits() == other.to_bits()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PositiveFiniteFloat):
            return NotImplemented
        return self.to_bits() < other.to_bits()

    def __hash__(self) -> int:
        return hash(self.to_bits())

    def __float__(self) -> float:
        return self.value

    def __repr__(self) -> str:
        return f"PositiveFiniteFloat({self.value!r})"


def _shortest_decimal(value: float) -> Decimal:
    # repr() yields the shortest digit string that round-trips to the same double.
    return Decimal(repr(value)).normalize()


def _format_exponential(value: float) -> str:
    _, digits, exponent = _shortest_decimal(value).as_tuple()
    text = "".join(str(digit) for digit in digits)
    mantissa = text[0] if len(text) == 1 else f"{text[0]}.{text[1:]}"
    return f"{mantissa}e{exponent + len(text) - 1}"


def _format_plain(value: float) -> str:
    return format(_shortest_decimal(value), "f")


def should_format_with_exponent(value: float) -> bool:
    if value == 0.0:
        return False
    return not (MIN_PLAIN <= value < MAX_PLAIN)


def format_float_literal(value: PositiveFiniteFloat) -> str:
    """Render a float literal the way the expression grammar reads numbers.

    Zero and magnitudes in [1e-4, 1e16) use plain notation, everything else
    uses ``<mantissa>e<exponent>``. Both use the shortest digits that
    round-trip. A result made only of digits gets a ``.0`` suffix, otherwise
    it would be read back as an integer literal.
    """
    raw = value.value
    if should_format_with_exponent(raw):
        formatted = _format_exponential(raw)
    else:
        formatted = _format_plain(raw)
    if _DIGITS_ONLY.fullmatch(formatted):
        return f"{formatted}.0"
    return formatted


@dataclass(frozen=True, slots=True)
class FloatPrimitive(Primitive):
    node_types: ClassVar[set[str]] = {"float"}
    value: PositiveFiniteFloat

    def __post_init__(self) -> None:
        if not isinstance(self.value, PositiveFiniteFloat):
            object.__setattr__(self, "value", PositiveFiniteFloat.try_from(self.value))

    def to_dict(self) -> dict[str, Any]:
        return {"type": "float", "value": self.value.value}

    def rebuild(self) -> str:
        return format_float_literal(self.value)


__all__ = [
    "FloatPrimitive",
    "PositiveFiniteFloat",
    "classify_float",
    "format_float_literal",
    "should_format_with_exponent",
]
