from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, ClassVar

from kaitai_expr.exceptions import UnsupportedStringError
from kaitai_expr.expressions.expression import KsExpression


@dataclass(frozen=True, slots=True)
class Primitive(KsExpression):
    """Base class for literal values.

    Instantiating the base class dispatches on the payload type, so
    ``Primitive(value=3)`` yields an ``IntegerPrimitive``.
    """

    def __new__(cls, *args, **kwargs):
        """Dispatch to concrete subclasses when the base class is instantiated."""
        if cls is Primitive:
            value = kwargs.get("value", args[0] if args else None)
            return object.__new__(_primitive_cls_from_value(value))
        return object.__new__(cls)

    @classmethod
    def from_dict(cls, data: dict[str, Any]):
        return cls(value=data["value"])

    def to_dict(self) -> dict[str, Any]:
        return {"type": self._node_type(), "value": getattr(self, "value")}


@dataclass(frozen=True, slots=True)
class IntegerPrimitive(Primitive):
    """Non-negative integer literal of arbitrary size."""

    node_types: ClassVar[set[str]] = {"int"}
    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(
                f"Integer literal must be an int, got {type(self.value).__name__}"
            )
        if self.value < 0:
            raise ValueError(
                "Integer literal must be non-negative; "
                "wrap the magnitude in a UnaryExpression to negate it"
            )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> IntegerPrimitive:
        value = data["value"]
        # Large values are commonly shipped as strings to survive JSON readers.
        if isinstance(value, str) and value.isascii() and value.isdigit():
            value = int(Decimal(value))
        return cls(value=value)

    def rebuild(self) -> str:
        # Decimal has no digit limit, unlike int.__str__.
        return str(Decimal(self.value))


@dataclass(frozen=True, slots=True)
class BooleanPrimitive(Primitive):
    """Boolean literal."""

    node_types: ClassVar[set[str]] = {"bool"}
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(
                f"Boolean literal must be a bool, got {type(self.value).__name__}"
            )

    def rebuild(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True, slots=True)
class StringPrimitive(Primitive):
    """String literal, always written single-quoted and unescaped."""

    node_types: ClassVar[set[str]] = {"str"}
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"String literal must be a str, got {type(self.value).__name__}"
            )

    def rebuild(self) -> str:
        """Wrap the text in single quotes verbatim.

        Backslashes and double quotes carry no meaning inside single quotes,
        which also means a single quote cannot be represented at all.
        """
        if "'" in self.value:
            raise UnsupportedStringError(self.value)
        return f"'{self.value}'"


def _primitive_cls_from_value(value: Any) -> type[Primitive]:
    """Select the concrete primitive class for a Python value."""
    if isinstance(value, bool):
        return BooleanPrimitive
    if isinstance(value, int):
        return IntegerPrimitive
    if isinstance(value, float):
        from kaitai_expr.expressions.float import FloatPrimitive

        return FloatPrimitive
    if isinstance(value, str):
        return StringPrimitive
    raise ValueError(f"Unsupported expression type: {type(value)}")


__all__ = [
    "BooleanPrimitive",
    "IntegerPrimitive",
    "Primitive",
    "StringPrimitive",
]
