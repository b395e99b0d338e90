from __future__ import annotations

from enum import Enum
from typing import Any, TypeVar

_OperatorT = TypeVar("_OperatorT", bound=Enum)


def _coerce_operator(enum_cls: type[_OperatorT], value: Any) -> _OperatorT:
    """Accept enum members, their tokens (`"<<"`) or their names (`"shl"`)."""
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        try:
            return enum_cls(value.strip())
        except ValueError:
            pass
        try:
            return enum_cls[value.upper()]
        except KeyError:
            pass
    raise ValueError(f"Unsupported {enum_cls.__name__}: {value!r}")


class UnaryOperator(Enum):
    NEG = "-"
    NOT = "not"
    INV = "~"

    @property
    def token(self) -> str:
        """Prefix written before the operand; word operators need a space."""
        if self.value.isalpha():
            return f"{self.value} "
        return self.value

    @classmethod
    def coerce(cls, value: Any) -> UnaryOperator:
        return _coerce_operator(cls, value)


class BinaryOperator(Enum):
    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"
    REM = "%"

    EQ = "=="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="

    AND = "and"
    OR = "or"

    BIT_OR = "|"
    BIT_XOR = "^"
    BIT_AND = "&"

    SHL = "<<"
    SHR = ">>"

    @property
    def token(self) -> str:
        return self.value

    @classmethod
    def coerce(cls, value: Any) -> BinaryOperator:
        return _coerce_operator(cls, value)


__all__ = ["BinaryOperator", "UnaryOperator"]
