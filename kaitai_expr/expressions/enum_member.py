from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from kaitai_expr.expressions.expression import KsExpression, coerce_name

SCOPE_SEPARATOR = "::"


@dataclass(frozen=True, slots=True)
class EnumMember(KsExpression):
    """Reference to an enum constant, e.g. ``some_type::port::http``."""

    node_types: ClassVar[set[str]] = {"enum_member"}
    enum_path: tuple[str, ...]
    label: str

    def __post_init__(self) -> None:
        if isinstance(self.enum_path, str):
            raise TypeError("enum_path must be a sequence of names, not a string")
        object.__setattr__(
            self,
            "enum_path",
            tuple(coerce_name(segment, "Enum path segment") for segment in self.enum_path),
        )
        coerce_name(self.label, "Enum label")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> EnumMember:
        return cls(enum_path=data["enum_path"], label=data["label"])

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "enum_member",
            "enum_path": list(self.enum_path),
            "label": self.label,
        }

    def rebuild(self) -> str:
        return SCOPE_SEPARATOR.join([*self.enum_path, self.label])


__all__ = ["EnumMember", "SCOPE_SEPARATOR"]
