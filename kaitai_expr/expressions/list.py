"""List literals."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from kaitai_expr.expressions.expression import KsExpression, coerce_expressions


@dataclass(frozen=True, slots=True)
class KsList(KsExpression):
    node_types: ClassVar[set[str]] = {"list"}
    value: tuple[KsExpression, ...] = ()

    def __post_init__(self) -> None:
        """Coerce raw items so lists can be built from Python literals."""
        object.__setattr__(self, "value", coerce_expressions(self.value))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> KsList:
        from kaitai_expr.mapping import expression_from_dict

        return cls(value=[expression_from_dict(item) for item in data["value"]])

    def to_dict(self) -> dict[str, Any]:
        return {"type": "list", "value": [item.to_dict() for item in self.value]}

    def rebuild(self) -> str:
        items = ", ".join(item.rebuild() for item in self.value)
        return f"[{items}]"


__all__ = ["KsList"]
