from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from kaitai_expr.expressions.expression import KsExpression, coerce_expression


@dataclass(frozen=True, slots=True)
class Subscript(KsExpression):
    node_types: ClassVar[set[str]] = {"subscript"}
    expression: KsExpression
    index: KsExpression

    def __post_init__(self) -> None:
        object.__setattr__(self, "expression", coerce_expression(self.expression))
        object.__setattr__(self, "index", coerce_expression(self.index))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Subscript:
        from kaitai_expr.mapping import expression_from_dict

        return cls(
            expression=expression_from_dict(data["expression"]),
            index=expression_from_dict(data["index"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "subscript",
            "expression": self.expression.to_dict(),
            "index": self.index.to_dict(),
        }

    def rebuild(self) -> str:
        return f"{self.expression.rebuild()}[{self.index.rebuild()}]"


__all__ = ["Subscript"]
