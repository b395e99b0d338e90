"""Ternary ``cond ? a : b`` expressions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from kaitai_expr.expressions.expression import KsExpression, coerce_expression


@dataclass(frozen=True, slots=True)
class ConditionalExpression(KsExpression):
    node_types: ClassVar[set[str]] = {"cond"}
    condition: KsExpression
    consequence: KsExpression
    alternative: KsExpression

    def __post_init__(self) -> None:
        for name in ("condition", "consequence", "alternative"):
            object.__setattr__(self, name, coerce_expression(getattr(self, name)))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ConditionalExpression:
        from kaitai_expr.mapping import expression_from_dict

        return cls(
            condition=expression_from_dict(data["condition"]),
            consequence=expression_from_dict(data["consequence"]),
            alternative=expression_from_dict(data["alternative"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "cond",
            "condition": self.condition.to_dict(),
            "consequence": self.consequence.to_dict(),
            "alternative": self.alternative.to_dict(),
        }

    def rebuild(self) -> str:
        return (
            f"({self.condition.rebuild()} ? {self.consequence.rebuild()}"
            f" : {self.alternative.rebuild()})"
        )


__all__ = ["ConditionalExpression"]
