from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from kaitai_expr.expressions.expression import KsExpression, coerce_expression
from kaitai_expr.expressions.operator import UnaryOperator


@dataclass(frozen=True, slots=True)
class UnaryExpression(KsExpression):
    node_types: ClassVar[set[str]] = {"unary"}
    operator: UnaryOperator
    expression: KsExpression

    def __post_init__(self) -> None:
        """Normalize operator tokens and raw operands."""
        object.__setattr__(self, "operator", UnaryOperator.coerce(self.operator))
        object.__setattr__(self, "expression", coerce_expression(self.expression))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> UnaryExpression:
        from kaitai_expr.mapping import expression_from_dict

        return cls(
            operator=data["operator"],
            expression=expression_from_dict(data["expression"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "unary",
            "operator": self.operator.name.lower(),
            "expression": self.expression.to_dict(),
        }

    def rebuild(self) -> str:
        """Reconstruct unary expression, always parenthesized."""
        return f"({self.operator.token}{self.expression.rebuild()})"


__all__ = ["UnaryExpression"]
