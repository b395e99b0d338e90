from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from kaitai_expr.expressions.expression import KsExpression, coerce_expression
from kaitai_expr.expressions.operator import BinaryOperator


@dataclass(frozen=True, slots=True)
class BinaryExpression(KsExpression):
    """Infix operation between two operands.

    Every binary expression is wrapped in parentheses, whatever its parent
    or operands are. No precedence table is consulted, so ``a + b * c`` is
    always written ``(a + (b * c))``.
    """

    node_types: ClassVar[set[str]] = {"binary"}
    left: KsExpression
    operator: BinaryOperator
    right: KsExpression

    def __post_init__(self) -> None:
        object.__setattr__(self, "left", coerce_expression(self.left))
        object.__setattr__(self, "operator", BinaryOperator.coerce(self.operator))
        object.__setattr__(self, "right", coerce_expression(self.right))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BinaryExpression:
        from kaitai_expr.mapping import expression_from_dict

        return cls(
            left=expression_from_dict(data["left"]),
            operator=data["operator"],
            right=expression_from_dict(data["right"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "binary",
            "left": self.left.to_dict(),
            "operator": self.operator.name.lower(),
            "right": self.right.to_dict(),
        }

    def rebuild(self) -> str:
        return f"({self.left.rebuild()} {self.operator.token} {self.right.rebuild()})"


__all__ = ["BinaryExpression"]
