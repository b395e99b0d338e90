from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from kaitai_expr.expressions.expression import (KsExpression,
                                                coerce_expression,
                                                coerce_name)


@dataclass(frozen=True, slots=True)
class Attribute(KsExpression):
    """Field or property access, ``expression.attribute``.

    The base is written as-is: operator nodes already carry their own
    parentheses, so ``(-3).to_s`` comes out right without extra wrapping.
    """

    node_types: ClassVar[set[str]] = {"attribute"}
    expression: KsExpression
    attribute: str

    def __post_init__(self) -> None:
        object.__setattr__(self, "expression", coerce_expression(self.expression))
        coerce_name(self.attribute, "Attribute name")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Attribute:
        from kaitai_expr.mapping import expression_from_dict

        return cls(
            expression=expression_from_dict(data["expression"]),
            attribute=data["attribute"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "attribute",
            "expression": self.expression.to_dict(),
            "attribute": self.attribute,
        }

    def rebuild(self) -> str:
        return f"{self.expression.rebuild()}.{self.attribute}"


__all__ = ["Attribute"]
