from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from kaitai_expr.expressions.expression import (KsExpression,
                                                coerce_expression,
                                                coerce_expressions,
                                                coerce_name)


@dataclass(frozen=True, slots=True)
class MethodCall(KsExpression):
    node_types: ClassVar[set[str]] = {"method_call"}
    expression: KsExpression
    method: str
    arguments: tuple[KsExpression, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "expression", coerce_expression(self.expression))
        object.__setattr__(self, "arguments", coerce_expressions(self.arguments))
        coerce_name(self.method, "Method name")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MethodCall:
        from kaitai_expr.mapping import expression_from_dict

        return cls(
            expression=expression_from_dict(data["expression"]),
            method=data["method"],
            arguments=[expression_from_dict(arg) for arg in data.get("arguments", [])],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "method_call",
            "expression": self.expression.to_dict(),
            "method": self.method,
            "arguments": [argument.to_dict() for argument in self.arguments],
        }

    def rebuild(self) -> str:
        """Reconstruct ``base.method(arg, ...)``; the parentheses are always written."""
        arguments = ", ".join(argument.rebuild() for argument in self.arguments)
        return f"{self.expression.rebuild()}.{self.method}({arguments})"


__all__ = ["MethodCall"]
