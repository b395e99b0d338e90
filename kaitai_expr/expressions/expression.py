from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, ClassVar, Self


@dataclass(frozen=True, slots=True)
class KsExpression:
    """Base class for all expression tree nodes.

    Nodes are immutable and own their children exclusively, so a tree can be
    rendered any number of times (and from any thread) with identical output.
    """

    node_types: ClassVar[set[str]] = set()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Self:
        """Construct a node from its serialized mapping."""
        raise NotImplementedError

    def to_dict(self) -> dict[str, Any]:
        """Serialize the node to a JSON-compatible mapping."""
        raise NotImplementedError

    def rebuild(self) -> str:
        """Render the expression source text for this node."""
        raise NotImplementedError

    def model_copy(self, update: dict[str, Any] | None = None) -> Self:
        """Copy nodes to enable immutable-style edits during transforms."""
        return replace(self, **(update or {}))

    def _node_type(self) -> str:
        return next(iter(self.node_types))


def coerce_expression(value: Any) -> KsExpression:
    """Convert raw primitive values into KsExpression instances."""
    if isinstance(value, KsExpression):
        return value
    if isinstance(value, (bool, int, float, str)):
        from kaitai_expr.expressions.primitive import Primitive

        return Primitive(value=value)
    if isinstance(value, (list, tuple)):
        from kaitai_expr.expressions.list import KsList

        return KsList(value=value)
    raise ValueError(f"Unsupported expression type: {type(value)}")


def coerce_expressions(values: Any) -> tuple[KsExpression, ...]:
    """Freeze a sequence of children so owners stay immutable."""
    if isinstance(values, (str, bytes)) or not hasattr(values, "__iter__"):
        raise TypeError(f"Expected a sequence of expressions, got {type(values)}")
    return tuple(coerce_expression(value) for value in values)


def coerce_name(value: Any, what: str) -> str:
    """Reject non-string identifiers early instead of rendering garbage."""
    if not isinstance(value, str):
        raise TypeError(f"{what} must be a string, got {type(value).__name__}")
    return value


__all__ = [
    "KsExpression",
    "coerce_expression",
    "coerce_expressions",
    "coerce_name",
]
