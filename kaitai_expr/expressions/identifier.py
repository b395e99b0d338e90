from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from kaitai_expr.expressions.expression import KsExpression, coerce_name


@dataclass(frozen=True, slots=True)
class Identifier(KsExpression):
    """Reference to a value in scope (``note_len``, ``_io``, ``_parent``)."""

    node_types: ClassVar[set[str]] = {"name"}
    name: str

    def __post_init__(self) -> None:
        coerce_name(self.name, "Identifier name")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Identifier:
        return cls(name=data["name"])

    def to_dict(self) -> dict[str, Any]:
        return {"type": "name", "name": self.name}

    def rebuild(self) -> str:
        """Reconstruct identifier."""
        return self.name


__all__ = ["Identifier"]
