from __future__ import annotations

import logging
from typing import Any

from kaitai_expr.exceptions import TreeFormatError
from kaitai_expr.expressions.attribute import Attribute
from kaitai_expr.expressions.binary import BinaryExpression
from kaitai_expr.expressions.conditional import ConditionalExpression
from kaitai_expr.expressions.enum_member import EnumMember
from kaitai_expr.expressions.expression import KsExpression
from kaitai_expr.expressions.float import FloatPrimitive
from kaitai_expr.expressions.identifier import Identifier
from kaitai_expr.expressions.list import KsList
from kaitai_expr.expressions.method_call import MethodCall
from kaitai_expr.expressions.primitive import (BooleanPrimitive,
                                               IntegerPrimitive,
                                               StringPrimitive)
from kaitai_expr.expressions.subscript import Subscript
from kaitai_expr.expressions.unary import UnaryExpression

logger = logging.getLogger(__name__)

EXPRESSION_TYPES: set[type[KsExpression]] = {
    IntegerPrimitive,
    FloatPrimitive,
    StringPrimitive,
    BooleanPrimitive,
    EnumMember,
    KsList,
    Identifier,
    Attribute,
    MethodCall,
    UnaryExpression,
    BinaryExpression,
    ConditionalExpression,
    Subscript,
}

NODE_TYPE_TO_EXPRESSION: dict[str, type[KsExpression]] = {
    node_type: expression_type
    for expression_type in EXPRESSION_TYPES
    for node_type in expression_type.node_types
}


def register_expression(cls: type[KsExpression]) -> type[KsExpression]:
    """Allow extensions to plug in new expressions without editing core maps."""
    EXPRESSION_TYPES.add(cls)
    for node_type in cls.node_types:
        NODE_TYPE_TO_EXPRESSION[node_type] = cls
    return cls


def expression_from_dict(data: Any) -> KsExpression:
    """Build an expression tree from its serialized form.

    Every node is a mapping with a ``"type"`` tag; the remaining keys mirror
    the node's fields. Any structural or payload problem surfaces as a
    TreeFormatError naming the offending node type.
    """
    if not isinstance(data, dict):
        raise TreeFormatError(f"Expected an expression object, got {type(data).__name__}")
    node_type = data.get("type")
    expression_type = (
        NODE_TYPE_TO_EXPRESSION.get(node_type) if isinstance(node_type, str) else None
    )
    if expression_type is None:
        raise TreeFormatError(f"Unsupported node type: {node_type!r}")
    try:
        expression = expression_type.from_dict(data)
    except TreeFormatError:
        raise
    except KeyError as exc:
        raise TreeFormatError(f"Missing key {exc.args[0]!r} in {node_type} node") from exc
    except (TypeError, ValueError) as exc:
        raise TreeFormatError(f"Invalid {node_type} node: {exc}") from exc
    logger.debug("Loaded %s node", node_type)
    return expression


def expression_to_dict(expression: KsExpression) -> dict[str, Any]:
    """Serialize a tree into the form accepted by expression_from_dict."""
    return expression.to_dict()


__all__ = [
    "EXPRESSION_TYPES",
    "NODE_TYPE_TO_EXPRESSION",
    "expression_from_dict",
    "expression_to_dict",
    "register_expression",
]
