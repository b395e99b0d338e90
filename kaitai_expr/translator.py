from __future__ import annotations

import logging
from typing import Any

from kaitai_expr.expressions.expression import KsExpression, coerce_expression

logger = logging.getLogger(__name__)


def translate(expression: KsExpression | Any) -> str:
    """Render an expression tree to expression language source text.

    Raw Python payloads (ints, floats, strings, bools and lists) are accepted
    and converted first. Rendering never mutates the tree; the only failure
    is UnsupportedStringError for a string literal holding a single quote.
    """
    node = coerce_expression(expression)
    rendered = node.rebuild()
    logger.debug("Rendered %s as %s", type(node).__name__, rendered)
    return rendered


__all__ = ["translate"]
