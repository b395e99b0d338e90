"""
Command line entry point for rendering expression trees.
"""

import json
import logging
import sys

from kaitai_expr.cli.parser import build_parser
from kaitai_expr.color import colorize_expression
from kaitai_expr.exceptions import InvalidFloatError, TreeFormatError
from kaitai_expr.expressions.float import (PositiveFiniteFloat,
                                           format_float_literal)
from kaitai_expr.mapping import expression_from_dict
from kaitai_expr.translator import translate

logger = logging.getLogger(__name__)


def _render(args) -> int:
    try:
        document = json.loads(args.file.read())
    except ValueError as exc:
        print(f"Invalid JSON: {exc}", file=sys.stderr)
        return 1
    trees = document if isinstance(document, list) else [document]
    logger.debug("Rendering %d expression(s)", len(trees))
    try:
        expressions = [expression_from_dict(tree) for tree in trees]
    except TreeFormatError as exc:
        print(f"Invalid expression tree: {exc}", file=sys.stderr)
        return 1
    for expression in expressions:
        print(colorize_expression(translate(expression), force=args.color))
    return 0


def _float(args) -> int:
    for literal in args.literals:
        try:
            value = PositiveFiniteFloat.try_from(float(literal))
        except InvalidFloatError as exc:
            print(f"{literal}: {exc.kind.value}", file=sys.stderr)
            return 1
        except ValueError:
            print(f"{literal}: not a number", file=sys.stderr)
            return 1
        print(colorize_expression(format_float_literal(value), force=args.color))
    return 0


def main(args=None) -> int:
    """Return CLI exit codes so automation can distinguish success from failure."""
    parser = build_parser()
    args = parser.parse_args(args)
    logging.basicConfig(level=getattr(logging, args.log_level))

    match args.command:
        case "render":
            return _render(args)
        case "float":
            return _float(args)
        case _:
            parser.print_help(sys.stderr)
            return 2
