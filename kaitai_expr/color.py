from __future__ import annotations

import os
import sys
from typing import TextIO

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexer import RegexLexer
from pygments.token import (Keyword, Name, Number, Operator, Punctuation,
                            String, Whitespace)

_IDENTIFIER = r"[A-Za-z_][A-Za-z0-9_]*"


class KaitaiExpressionLexer(RegexLexer):
    """Lexer for rendered expressions, used to highlight CLI output."""

    name = "Kaitai Struct expression"
    aliases = ["kaitai-expr"]
    filenames: list[str] = []

    tokens = {
        "root": [
            (r"\s+", Whitespace),
            (r"'[^']*'", String.Single),
            (r"\b(true|false)\b", Keyword.Constant),
            (r"\b(and|or|not)\b", Operator.Word),
            (r"\d+\.\d+(e-?\d+)?|\d+e-?\d+", Number.Float),
            (r"\d+", Number.Integer),
            (_IDENTIFIER + r"(?=::)", Name.Namespace),
            (r"::", Punctuation),
            (r"(?<=\.)" + _IDENTIFIER, Name.Attribute),
            (_IDENTIFIER, Name),
            (r"<<|>>|<=|>=|==|!=|[-+*/%<>|^&~?:]", Operator),
            (r"[()\[\].,]", Punctuation),
        ],
    }


def colorize_expression(
    code: str, force: bool | None = None, stream: TextIO | None = None
) -> str:
    """Highlight rendered expressions for terminals.

    With *force* left as None, color is used only when *stream* (stdout by
    default) is a TTY and NO_COLOR is not set to 1.
    """
    if not code or force is False:
        return code
    stream = stream if stream is not None else sys.stdout
    if force is None and (os.getenv("NO_COLOR") == "1" or not stream.isatty()):
        return code
    return highlight(code, KaitaiExpressionLexer(), TerminalFormatter()).rstrip("\n")


__all__ = ["KaitaiExpressionLexer", "colorize_expression"]
