"""
Kaitai-Expr

A Python library for building Kaitai Struct expression trees and rendering
them to the exact expression language syntax a `.ksy` file expects.
"""

from kaitai_expr.expressions.float import PositiveFiniteFloat
from kaitai_expr.translator import translate

__all__ = ["PositiveFiniteFloat", "translate"]
