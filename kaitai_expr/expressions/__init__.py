from .attribute import Attribute
from .binary import BinaryExpression
from .conditional import ConditionalExpression
from .enum_member import EnumMember
from .expression import KsExpression, coerce_expression
from .float import FloatPrimitive, PositiveFiniteFloat
from .identifier import Identifier
from .list import KsList
from .method_call import MethodCall
from .operator import BinaryOperator, UnaryOperator
from .primitive import (BooleanPrimitive, IntegerPrimitive, Primitive,
                        StringPrimitive)
from .subscript import Subscript
from .unary import UnaryExpression

__all__ = [
    "Attribute",
    "BinaryExpression",
    "BinaryOperator",
    "BooleanPrimitive",
    "ConditionalExpression",
    "EnumMember",
    "FloatPrimitive",
    "Identifier",
    "IntegerPrimitive",
    "KsExpression",
    "KsList",
    "MethodCall",
    "PositiveFiniteFloat",
    "Primitive",
    "StringPrimitive",
    "Subscript",
    "UnaryExpression",
    "UnaryOperator",
    "coerce_expression",
]
