"""Loading expression trees from their JSON-compatible form."""

import json

import pytest

from kaitai_expr.exceptions import TreeFormatError
from kaitai_expr.expressions import (Attribute, BinaryExpression,
                                     BooleanPrimitive, ConditionalExpression,
                                     EnumMember, FloatPrimitive, Identifier,
                                     IntegerPrimitive, KsExpression, KsList,
                                     MethodCall, StringPrimitive, Subscript,
                                     UnaryExpression)
from kaitai_expr.mapping import (EXPRESSION_TYPES, NODE_TYPE_TO_EXPRESSION,
                                 expression_from_dict, expression_to_dict,
                                 register_expression)
from kaitai_expr.translator import translate

EOF_CHECK = {
    "type": "binary",
    "left": {"type": "bool", "value": False},
    "operator": "eq",
    "right": {
        "type": "cond",
        "condition": {"type": "bool", "value": True},
        "consequence": {
            "type": "attribute",
            "expression": {"type": "name", "name": "_io"},
            "attribute": "eof",
        },
        "alternative": {"type": "bool", "value": False},
    },
}


def test_load_and_render():
    expr = expression_from_dict(EOF_CHECK)
    assert isinstance(expr, BinaryExpression)
    assert isinstance(expr.right, ConditionalExpression)
    assert translate(expr) == "(false == (true ? _io.eof : false))"


def test_load_from_json_text():
    text = """
    {"type": "subscript",
     "expression": {"type": "attribute", "expression": {"type": "name", "name": "cont"}, "attribute": "items"},
     "index": {"type": "int", "value": 0}}
    """
    assert translate(expression_from_dict(json.loads(text))) == "cont.items[0]"


def test_operators_accept_tokens():
    data = {
        "type": "unary",
        "operator": "not",
        "expression": {"type": "name", "name": "done"},
    }
    assert translate(expression_from_dict(data)) == "(not done)"


def test_big_int_as_string():
    data = {"type": "int", "value": "340282366920938463463374607431768211456"}
    assert expression_from_dict(data) == IntegerPrimitive(value=2**128)


@pytest.mark.parametrize(
    "expr",
    [
        IntegerPrimitive(value=7),
        FloatPrimitive(value=0.25),
        StringPrimitive(value="w\\x"),
        BooleanPrimitive(value=True),
        EnumMember(enum_path=["some_type", "port"], label="http"),
        KsList(value=[1, Identifier(name="x")]),
        Identifier(name="_parent"),
        Attribute(expression=Identifier(name="_io"), attribute="pos"),
        MethodCall(expression=Identifier(name="s"), method="substring", arguments=[2, 7]),
        UnaryExpression(operator="~", expression=3),
        BinaryExpression(left=Identifier(name="hi"), operator="<<", right=16),
        ConditionalExpression(condition=True, consequence=1, alternative=2),
        Subscript(expression=Identifier(name="arr"), index=0),
    ],
)
def test_dump_then_load(expr):
    data = expression_to_dict(expr)
    assert json.loads(json.dumps(data)) == data
    assert expression_from_dict(data) == expr


def test_every_node_type_is_registered():
    assert set(NODE_TYPE_TO_EXPRESSION) == {
        "int", "float", "str", "bool", "enum_member", "list", "name",
        "attribute", "method_call", "unary", "binary", "cond", "subscript",
    }


def test_unknown_type():
    with pytest.raises(TreeFormatError, match="Unsupported node type: 'lambda'"):
        expression_from_dict({"type": "lambda"})


def test_not_a_mapping():
    with pytest.raises(TreeFormatError):
        expression_from_dict([1, 2])


def test_missing_key():
    with pytest.raises(TreeFormatError, match="Missing key 'label' in enum_member node"):
        expression_from_dict({"type": "enum_member", "enum_path": []})


def test_invalid_float_is_wrapped():
    with pytest.raises(TreeFormatError, match="Invalid float node") as exc_info:
        expression_from_dict({"type": "float", "value": -1.5})
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_nested_errors_are_not_rewrapped():
    data = {"type": "list", "value": [{"type": "int", "value": -1}]}
    with pytest.raises(TreeFormatError, match="^Invalid int node"):
        expression_from_dict(data)


def test_bad_operator():
    data = {"type": "binary", "left": {"type": "int", "value": 1}, "operator": "**",
            "right": {"type": "int", "value": 2}}
    with pytest.raises(TreeFormatError, match="Invalid binary node"):
        expression_from_dict(data)


def test_register_expression():
    from dataclasses import dataclass
    from typing import ClassVar

    @dataclass(frozen=True, slots=True)
    class Placeholder(KsExpression):
        node_types: ClassVar[set[str]] = {"placeholder"}

        @classmethod
        def from_dict(cls, data):
            return cls()

        def rebuild(self) -> str:
            return "_"

    try:
        register_expression(Placeholder)
        assert translate(expression_from_dict({"type": "placeholder"})) == "_"
    finally:
        NODE_TYPE_TO_EXPRESSION.pop("placeholder", None)
        EXPRESSION_TYPES.discard(Placeholder)


def test_huge_int_as_string():
    digits = "1" + "0" * 6000
    expr = expression_from_dict({"type": "int", "value": digits})
    assert expr == IntegerPrimitive(value=10**6000)
    assert translate(expr) == digits
