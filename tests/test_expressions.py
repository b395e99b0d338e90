"""Construction rules of the expression tree model."""

from dataclasses import FrozenInstanceError

import pytest

from kaitai_expr.exceptions import InvalidFloatError, InvalidFloatKind
from kaitai_expr.expressions import (Attribute, BinaryExpression,
                                     BinaryOperator, BooleanPrimitive,
                                     EnumMember, FloatPrimitive, Identifier,
                                     IntegerPrimitive, KsList, MethodCall,
                                     PositiveFiniteFloat, Primitive,
                                     StringPrimitive, Subscript,
                                     UnaryExpression, UnaryOperator,
                                     coerce_expression)


def test_primitive_dispatch():
    assert isinstance(Primitive(value=3), IntegerPrimitive)
    assert isinstance(Primitive(value=True), BooleanPrimitive)
    assert isinstance(Primitive(value="x"), StringPrimitive)
    assert isinstance(Primitive(value=1.5), FloatPrimitive)


def test_primitive_dispatch_rejects_unknown_payload():
    with pytest.raises(ValueError):
        Primitive(value=None)


def test_integer_must_be_non_negative():
    with pytest.raises(ValueError, match="non-negative"):
        IntegerPrimitive(value=-1)


def test_integer_rejects_bool_and_float():
    with pytest.raises(TypeError):
        IntegerPrimitive(value=True)
    with pytest.raises(TypeError):
        IntegerPrimitive(value=1.0)


def test_boolean_rejects_int():
    with pytest.raises(TypeError):
        BooleanPrimitive(value=1)


def test_string_rejects_bytes():
    with pytest.raises(TypeError):
        StringPrimitive(value=b"abc")


def test_string_with_single_quote_can_be_built():
    # Rejection happens when rendering, not at construction time.
    assert StringPrimitive(value="a'b").value == "a'b"


def test_float_payload_is_validated():
    with pytest.raises(InvalidFloatError) as exc_info:
        FloatPrimitive(value=-0.0)
    assert exc_info.value.kind is InvalidFloatKind.NEGATIVE
    assert FloatPrimitive(value=2.0).value == PositiveFiniteFloat(2.0)


def test_coerce_expression():
    assert coerce_expression(5) == IntegerPrimitive(value=5)
    assert coerce_expression(False) == BooleanPrimitive(value=False)
    assert coerce_expression([1, "a"]) == KsList(
        value=(IntegerPrimitive(value=1), StringPrimitive(value="a"))
    )
    name = Identifier(name="x")
    assert coerce_expression(name) is name
    with pytest.raises(ValueError, match="Unsupported expression type"):
        coerce_expression(None)


def test_children_are_coerced():
    expr = BinaryExpression(left=1, operator="+", right="a")
    assert expr.left == IntegerPrimitive(value=1)
    assert expr.right == StringPrimitive(value="a")
    assert expr.operator is BinaryOperator.ADD


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("<<", BinaryOperator.SHL),
        ("shl", BinaryOperator.SHL),
        ("BIT_AND", BinaryOperator.BIT_AND),
        ("and", BinaryOperator.AND),
        (BinaryOperator.REM, BinaryOperator.REM),
    ],
)
def test_binary_operator_coercion(value, expected):
    assert BinaryOperator.coerce(value) is expected


def test_unary_operator_coercion():
    assert UnaryOperator.coerce("-") is UnaryOperator.NEG
    assert UnaryOperator.coerce("not ") is UnaryOperator.NOT
    assert UnaryOperator.coerce("inv") is UnaryOperator.INV
    with pytest.raises(ValueError):
        UnaryOperator.coerce("!")
    with pytest.raises(ValueError):
        BinaryExpression(left=1, operator="**", right=2)


def test_operator_tokens():
    assert [op.token for op in UnaryOperator] == ["-", "not ", "~"]
    assert len(BinaryOperator) == 18
    assert BinaryOperator.OR.token == "or"


def test_sequences_are_frozen():
    items = [1, 2]
    expr = KsList(value=items)
    items.append(3)
    assert len(expr.value) == 2
    assert isinstance(expr.value, tuple)
    call = MethodCall(expression=Identifier(name="s"), method="substring", arguments=[0, 1])
    assert isinstance(call.arguments, tuple)
    member = EnumMember(enum_path=["a", "b"], label="c")
    assert member.enum_path == ("a", "b")


def test_enum_path_rejects_plain_string():
    with pytest.raises(TypeError):
        EnumMember(enum_path="port", label="http")


def test_names_must_be_strings():
    with pytest.raises(TypeError):
        Identifier(name=1)
    with pytest.raises(TypeError):
        Attribute(expression=Identifier(name="x"), attribute=None)


def test_nodes_are_immutable():
    expr = UnaryExpression(operator="-", expression=3)
    with pytest.raises(FrozenInstanceError):
        expr.expression = IntegerPrimitive(value=4)


def test_nodes_are_hashable_and_comparable():
    first = Subscript(expression=Identifier(name="a"), index=0)
    second = Subscript(expression=Identifier(name="a"), index=0)
    assert first == second
    assert len({first, second}) == 1
    assert IntegerPrimitive(value=1) != BooleanPrimitive(value=True)


def test_model_copy():
    expr = BinaryExpression(left=1, operator="+", right=2)
    updated = expr.model_copy(update={"operator": "-"})
    assert updated.operator is BinaryOperator.SUB
    assert expr.operator is BinaryOperator.ADD
    assert expr.model_copy() == expr


def test_empty_list_is_truthy():
    assert KsList()
    assert bool(KsList(value=[]))
