"""Lexer tests.

Besides hand-picked cases, tokens are generated at random, rendered to text
with their display form and lexed again, which must give the same tokens
(up to their positions).
"""
import pytest
from hypothesis import given, strategies as st

from infixcalc.errors import (
    Expected,
    InvalidCharacter,
    InvalidExpression,
    InvalidNumber,
    UnexpectedEndOfInput,
)
from infixcalc import config
from infixcalc.lexer import Cursor, next_token, tokenize
from infixcalc.tokens import (
    OPS,
    DIV,
    FunctionCall,
    Identifier,
    Number,
    NumberToken,
    OperatorToken,
    Position,
)


def shapes(tokens):
    """Tokens without their positions."""
    return [
        (type(t), t.name, shapes(t.args)) if isinstance(t, FunctionCall) else (type(t), t[0])
        for t in tokens
    ]


def test_cursor_tracks_lines_and_columns():
    cursor = Cursor("ab\ncd")
    assert cursor.position == Position(1, 1)
    assert [cursor.consume() for _ in range(3)] == ["a", "b", "\n"]
    assert cursor.position == Position(2, 1)
    cursor.consume()
    assert cursor.position == Position(2, 2)
    cursor.consume()
    assert cursor.consume() is None
    assert cursor.position == Position(2, 3)


def test_tokens_carry_their_first_position():
    tokens = tokenize("12 +\n  foo")
    assert [t.pos for t in tokens] == [(1, 1), (1, 4), (2, 3)]
    assert str(tokens[2].pos) == "2:3"


def test_numbers():
    [a, b, c] = tokenize("7 2.5 10.")
    assert a == NumberToken(Number(7.0), Position(1, 1))
    assert b.value == 2.5 and c.value == 10.0
    assert isinstance(a.value, Number)


def test_second_decimal_point_is_invalid():
    with pytest.raises(InvalidNumber) as info:
        tokenize("1 + 1.2.3")
    assert info.value.literal == "1.2"
    assert info.value.location == (1, 5)


def test_overflowing_literal_is_invalid():
    with pytest.raises(InvalidNumber):
        tokenize("9" * 400)


def test_operators():
    tokens = tokenize("+-*/÷%^=()")
    assert all(isinstance(t, OperatorToken) for t in tokens)
    assert [t.op.symbol for t in tokens] == list("+-*//%^=()")
    assert tokens[4].op is DIV


def test_whitespace_and_empty_input():
    assert tokenize("") == []
    assert tokenize(" \t\r\n ") == []
    assert shapes(tokenize("\t1\r\n+ 2 ")) == shapes(tokenize("1+2"))


def test_invalid_character():
    with pytest.raises(InvalidCharacter) as info:
        tokenize("1 + $")
    assert info.value.character == "$"
    assert info.value.position == (1, 5)


def test_identifiers_can_be_disallowed():
    assert tokenize("x_1 + _y") == [
        Identifier("x_1", Position(1, 1)),
        OperatorToken(OPS["+"], Position(1, 5)),
        Identifier("_y", Position(1, 7)),
    ]
    with pytest.raises(InvalidCharacter) as info:
        tokenize("1 + x", allow_identifiers=False)
    assert info.value.character == "x"


def test_function_calls():
    [call] = tokenize("log(2, x)")
    assert call.name == "log" and call.pos == (1, 1)
    assert call.args == (
        NumberToken(Number(2.0), Position(1, 5)),
        Identifier("x", Position(1, 8)),
    )
    assert str(call) == "log(2, x)"


def test_nested_function_calls_and_whitespace():
    [call] = tokenize("f( g(1 ,2) ,\n h() )")
    [g, h] = call.args
    assert g.name == "g" and [a.value for a in g.args] == [1, 2]
    assert h == FunctionCall("h", (), Position(2, 2))


def test_name_followed_by_space_is_not_a_call():
    assert [type(t) for t in tokenize("f (1)")] == [
        Identifier,
        OperatorToken,
        NumberToken,
        OperatorToken,
    ]


def test_arguments_need_separators():
    with pytest.raises(Expected) as info:
        tokenize("f(1 2)")
    assert (info.value.expected, info.value.found) == (", or )", "2")
    assert info.value.position == (1, 5)


def test_unterminated_argument_list():
    with pytest.raises(UnexpectedEndOfInput):
        tokenize("f(1, 2")
    with pytest.raises(UnexpectedEndOfInput):
        tokenize("f(1,")


def test_next_token_on_exhausted_input():
    with pytest.raises(UnexpectedEndOfInput) as info:
        next_token(Cursor(""))
    assert info.value.position == (1, 1)


def test_call_nesting_is_limited():
    depth = config.MAX_CALL_DEPTH
    assert tokenize("f(" * depth + ")" * depth)
    with pytest.raises(InvalidExpression):
        tokenize("f(" * (depth + 1) + ")" * (depth + 1))


numbers = st.floats(min_value=0, allow_nan=False, allow_infinity=False).map(
    lambda x: NumberToken(Number(x), None)
)
names = st.from_regex(r"[A-Za-z_][A-Za-z0-9_]{0,8}", fullmatch=True).map(
    lambda name: Identifier(name, None)
)
operators = st.sampled_from(sorted(OPS.values())).map(lambda op: OperatorToken(op, None))
tokens = st.lists(numbers | names | operators)


@given(tokens)
def test_display_roundtrips(tokens):
    assert shapes(tokenize(" ".join(map(str, tokens)))) == shapes(tokens)
