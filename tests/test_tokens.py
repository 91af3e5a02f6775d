import math

import pytest

from clearlex.tokens import (
    KEYWORDS,
    MAX_OPERATOR_SIZE,
    OPERATOR_MAPPINGS,
    OPERATORS,
    PUNCTUATOR_MAPPINGS,
    PUNCTUATORS,
    Token,
    TokenType,
)


def test_default_token_is_none_and_empty():
    token = Token()
    assert token.type is TokenType.NONE
    assert token.data == ""
    assert token.type_name() == "None"


@pytest.mark.parametrize(
    "type_, name",
    [
        (TokenType.IDENTIFIER, "Identifier"),
        (TokenType.TILDE, "Telda"),
        (TokenType.FORWARD_SLASH, "ForwardSlash"),
        (TokenType.RIGHT_SHIFT_EQUALS, "RightShiftEquals"),
        (TokenType.END_OF_FILE, "EndOfFile"),
    ],
)
def test_type_name(type_, name):
    assert Token(type_, "x").type_name() == name


def test_type_names_are_unique():
    names = [Token(t).type_name() for t in TokenType]
    assert len(names) == len(set(names))


def test_is_type():
    token = Token(TokenType.KEYWORD, "if")
    assert token.is_type(TokenType.KEYWORD)
    assert not token.is_type(TokenType.IDENTIFIER)


@pytest.mark.parametrize("text, value", [("42", 42), ("-7", -7), ("+5", 5), ("  12abc", 12)])
def test_as_int(text, value):
    assert Token(TokenType.NUMBER, text).as_int() == value


def test_as_int_bounds():
    assert Token(TokenType.NUMBER, "9223372036854775807").as_int() == 9223372036854775807
    with pytest.raises(OverflowError):
        Token(TokenType.NUMBER, "9223372036854775808").as_int()


def test_as_int_rejects_non_numbers():
    with pytest.raises(ValueError):
        Token(TokenType.IDENTIFIER, "abc").as_int()
    with pytest.raises(ValueError):
        Token(TokenType.STRING, "").as_int()


def test_as_uint():
    assert Token(TokenType.NUMBER, "255").as_uint() == 255
    assert Token(TokenType.NUMBER, "-1").as_uint() == 2 ** 64 - 1
    with pytest.raises(OverflowError):
        Token(TokenType.NUMBER, str(2 ** 64)).as_uint()
    with pytest.raises(ValueError):
        Token(TokenType.NUMBER, "x1").as_uint()


def test_as_bool():
    assert Token(TokenType.KEYWORD, "true").as_bool() is True
    assert Token(TokenType.KEYWORD, "false").as_bool() is False
    assert Token(TokenType.KEYWORD, "True").as_bool() is False


@pytest.mark.parametrize(
    "text, value",
    [("2.5", 2.5), ("-0.25", -0.25), ("1e3", 1000.0), ("3.5xyz", 3.5), ("1e", 1.0), ("0x10", 16.0)],
)
def test_as_float(text, value):
    assert Token(TokenType.NUMBER, text).as_float() == value


def test_as_float_special_values():
    assert Token(TokenType.NUMBER, "inf").as_float() == math.inf
    assert Token(TokenType.NUMBER, "-Infinity").as_float() == -math.inf
    assert math.isnan(Token(TokenType.NUMBER, "nan").as_float())


def test_as_float_errors():
    with pytest.raises(ValueError):
        Token(TokenType.IDENTIFIER, "abc").as_float()
    with pytest.raises(OverflowError):
        Token(TokenType.NUMBER, "1e400").as_float()


def test_as_float_round_trips_repr():
    for value in (0.1, 123.456, 1e-10, 6.02e23):
        assert Token(TokenType.NUMBER, repr(value)).as_float() == value


def test_as_char():
    assert Token(TokenType.STRING, "hello").as_char() == "h"
    assert Token(TokenType.STRING, "").as_char() == "\0"


def test_tokens_compare_by_value():
    assert Token(TokenType.NUMBER, "1") == Token(TokenType.NUMBER, "1")
    assert Token(TokenType.NUMBER, "1") != Token(TokenType.STRING, "1")


def test_every_single_operator_is_mapped():
    for op in OPERATORS:
        token = Token(OPERATOR_MAPPINGS[op], op)
        assert token.as_char() == op
        assert token.type_name() not in ("None", "Unknown")


@pytest.mark.parametrize(
    "op, name",
    [("...", "Ellipses"), ("<<=", "LeftShiftEquals"), (">>=", "RightShiftEquals"), ("=>", "FatArrow")],
)
def test_operator_mappings_respect_max_size(op, name):
    assert max(len(key) for key in OPERATOR_MAPPINGS) == MAX_OPERATOR_SIZE
    assert Token(OPERATOR_MAPPINGS[op], op).type_name() == name


def test_punctuator_mappings_are_punctuators():
    names = {Token(PUNCTUATOR_MAPPINGS[p], p).type_name() for p in PUNCTUATOR_MAPPINGS}
    assert names == {
        "Colon",
        "Semicolon",
        "Comma",
        "LeftParen",
        "RightParen",
        "LeftBrace",
        "RightBrace",
        "LeftBracket",
        "RightBracket",
    }
    assert set(PUNCTUATOR_MAPPINGS) <= PUNCTUATORS
    assert "->" in PUNCTUATORS
    assert "->" not in PUNCTUATOR_MAPPINGS
    assert Token(OPERATOR_MAPPINGS["->"], "->").type_name() == "ThinArrow"


def test_keywords():
    assert {"if", "function", "enum", "float64", "true", "false"} <= KEYWORDS
    assert "main" not in KEYWORDS
    assert Token(TokenType.KEYWORD, "true").as_bool() is True
    assert Token(TokenType.KEYWORD, "false").as_bool() is False


def test_tables_are_read_only():
    with pytest.raises(TypeError):
        OPERATOR_MAPPINGS["$"] = TokenType.NONE  # type: ignore[index]
    assert "$" not in OPERATOR_MAPPINGS
    assert Token(OPERATOR_MAPPINGS["+"], "+").type_name() == "Plus"