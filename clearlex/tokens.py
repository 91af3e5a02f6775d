"""Token kinds, lexical tables and the token value type."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class TokenType(Enum):
    """Kinds of token; each value is the kind's display name."""

    NONE = "None"

    IDENTIFIER = "Identifier"
    KEYWORD = "Keyword"
    NUMBER = "Number"
    STRING = "String"

    COLON = "Colon"
    SEMICOLON = "Semicolon"
    COMMA = "Comma"
    DOT = "Dot"
    EQUALS = "Equals"
    PLUS = "Plus"
    MINUS = "Minus"
    STAR = "Star"
    AMPERSAND = "Ampersand"
    PIPE = "Pipe"
    FORWARD_SLASH = "ForwardSlash"
    PERCENT = "Percent"
    HAT = "Hat"
    TILDE = "Telda"

    LEFT_PAREN = "LeftParen"
    RIGHT_PAREN = "RightParen"
    LEFT_BRACE = "LeftBrace"
    RIGHT_BRACE = "RightBrace"
    LEFT_BRACKET = "LeftBracket"
    RIGHT_BRACKET = "RightBracket"
    LESS_THAN = "LessThan"
    GREATER_THAN = "GreaterThan"
    BANG = "Bang"
    THIN_ARROW = "ThinArrow"
    FAT_ARROW = "FatArrow"

    PLUS_EQUALS = "PlusEquals"
    MINUS_EQUALS = "MinusEquals"
    STAR_EQUALS = "StarEquals"
    SLASH_EQUALS = "SlashEquals"
    PERCENT_EQUALS = "PercentEquals"
    EQUALS_EQUALS = "EqualsEquals"
    BANG_EQUALS = "BangEquals"
    LESS_THAN_EQUALS = "LessThanEquals"
    GREATER_THAN_EQUALS = "GreaterThanEquals"
    AMPERSAND_EQUALS = "AmpersandEquals"
    PIPE_EQUALS = "PipeEquals"
    HAT_EQUALS = "HatEquals"
    LEFT_SHIFT = "LeftShift"
    RIGHT_SHIFT = "RightShift"
    LEFT_SHIFT_EQUALS = "LeftShiftEquals"
    RIGHT_SHIFT_EQUALS = "RightShiftEquals"
    LOGICAL_AND = "LogicalAnd"
    LOGICAL_OR = "LogicalOr"
    INCREMENT = "Increment"
    DECREMENT = "Decrement"
    ELLIPSES = "Ellipses"

    END_LINE = "EndLine"
    END_SCOPE = "EndScope"
    END_OF_FILE = "EndOfFile"


KEYWORDS: frozenset[str] = frozenset({
    "bool",
    "uint8", "uint16", "uint32", "uint64",
    "uint",
    "int8", "int16", "int32", "int64",
    "int",
    "float32", "float64",
    "float",
    "if", "else", "while", "for", "return", "break", "continue",
    "true", "false", "null", "in", "and", "or",
    "struct", "function", "const", "class", "restriction",
    "trait", "property", "declare", "block", "enum",
})

PUNCTUATORS: frozenset[str] = frozenset({
    ";", ",", ":", "(", ")",
    "{", "}", "[", "]", "->",
})

OPERATORS: frozenset[str] = frozenset({
    "+", "-", "*", "/", "%",
    "=", "<", ">",
    "!", "&", "|",
    "^", "~",
    ".",
})

OPERATOR_MAPPINGS: Mapping[str, TokenType] = MappingProxyType({
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.FORWARD_SLASH,
    "%": TokenType.PERCENT,
    "=": TokenType.EQUALS,
    "<": TokenType.LESS_THAN,
    ">": TokenType.GREATER_THAN,
    "!": TokenType.BANG,
    "&": TokenType.AMPERSAND,
    "|": TokenType.PIPE,
    "^": TokenType.HAT,
    "~": TokenType.TILDE,
    ".": TokenType.DOT,
    "...": TokenType.ELLIPSES,

    "++": TokenType.INCREMENT,
    "--": TokenType.DECREMENT,
    "+=": TokenType.PLUS_EQUALS,
    "-=": TokenType.MINUS_EQUALS,
    "*=": TokenType.STAR_EQUALS,
    "/=": TokenType.SLASH_EQUALS,
    "%=": TokenType.PERCENT_EQUALS,
    "==": TokenType.EQUALS_EQUALS,
    "!=": TokenType.BANG_EQUALS,
    "<=": TokenType.LESS_THAN_EQUALS,
    ">=": TokenType.GREATER_THAN_EQUALS,
    "&=": TokenType.AMPERSAND_EQUALS,
    "|=": TokenType.PIPE_EQUALS,
    "^=": TokenType.HAT_EQUALS,
    "<<": TokenType.LEFT_SHIFT,
    ">>": TokenType.RIGHT_SHIFT,
    "<<=": TokenType.LEFT_SHIFT_EQUALS,
    ">>=": TokenType.RIGHT_SHIFT_EQUALS,

    "->": TokenType.THIN_ARROW,
    "=>": TokenType.FAT_ARROW,
})

MAX_OPERATOR_SIZE = 3

PUNCTUATOR_MAPPINGS: Mapping[str, TokenType] = MappingProxyType({
    ":": TokenType.COLON,
    ";": TokenType.SEMICOLON,
    ",": TokenType.COMMA,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "{": TokenType.LEFT_BRACE,
    "}": TokenType.RIGHT_BRACE,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
})


_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1
_UINT64_LIMIT = 2 ** 64

_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?)(\d+)")
_FLOAT = re.compile(
    r"[ \t\n\v\f\r]*"
    r"(?P<sign>[+-]?)"
    r"(?:"
    r"(?P<inf>inf(?:inity)?)"
    r"|(?P<nan>nan)(?:\([0-9a-z_]*\))?"
    r"|(?P<hex>0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?\d+)?)"
    r"|(?P<dec>(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)"
    r")",
    re.IGNORECASE,
)


def _leading_integer(text: str) -> tuple[bool, int]:
    match = _INTEGER.match(text)
    if match is None:
        raise ValueError(f"no integer at the start of {text!r}")
    return match.group(1) == "-", int(match.group(2))


@dataclass(frozen=True)
class Token:
    """A lexed token: its kind and its text."""

    type: TokenType = TokenType.NONE
    data: str = ""

    def as_int(self) -> int:
        """Read the leading decimal integer as a signed 64-bit value."""
        negative, magnitude = _leading_integer(self.data)
        value = -magnitude if negative else magnitude
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise OverflowError(f"{self.data!r} is out of the signed 64-bit range")
        return value

    def as_uint(self) -> int:
        """Read the leading decimal integer as an unsigned 64-bit value.

        A leading minus sign wraps the value modulo 2**64.
        """
        negative, magnitude = _leading_integer(self.data)
        if magnitude >= _UINT64_LIMIT:
            raise OverflowError(f"{self.data!r} is out of the unsigned 64-bit range")
        return (-magnitude) % _UINT64_LIMIT if negative else magnitude

    def as_bool(self) -> bool:
        """True only when the text is exactly ``true``."""
        return self.data == "true"

    def as_float(self) -> float:
        """Read the leading floating-point number of the text."""
        match = _FLOAT.match(self.data)
        if match is None:
            raise ValueError(f"no number at the start of {self.data!r}")
        sign = -1.0 if match.group("sign") == "-" else 1.0
        if match.group("inf"):
            return sign * math.inf
        if match.group("nan"):
            return math.copysign(math.nan, sign)
        if match.group("hex"):
            value = float.fromhex(match.group("hex"))
        else:
            value = float(match.group("dec"))
        if math.isinf(value):
            raise OverflowError(f"{self.data!r} is out of the double range")
        return sign * value

    def as_char(self) -> str:
        """The first character of the text, or NUL when it is empty."""
        return self.data[0] if self.data else "\0"

    def is_type(self, type_: TokenType) -> bool:
        """Whether the token is of the given kind."""
        return self.type is type_

    def type_name(self) -> str:
        """The display name of the token's kind."""
        return self.type.value