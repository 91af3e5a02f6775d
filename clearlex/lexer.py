"""Indentation-aware lexer producing a flat list of tokens."""

from __future__ import annotations

import argparse
import math
import re
import string
import sys
from collections.abc import Callable, Iterator, Sequence
from os import PathLike

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

TAB_WIDTH = 4
SPACES_PER_INDENT = 4

_WHITESPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)
_BIN_DIGITS = frozenset("01")
_WORD_CHARS = frozenset(string.ascii_letters + string.digits + "_")
_NUMBER_CHARS = _DIGITS | {"."}

_MANTISSA = re.compile(r"\d+(?:\.\d*)?")
_EXPONENT_LIMIT = 1_000_000
_SIZE_LIMIT = 2 ** 64

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "a": "\a",
    "v": "\v",
    "f": "\f",
    "\\": "\\",
    '"': '"',
    "'": "'",
    "0": "\0",
}

_END = "\0"


def _power_of_ten(exponent: int) -> float:
    exponent = max(-_EXPONENT_LIMIT, min(_EXPONENT_LIMIT, exponent))
    try:
        return math.pow(10.0, exponent)
    except OverflowError:
        return math.inf


def _split_operators(run: str) -> Iterator[str]:
    """Split a run of operator characters, longest known operator first."""
    start = 0
    while start < len(run):
        size = min(MAX_OPERATOR_SIZE, len(run) - start)
        while run[start:start + size] not in OPERATOR_MAPPINGS:
            size -= 1
        yield run[start:start + size]
        start += size


class Lexer:
    """Splits source text into tokens, tracking indentation scopes."""

    def __init__(self, text: str) -> None:
        self._text = text
        self._pos = 0
        self._indents = 0
        self._tokens: list[Token] = []
        self._lex()

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> Lexer:
        """Lex the contents of the file at ``path``."""
        with open(path, encoding="utf-8", newline="") as handle:
            return cls(handle.read())

    def tokens(self) -> list[Token]:
        """The tokens produced, ending with an end-of-file token."""
        return list(self._tokens)

    def _emit(self, type_: TokenType, data: str) -> None:
        self._tokens.append(Token(type_, data))

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else _END

    def _prev(self) -> str:
        return self._text[self._pos - 1] if self._pos > 0 else _END

    def _take_while(self, accept: Callable[[str], bool]) -> str:
        start = self._pos
        while self._pos < len(self._text) and accept(self._text[self._pos]):
            self._pos += 1
        return self._text[start:self._pos]

    def _lex(self) -> None:
        while self._pos < len(self._text):
            self._eat()
        for _ in range(self._indents):
            self._emit(TokenType.END_SCOPE, "")
        self._indents = 0
        self._emit(TokenType.END_OF_FILE, "EOF")

    def _eat(self) -> None:
        if self._prev() == "\n":
            self._emit(TokenType.END_LINE, " ")
            if not self._line_is_blank():
                self._flush_scopes()
            if self._pos >= len(self._text):
                return

        char = self._text[self._pos]
        if char in _DIGITS:
            self._eat_number()
        elif char in _WORD_CHARS:
            self._eat_word()
        elif char in OPERATORS:
            self._eat_operator()
        elif char in PUNCTUATORS:
            self._eat_punctuator()
        elif char == '"':
            self._eat_string()
        elif char in _WHITESPACE:
            self._pos += 1
        else:
            raise ValueError(f"unexpected character {char!r} at offset {self._pos}")

    def _line_is_blank(self) -> bool:
        end = self._text.find("\n", self._pos)
        if end == -1:
            return False
        return all(char in _WHITESPACE for char in self._text[self._pos:end])

    def _flush_scopes(self) -> None:
        indentation = self._take_while(lambda char: char in " \t")
        width = sum(TAB_WIDTH if char == "\t" else 1 for char in indentation)
        level = width // SPACES_PER_INDENT
        for _ in range(self._indents - level):
            self._emit(TokenType.END_SCOPE, "")
        self._indents = level

    def _eat_word(self) -> None:
        word = self._take_while(lambda char: char in _WORD_CHARS)
        kind = TokenType.KEYWORD if word in KEYWORDS else TokenType.IDENTIFIER
        self._emit(kind, word)

    def _eat_operator(self) -> None:
        run = self._take_while(lambda char: char in OPERATORS)
        for operator in _split_operators(run):
            self._emit(OPERATOR_MAPPINGS[operator], operator)

    def _eat_punctuator(self) -> None:
        char = self._text[self._pos]
        self._pos += 1
        self._emit(PUNCTUATOR_MAPPINGS[char], char)

    def _eat_string(self) -> None:
        self._pos += 1
        parts: list[str] = []
        while self._pos < len(self._text):
            char = self._text[self._pos]
            self._pos += 1
            if char == '"':
                break
            if char == "\\":
                if self._pos >= len(self._text):
                    break
                escaped = self._text[self._pos]
                self._pos += 1
                parts.append(_ESCAPES.get(escaped, escaped))
                continue
            parts.append(char)
        self._emit(TokenType.STRING, "".join(parts))

    def _eat_radix(self, digits: frozenset[str], base: int) -> None:
        self._pos += 2
        word = self._take_while(lambda char: char in digits)
        value = int(word, base) % _SIZE_LIMIT if word else 0
        self._emit(TokenType.NUMBER, str(value))

    def _eat_number(self) -> None:
        prefix = self._text[self._pos:self._pos + 2]
        if prefix in ("0x", "0X"):
            self._eat_radix(_HEX_DIGITS, 16)
            return
        if prefix in ("0b", "0B"):
            self._eat_radix(_BIN_DIGITS, 2)
            return

        word = self._take_while(lambda char: char in _NUMBER_CHARS)
        mantissa = float(_MANTISSA.match(word).group())

        exponent = 0
        if self._peek() in ("e", "E"):
            self._pos += 1
            if self._peek() == "+":
                self._pos += 1
            negative = self._peek() == "-"
            if negative:
                self._pos += 1
            digits = self._take_while(lambda char: char in _DIGITS)
            exponent = int(digits) if digits else 0
            if negative:
                exponent = -exponent

        value = mantissa * _power_of_ten(exponent)
        self._emit(TokenType.NUMBER, format(value, ".17g"))


def tokenize(text: str) -> list[Token]:
    """Lex ``text`` and return its tokens."""
    return Lexer(text).tokens()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the tokens of a source file, one per line."""
    parser = argparse.ArgumentParser(prog="clearlex", description="Print the tokens of a source file.")
    parser.add_argument("path", nargs="?", default="test.cl", help="file to lex (default: test.cl)")
    args = parser.parse_args(argv)

    try:
        lexer = Lexer.from_file(args.path)
    except OSError as exc:
        print(f"clearlex: cannot read {args.path}: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"clearlex: {args.path}: {exc}", file=sys.stderr)
        return 1

    for token in lexer.tokens():
        print(token.type_name(), token.data)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())