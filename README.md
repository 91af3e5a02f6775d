# clearlex

A lexer for the Clear language. It reads source text and produces a flat list
of tokens: identifiers, keywords, numbers, strings, operators and punctuators.
It also produces the structure tokens that an indentation-based parser needs:
`EndLine`, `EndScope` and a final `EndOfFile`.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Command line

```
clearlex program.cl
```

The path is optional and defaults to `test.cl` in the current directory. The
command prints one token per line: the token's type name, a space, then its
data.

```
Keyword function
Identifier main
LeftParen (
RightParen )
...
EndOfFile EOF
```

If the file cannot be read, or holds a character the lexer does not accept, a
message goes to standard error and the exit status is 1.

## Library use

```python
from clearlex.lexer import Lexer, tokenize
from clearlex.tokens import TokenType

for token in tokenize("x += 0x1F\n"):
    print(token.type_name(), token.data)

lexer = Lexer.from_file("program.cl")
numbers = [t.as_float() for t in lexer.tokens() if t.is_type(TokenType.NUMBER)]
```

`Lexer(text)` lexes a string at once; `Lexer.from_file(path)` reads a UTF-8
file first. `tokens()` returns a new list of the tokens, always ending with an
`END_OF_FILE` token whose data is `"EOF"`. `tokenize(text)` is a shortcut for
`Lexer(text).tokens()`. A character that starts no token (such as `@` or `#`)
raises `ValueError`.

### Tokens

`clearlex.tokens` holds the `TokenType` enum, whose values are the display
names (`TokenType.NUMBER.value == "Number"`), and the frozen `Token` dataclass
with fields `type` and `data`. A token converts its text with:

- `as_int()` – the leading decimal integer, in the signed 64-bit range
  (`OverflowError` outside it, `ValueError` if there is none);
- `as_uint()` – the same in the unsigned 64-bit range; a leading minus wraps
  modulo 2**64;
- `as_float()` – the leading floating-point number, including `inf`, `nan`
  and hexadecimal forms;
- `as_bool()` – true only for the text `"true"`;
- `as_char()` – the first character, or `"\0"` when the text is empty.

`is_type(kind)` tests the kind and `type_name()` gives its display name. The
module also exposes the lexical tables: `KEYWORDS`, `OPERATORS`,
`PUNCTUATORS`, `OPERATOR_MAPPINGS`, `PUNCTUATOR_MAPPINGS` and
`MAX_OPERATOR_SIZE`.

### Lexing rules

- Words made of ASCII letters, digits and `_` are keywords when they are in
  `KEYWORDS` (`int`, `float64`, `if`, `while`, `function`, `struct`, and so
  on). Any other word is an identifier.
- Numbers can be decimal with an optional fraction and exponent (`1.5e-3`),
  hexadecimal (`0xFF`) or binary (`0b101`). Decimal numbers are written back
  with 17 significant digits (`1.5` stays `1.5`, `2` becomes `2`); hexadecimal
  and binary numbers become decimal integers, wrapped to 64 bits.
- Strings are in double quotes, and the quotes are not part of the data. The
  escapes `\n \t \r \a \v \f \\ \" \' \0` are understood; any other escaped
  character stands for itself. An unterminated string runs to the end of the
  input.
- A run of operator characters is split greedily into the longest known
  operators, up to three characters (`<<=`, `...`, `=>`). `&&`, `||` and `->`
  come out as two single-character operators each.
- Every newline produces an `EndLine` token. Indentation is counted in steps
  of four columns, and a tab counts as four. When a non-blank line is indented
  less than the line before it, one `EndScope` token is emitted for each level
  it drops. Scopes still open at the end of the input are closed before
  `EndOfFile`.

## What it does not do

This package only lexes. It has no parser, no type checking and no code
generation: the tokens are the end of what it produces.