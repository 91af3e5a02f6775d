"""Lexer for the Clear language: token types, tokens and an indentation-aware lexer."""

__version__ = "0.1.0"
__all__ = ["lexer", "tokens"]