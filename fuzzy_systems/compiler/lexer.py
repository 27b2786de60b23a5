"""
Lexer for infix expressions.

Identifiers follow Python's rules (letters, digits, underscore, not
starting with a digit). Numbers are plain decimals: "1", "0.25", ".5".
Whitespace, including newlines, separates tokens and is otherwise ignored.
"""

from __future__ import annotations

from typing import List

from ..errors import ExpressionSyntaxError
from .tokens import Token, TokenKind

_SINGLE_CHAR = {
    "!": TokenKind.NOT,
    "~": TokenKind.NOT,
    "&": TokenKind.AND,
    "|": TokenKind.OR,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}


_DIGITS = frozenset("0123456789")


def _is_ident_start(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalpha())


def _is_ident_char(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalnum())


def tokenize(source: str) -> List[Token]:
    """
    Convert source text into tokens, terminated by an EOF token.

    Raises:
        ExpressionSyntaxError: On a character that starts no token, or a
            malformed number such as "1." or "0.5.2"
    """
    tokens: List[Token] = []
    pos = 0
    length = len(source)

    while pos < length:
        ch = source[pos]

        if ch.isspace():
            pos += 1
            continue

        kind = _SINGLE_CHAR.get(ch)
        if kind is not None:
            tokens.append(Token(kind, ch, pos))
            pos += 1
            continue

        if _is_ident_start(ch):
            start = pos
            while pos < length and _is_ident_char(source[pos]):
                pos += 1
            tokens.append(Token(TokenKind.IDENT, source[start:pos], start))
            continue

        if ch in _DIGITS or ch == ".":
            start = pos
            while pos < length and source[pos] in _DIGITS:
                pos += 1
            if pos < length and source[pos] == ".":
                pos += 1
                frac_start = pos
                while pos < length and source[pos] in _DIGITS:
                    pos += 1
                if pos == frac_start:
                    raise ExpressionSyntaxError(
                        "Malformed number: expected digits after '.'", source, frac_start
                    )
            if pos < length and (source[pos] == "." or _is_ident_char(source[pos])):
                raise ExpressionSyntaxError(
                    f"Malformed number '{source[start:pos + 1]}'", source, start
                )
            tokens.append(Token(TokenKind.NUMBER, source[start:pos], start))
            continue

        raise ExpressionSyntaxError(f"Unexpected character {ch!r}", source, pos)

    tokens.append(Token(TokenKind.EOF, "", length))
    return tokens


__all__ = ["tokenize"]
