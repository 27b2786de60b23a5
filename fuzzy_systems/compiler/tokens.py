"""
Tokens of the infix expression language.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    """Token categories produced by the lexer."""

    IDENT = "IDENT"
    NUMBER = "NUMBER"
    NOT = "NOT"  # ! or ~
    AND = "AND"  # &
    OR = "OR"  # |
    LPAREN = "LPAREN"
    RPAREN = "RPAREN"
    EOF = "EOF"


BINARY_KINDS = frozenset({TokenKind.AND, TokenKind.OR})
OPERAND_START_KINDS = frozenset(
    {TokenKind.IDENT, TokenKind.NUMBER, TokenKind.LPAREN, TokenKind.NOT}
)


@dataclass(frozen=True)
class Token:
    """
    A single token.

    Attributes:
        kind: Token category
        text: Source text of the token ("" for EOF)
        position: Zero-based offset into the source
    """

    kind: TokenKind
    text: str
    position: int

    def describe(self) -> str:
        if self.kind == TokenKind.EOF:
            return "end of expression"
        return f"'{self.text}'"


__all__ = [
    "TokenKind",
    "Token",
    "BINARY_KINDS",
    "OPERAND_START_KINDS",
]
