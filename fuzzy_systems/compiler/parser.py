"""
Recursive-descent parser for infix fuzzy expressions.

Grammar (lowest to highest precedence):

    or      := and ('|' and)*
    and     := not ('&' not)*
    not     := ('!' | '~') not | primary
    primary := IDENT | NUMBER | '(' or ')'

Binary operators associate to the left: "a & b & c" parses as
"((a & b) & c)". NOT binds tightest, so "!a & b" is "(!a & b)".

Every malformed input is rejected here, with the position of the
offending token, before any value is bound.
"""

from __future__ import annotations

from typing import List, Optional

from ..errors import ExpressionSyntaxError
from ..value.membership import MAX_VALUE, MIN_VALUE
from .lexer import tokenize
from .syntax import Conjunction, Disjunction, Literal, Name, Negation, Syntax
from .tokens import BINARY_KINDS, OPERAND_START_KINDS, Token, TokenKind


class ExpressionParser:
    """
    Parser for one expression.

    Usage:
        tree = ExpressionParser("a | b & !c").parse()
        tree.canonical()  # "(a | (b & !c))"
    """

    def __init__(self, source: str):
        self.source = source
        self.tokens: List[Token] = tokenize(source)
        self.index = 0

    # -------------------------------------------------------------------------
    # Token stream
    # -------------------------------------------------------------------------

    def _peek(self) -> Token:
        return self.tokens[self.index]

    def _previous(self) -> Optional[Token]:
        return self.tokens[self.index - 1] if self.index > 0 else None

    def _advance(self) -> Token:
        token = self.tokens[self.index]
        if token.kind != TokenKind.EOF:
            self.index += 1
        return token

    def _error(self, reason: str, token: Token) -> ExpressionSyntaxError:
        return ExpressionSyntaxError(reason, self.source, token.position)

    # -------------------------------------------------------------------------
    # Grammar
    # -------------------------------------------------------------------------

    def parse(self) -> Syntax:
        """
        Parse the whole source.

        Raises:
            ExpressionSyntaxError: If the source is not a single well-formed
                expression
        """
        if self._peek().kind == TokenKind.EOF:
            raise self._error("Empty expression", self._peek())

        tree = self._parse_or()

        token = self._peek()
        if token.kind == TokenKind.EOF:
            return tree
        if token.kind == TokenKind.RPAREN:
            raise self._error("Unmatched ')'", token)
        if token.kind in OPERAND_START_KINDS:
            raise self._error(
                f"Missing operator before {token.describe()}; "
                "operands must be joined with '&' or '|'",
                token,
            )
        raise self._error(f"Unexpected {token.describe()}", token)

    def _parse_or(self) -> Syntax:
        left = self._parse_and()
        while self._peek().kind == TokenKind.OR:
            self._advance()
            right = self._parse_and()
            left = Disjunction(left, right)
        return left

    def _parse_and(self) -> Syntax:
        left = self._parse_not()
        while self._peek().kind == TokenKind.AND:
            self._advance()
            right = self._parse_not()
            left = Conjunction(left, right)
        return left

    def _parse_not(self) -> Syntax:
        if self._peek().kind == TokenKind.NOT:
            self._advance()
            return Negation(self._parse_not())
        return self._parse_primary()

    def _parse_primary(self) -> Syntax:
        token = self._peek()

        if token.kind == TokenKind.IDENT:
            self._advance()
            return Name(token.text, token.position)

        if token.kind == TokenKind.NUMBER:
            self._advance()
            return self._literal(token)

        if token.kind == TokenKind.LPAREN:
            self._advance()
            if self._peek().kind == TokenKind.RPAREN:
                raise self._error("Empty parentheses", token)
            inner = self._parse_or()
            closing = self._peek()
            if closing.kind == TokenKind.RPAREN:
                self._advance()
                return inner
            if closing.kind == TokenKind.EOF:
                raise self._error("Unclosed '('", token)
            if closing.kind in OPERAND_START_KINDS:
                raise self._error(
                    f"Missing operator before {closing.describe()}; "
                    "operands must be joined with '&' or '|'",
                    closing,
                )
            raise self._error(f"Expected ')' but found {closing.describe()}", closing)

        raise self._missing_operand(token)

    def _literal(self, token: Token) -> Literal:
        value = float(token.text)
        if not MIN_VALUE <= value <= MAX_VALUE:
            raise self._error(
                f"Literal {token.text} is not a membership degree; "
                "literals must be within [0, 1]",
                token,
            )
        return Literal(value, token.position)

    def _missing_operand(self, token: Token) -> ExpressionSyntaxError:
        """Diagnose a token found where an operand was required."""
        previous = self._previous()

        if previous is not None and previous.kind == TokenKind.NOT:
            return self._error(
                f"Dangling {previous.describe()}: negation has no operand",
                previous,
            )

        if token.kind in BINARY_KINDS:
            if previous is None:
                return self._error(
                    f"Expression starts with operator {token.describe()}", token
                )
            if previous.kind in BINARY_KINDS:
                return self._error(
                    f"Consecutive operators {previous.describe()} and {token.describe()}",
                    token,
                )
            return self._error(
                f"Operator {token.describe()} is missing its left operand", token
            )

        if previous is not None and previous.kind in BINARY_KINDS:
            if token.kind == TokenKind.EOF:
                return self._error(
                    f"Expression ends with operator {previous.describe()}", previous
                )
            return self._error(
                f"Operator {previous.describe()} is missing its right operand", previous
            )

        if token.kind == TokenKind.RPAREN:
            return self._error("Unmatched ')'", token)

        return self._error(f"Expected an operand but found {token.describe()}", token)


def parse_expression(source: str) -> Syntax:
    """Parse source into a syntax tree."""
    return ExpressionParser(source).parse()


__all__ = [
    "ExpressionParser",
    "parse_expression",
]
