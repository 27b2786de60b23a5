"""
Precedence compiler for infix fuzzy expressions.

Operators, tightest first: "!" (or "~"), "&", "|". Parentheses group.
Binary operators are left-associative. Malformed text is rejected at
compile time with ExpressionSyntaxError.
"""

from .api import compile_expression, fuzzy_math
from .compiled import CompiledExpression
from .lexer import tokenize
from .parser import ExpressionParser, parse_expression
from .syntax import Conjunction, Disjunction, Literal, Name, Negation, Syntax
from .tokens import Token, TokenKind

__all__ = [
    "compile_expression",
    "fuzzy_math",
    "CompiledExpression",
    "tokenize",
    "ExpressionParser",
    "parse_expression",
    "Name",
    "Literal",
    "Negation",
    "Conjunction",
    "Disjunction",
    "Syntax",
    "Token",
    "TokenKind",
]
