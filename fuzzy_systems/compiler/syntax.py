"""
Syntax tree produced by the parser.

The tree refers to operands by name only; binding names to values
happens later, in CompiledExpression.build(). Every node knows how to
print itself in the canonical fully-parenthesized form, which is the same
text the expression renderer produces once the names are bound to labeled
leaves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Union

from ..value.formatting import format_raw


@dataclass(frozen=True)
class Name:
    """Reference to an operand bound at build time."""
    name: str
    position: int

    def canonical(self) -> str:
        return self.name


@dataclass(frozen=True)
class Literal:
    """Inline membership degree, 0 <= value <= 1."""
    value: float
    position: int

    def canonical(self) -> str:
        return format_raw(self.value)


@dataclass(frozen=True)
class Negation:
    operand: "Syntax"

    def canonical(self) -> str:
        return f"!{self.operand.canonical()}"


@dataclass(frozen=True)
class Conjunction:
    left: "Syntax"
    right: "Syntax"

    def canonical(self) -> str:
        return f"({self.left.canonical()} & {self.right.canonical()})"


@dataclass(frozen=True)
class Disjunction:
    left: "Syntax"
    right: "Syntax"

    def canonical(self) -> str:
        return f"({self.left.canonical()} | {self.right.canonical()})"


Syntax = Union[Name, Literal, Negation, Conjunction, Disjunction]


def iter_leaves(tree: Syntax) -> Iterator[Union[Name, Literal]]:
    """Yield leaves left to right."""
    if isinstance(tree, (Name, Literal)):
        yield tree
    elif isinstance(tree, Negation):
        yield from iter_leaves(tree.operand)
    else:
        yield from iter_leaves(tree.left)
        yield from iter_leaves(tree.right)


__all__ = [
    "Name",
    "Literal",
    "Negation",
    "Conjunction",
    "Disjunction",
    "Syntax",
    "iter_leaves",
]
