"""
CompiledExpression: a parsed expression waiting for its operands.

Compilation fixes the tree shape; build() binds names to values and
emits the same combinator calls a hand-written tree would use, so

    compile_expression("a | b & !c").build(a=x, b=y, c=z)

is structurally equal to disjoin(x, conjoin(y, negate(z))).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Tuple

from ..errors import UnboundNameError
from ..expr.combinators import atom, conjoin, disjoin, negate
from ..expr.nodes import ExprNode
from ..value.traits import FuzzyValue
from .syntax import (
    Conjunction,
    Disjunction,
    Literal,
    Name,
    Negation,
    Syntax,
    iter_leaves,
)

if TYPE_CHECKING:
    from ..opset.base import Opset


def _as_node(name: str, value: Any) -> ExprNode:
    if isinstance(value, ExprNode):
        return value
    if isinstance(value, FuzzyValue):
        return value.to_expr()
    raise TypeError(
        f"Operand '{name}': expected an expression node or fuzzy value, "
        f"got {type(value).__name__}"
    )


@dataclass(frozen=True)
class CompiledExpression:
    """
    Parsed, validated infix expression.

    Attributes:
        source: Expression text as written
        tree: Syntax tree
        names: Operand names in order of first appearance
        has_literals: Whether any inline membership degree appears
    """

    source: str
    tree: Syntax
    names: Tuple[str, ...] = field(init=False)
    has_literals: bool = field(init=False)

    def __post_init__(self):
        seen: Dict[str, None] = {}
        has_literals = False
        for leaf in iter_leaves(self.tree):
            if isinstance(leaf, Name):
                seen.setdefault(leaf.name, None)
            elif isinstance(leaf, Literal):
                has_literals = True
        object.__setattr__(self, "names", tuple(seen))
        object.__setattr__(self, "has_literals", has_literals)

    @property
    def canonical(self) -> str:
        """Fully parenthesized form over the operand names."""
        return self.tree.canonical()

    def build(
        self,
        namespace: Optional[Mapping[str, Any]] = None,
        *,
        opset: Optional[type["Opset"]] = None,
        **atoms: Any,
    ) -> ExprNode:
        """
        Bind operands and build the expression tree.

        Args:
            namespace: Mapping of names to operands
            opset: Operation set for inline literals; defaults to the
                operation set of the bound operands
            **atoms: Operands by keyword; override namespace entries

        Raises:
            UnboundNameError: If a name has no operand, or the expression
                holds only literals and no opset was given
            OpsetMismatchError: If operands mix operation sets
        """
        scope: Dict[str, Any] = dict(namespace or {})
        scope.update(atoms)

        bound: Dict[str, ExprNode] = {}
        for name in self.names:
            if name not in scope:
                raise UnboundNameError(
                    name,
                    f"not bound when building '{self.source}'",
                    available=self.names,
                )
            bound[name] = _as_node(name, scope[name])

        if opset is None and bound:
            opset = next(iter(bound.values())).opset
        if opset is None and self.has_literals:
            first = next(leaf for leaf in iter_leaves(self.tree) if isinstance(leaf, Literal))
            raise UnboundNameError(
                first.canonical(),
                "literal has no operation set; pass opset= or bind at least one operand",
            )

        return self._build(self.tree, bound, opset)

    def _build(
        self,
        tree: Syntax,
        bound: Mapping[str, ExprNode],
        opset: Optional[type["Opset"]],
    ) -> ExprNode:
        if isinstance(tree, Name):
            return bound[tree.name]
        elif isinstance(tree, Literal):
            return atom(tree.value, opset)
        elif isinstance(tree, Negation):
            return negate(self._build(tree.operand, bound, opset))
        elif isinstance(tree, Conjunction):
            return conjoin(
                self._build(tree.left, bound, opset),
                self._build(tree.right, bound, opset),
            )
        elif isinstance(tree, Disjunction):
            return disjoin(
                self._build(tree.left, bound, opset),
                self._build(tree.right, bound, opset),
            )
        else:
            raise TypeError(f"Unknown syntax node: {type(tree).__name__}")

    def __str__(self) -> str:
        return self.canonical


__all__ = ["CompiledExpression"]
