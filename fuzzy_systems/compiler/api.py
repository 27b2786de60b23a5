"""
Entry points of the precedence compiler.

    expr = compile_expression("a | b & !c")
    expr.canonical                         # "(a | (b & !c))"
    tree = expr.build(a=x, b=y, c=z)

    # Compile and build in one step, resolving names from the caller:
    a, b, c = Hamacher1.atom(0.1), Hamacher1.atom(0.6), Hamacher1.atom(0.4)
    d = fuzzy_math("(a | b) & !c")
"""

from __future__ import annotations

import inspect
import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

from ..expr.nodes import ExprNode
from .compiled import CompiledExpression
from .parser import parse_expression

if TYPE_CHECKING:
    from ..opset.base import Opset

logger = logging.getLogger("fuzzy_systems.compiler")


@lru_cache(maxsize=256)
def compile_expression(source: str) -> CompiledExpression:
    """
    Parse and validate an infix expression.

    Results are cached per source string; CompiledExpression is immutable.

    Raises:
        ExpressionSyntaxError: If the expression is malformed
    """
    if not isinstance(source, str):
        raise TypeError(f"compile_expression: source must be str, got {type(source).__name__}")
    compiled = CompiledExpression(source, parse_expression(source))
    logger.debug("Compiled %r -> %s (names: %s)", source, compiled.canonical, compiled.names)
    return compiled


def fuzzy_math(
    source: str,
    namespace: Optional[Mapping[str, Any]] = None,
    *,
    opset: Optional[type["Opset"]] = None,
    **atoms: Any,
) -> ExprNode:
    """
    Compile source and build it in one call.

    With neither namespace nor keyword operands, names are looked up in the
    calling frame (locals first, then globals).
    """
    compiled = compile_expression(source)
    if namespace is None and not atoms:
        frame = inspect.currentframe()
        try:
            caller = frame.f_back if frame is not None else None
            scope: Dict[str, Any] = {}
            if caller is not None:
                scope.update(caller.f_globals)
                scope.update(caller.f_locals)
            namespace = scope
        finally:
            del frame
    return compiled.build(namespace, opset=opset, **atoms)


__all__ = [
    "compile_expression",
    "fuzzy_math",
]
