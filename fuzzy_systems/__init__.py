"""
fuzzy_systems - fuzzy-logic expressions with pluggable operation sets.

    from fuzzy_systems import Hamacher1, fuzzy_math

    a = Hamacher1.atom(0.1)
    b = Hamacher1.atom(0.6)
    c = Hamacher1.atom(0.4)

    d = (a | b) & ~c               # built with operators
    e = fuzzy_math("(a | b) & !c") # compiled from infix text, same tree

    d.evaluate().as_raw()          # 0.384
    str(d)                         # "((0.1 | 0.6) & !0.4)"

Subpackages:
- value:    Membership and the FuzzyValue mixin
- opset:    Opset strategies, the standard catalogue, name registry
- expr:     expression nodes, combinators, evaluator, renderer, tags
- compiler: infix text to expression trees, with operator precedence
- config / utils / cli: command-line front end
"""

from .errors import (
    FuzzyError,
    OutOfRangeError,
    NotANumberError,
    OpsetMismatchError,
    ExpressionSyntaxError,
    UnboundNameError,
)
from .value import Membership, FuzzyValue, MIN_VALUE, MAX_VALUE, format_raw
from .opset import (
    Opset,
    OpsetMarker,
    Yager1,
    YagerInf,
    Hamacher0,
    Hamacher1,
    Hamacher2,
    is_differentiable,
    get_opset,
    require_opset,
    list_opsets,
)
from .expr import (
    ExprNode,
    Atom,
    Labeled,
    Not,
    And,
    Or,
    Side,
    Alternative,
    Expr,
    atom,
    negate,
    conjoin,
    disjoin,
    as_left,
    as_right,
    attach_label,
    evaluate_expression,
    render_expression,
    footprint,
    Tag,
    new_tag,
)
from .compiler import CompiledExpression, compile_expression, fuzzy_math

__version__ = "0.1.0"

__all__ = [
    # Errors
    "FuzzyError",
    "OutOfRangeError",
    "NotANumberError",
    "OpsetMismatchError",
    "ExpressionSyntaxError",
    "UnboundNameError",
    # Values
    "Membership",
    "FuzzyValue",
    "MIN_VALUE",
    "MAX_VALUE",
    "format_raw",
    # Operation sets
    "Opset",
    "OpsetMarker",
    "Yager1",
    "YagerInf",
    "Hamacher0",
    "Hamacher1",
    "Hamacher2",
    "is_differentiable",
    "get_opset",
    "require_opset",
    "list_opsets",
    # Expressions
    "ExprNode",
    "Atom",
    "Labeled",
    "Not",
    "And",
    "Or",
    "Side",
    "Alternative",
    "Expr",
    "atom",
    "negate",
    "conjoin",
    "disjoin",
    "as_left",
    "as_right",
    "attach_label",
    "evaluate_expression",
    "render_expression",
    "footprint",
    "Tag",
    "new_tag",
    # Compiler
    "CompiledExpression",
    "compile_expression",
    "fuzzy_math",
]
