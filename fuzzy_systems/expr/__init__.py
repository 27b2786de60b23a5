"""
Fuzzy expressions evaluated on demand.

Trees are built from leaves (Atom, Labeled) with combinators or the
Python operators, then evaluated or rendered as often as needed:

    a = Hamacher1.atom(0.1)
    b = Hamacher1.atom(0.6)
    c = Hamacher1.atom(0.4)
    d = (a | b) & ~c

    str(d)                 # "((0.1 | 0.6) & !0.4)"
    d.evaluate().as_raw()  # 0.384

| operation   | method        | operator |
|-------------|---------------|----------|
| negation    | a.negate()    | ~a       |
| disjunction | a.disjoin(b)  | a | b    |
| conjunction | a.conjoin(b)  | a & b    |

Labels replace numbers in the rendered text only:

    a = Hamacher1.atom(0.1).with_label("a")
    str(a | b.with_label(TagB))   # "(a | b)"
"""

from .nodes import (
    ExprNode,
    Atom,
    Labeled,
    Not,
    And,
    Or,
    Side,
    Alternative,
    Expr,
    LEAF_TYPES,
)
from .combinators import (
    atom,
    from_membership,
    negate,
    conjoin,
    disjoin,
    as_alternative,
    as_left,
    as_right,
    attach_label,
)
from .evaluation import ExprEvaluator, evaluate_expression
from .render import ExprRenderer, render_expression
from .footprint import footprint, label_payload
from .tags import Tag, new_tag

__all__ = [
    # Nodes
    "ExprNode",
    "Atom",
    "Labeled",
    "Not",
    "And",
    "Or",
    "Side",
    "Alternative",
    "Expr",
    "LEAF_TYPES",
    # Combinators
    "atom",
    "from_membership",
    "negate",
    "conjoin",
    "disjoin",
    "as_alternative",
    "as_left",
    "as_right",
    "attach_label",
    # Evaluation / rendering
    "ExprEvaluator",
    "evaluate_expression",
    "ExprRenderer",
    "render_expression",
    # Labels
    "footprint",
    "label_payload",
    "Tag",
    "new_tag",
]
