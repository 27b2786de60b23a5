"""
CLI utility functions.

Contains:
- The shared rich Console
- Operand parsing (parse_assignment) and binding (bind_operands)
- Error display (print_error, print_syntax_error)
"""

import argparse
import json
from typing import Any, Dict, List, Tuple

from rich.console import Console
from rich.markup import escape

from ..errors import ExpressionSyntaxError
from ..expr.nodes import ExprNode


# Global Console
console = Console()


def parse_assignment(text: str) -> Tuple[str, float]:
    """
    Parse a NAME=VALUE operand binding.

    Range checking is left to Membership so the error names the operation
    set; only the shape is checked here.
    """
    name, sep, raw = text.partition("=")
    name = name.strip()
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got '{text}'")
    if not (name.isascii() and name.isidentifier()):
        raise argparse.ArgumentTypeError(f"'{name}' is not a valid operand name")
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"value for '{name}' must be a number, got '{raw.strip()}'")
    return name, value


def bind_operands(assignments: List[Tuple[str, float]], opset, labels: bool) -> Dict[str, ExprNode]:
    """
    Turn parsed bindings into expression leaves under one operation set.

    Later bindings of the same name win. Raises OutOfRangeError for values
    outside [0, 1].
    """
    operands: Dict[str, ExprNode] = {}
    for name, value in assignments:
        leaf = opset.atom(value)
        operands[name] = leaf.with_label(name) if labels else leaf
    return operands


def print_error(message: str) -> None:
    console.print(f"\n[bold red]FAIL[/] {escape(message)}")


def print_syntax_error(err: ExpressionSyntaxError) -> None:
    console.print(f"\n[bold red]Syntax error:[/] {escape(err.reason)} (position {err.position})")
    console.print(escape(err.diagram()), style="yellow", highlight=False)


def print_json(payload: Dict[str, Any]) -> None:
    print(json.dumps(payload, indent=2, default=str))
