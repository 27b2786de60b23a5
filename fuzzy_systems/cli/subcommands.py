"""
Subcommand handlers for the fuzzy-systems CLI.

All handle_* functions accept the parsed args namespace and the loaded
Config, and return a process exit code:

    0  success
    1  expression or value error (syntax, unbound operand, out of range)
    2  usage or configuration error
"""

from __future__ import annotations

import logging
from typing import Optional

from rich.table import Table

from ..compiler import compile_expression
from ..config.config import Config
from ..errors import ExpressionSyntaxError, FuzzyError
from ..opset.base import is_differentiable
from ..opset.registry import get_opset, list_opsets, require_opset
from ..value.formatting import format_raw
from .utils import bind_operands, console, print_error, print_json, print_syntax_error

logger = logging.getLogger("fuzzy_systems.cli")

EXIT_OK = 0
EXIT_EXPRESSION_ERROR = 1
EXIT_USAGE_ERROR = 2


def _labels(args, config: Config) -> bool:
    return config.eval.label_atoms if args.labels is None else args.labels


def _fail(args, err: Exception, code: int = EXIT_EXPRESSION_ERROR) -> int:
    if args.json_output:
        payload = {"status": "fail", "error": str(err), "error_type": type(err).__name__}
        if isinstance(err, ExpressionSyntaxError):
            payload["position"] = err.position
        print_json(payload)
    elif isinstance(err, ExpressionSyntaxError):
        print_syntax_error(err)
    else:
        print_error(str(err))
    return code


# =============================================================================
# EVAL
# =============================================================================

def handle_eval(args, config: Config) -> int:
    """Handle `eval` subcommand."""
    name = args.opset or config.eval.default_opset
    opset = get_opset(name)
    if opset is None:
        return _fail(
            args,
            ValueError(f"Unknown operation set '{name}'. Available: {', '.join(list_opsets())}"),
            EXIT_USAGE_ERROR,
        )

    try:
        compiled = compile_expression(args.expression)
        operands = bind_operands(args.assignments, opset, _labels(args, config))
        tree = compiled.build(operands, opset=opset)
    except FuzzyError as err:
        logger.debug("eval failed: %s", err)
        return _fail(args, err)

    value = tree.evaluate()
    rendered = tree.render()
    logger.info("%s = %s under %s", rendered, value, opset.name)

    if args.json_output:
        print_json({
            "status": "pass",
            "expression": args.expression,
            "canonical": compiled.canonical,
            "rendered": rendered,
            "opset": opset.name,
            "value": value.as_raw(),
        })
        return EXIT_OK

    table = Table(title="Evaluation", show_header=False, box=None)
    table.add_column("Key", style="dim", width=12)
    table.add_column("Value", style="bold")
    table.add_row("Expression", args.expression)
    table.add_row("Canonical", compiled.canonical)
    table.add_row("Rendered", rendered)
    table.add_row("Opset", opset.name)
    table.add_row("Value", f"[green]{value}[/]")
    console.print(table)
    return EXIT_OK


# =============================================================================
# COMPARE
# =============================================================================

def handle_compare(args, config: Config) -> int:
    """Handle `compare` subcommand: one row per registered operation set."""
    try:
        compiled = compile_expression(args.expression)
    except ExpressionSyntaxError as err:
        return _fail(args, err)

    labels = _labels(args, config)
    results = []
    for name in list_opsets():
        opset = require_opset(name)
        try:
            operands = bind_operands(args.assignments, opset, labels)
            tree = compiled.build(operands, opset=opset)
        except FuzzyError as err:
            return _fail(args, err)
        results.append({
            "opset": name,
            "differentiable": is_differentiable(opset),
            "rendered": tree.render(),
            "value": tree.evaluate().as_raw(),
        })

    if args.json_output:
        print_json({
            "status": "pass",
            "expression": args.expression,
            "canonical": compiled.canonical,
            "results": results,
        })
        return EXIT_OK

    table = Table(title=f"{compiled.canonical}")
    table.add_column("Opset", style="cyan")
    table.add_column("Differentiable", justify="center")
    table.add_column("Value", justify="right", style="bold")
    for row in results:
        table.add_row(
            row["opset"],
            "yes" if row["differentiable"] else "[dim]no[/]",
            format_raw(row["value"]),
        )
    console.print(table)
    return EXIT_OK


# =============================================================================
# CHECK
# =============================================================================

def handle_check(args, config: Optional[Config] = None) -> int:
    """Handle `check` subcommand: compile only."""
    try:
        compiled = compile_expression(args.expression)
    except ExpressionSyntaxError as err:
        return _fail(args, err)

    if args.json_output:
        print_json({
            "status": "pass",
            "expression": args.expression,
            "canonical": compiled.canonical,
            "names": list(compiled.names),
        })
        return EXIT_OK

    console.print(f"[bold green]OK[/] {compiled.canonical}", highlight=False)
    if compiled.names:
        console.print(f"[dim]Operands: {', '.join(compiled.names)}[/]")
    return EXIT_OK


# =============================================================================
# OPSETS
# =============================================================================

def handle_opsets(args, config: Optional[Config] = None) -> int:
    """Handle `opsets` subcommand."""
    rows = []
    for name in list_opsets():
        opset = require_opset(name)
        rows.append({
            "name": name,
            "class": opset.__name__,
            "differentiable": is_differentiable(opset),
            "description": opset.describe(),
            "notation": list(opset.notation),
        })

    if args.json_output:
        print_json({"status": "pass", "opsets": rows})
        return EXIT_OK

    table = Table(title="Operation Sets")
    table.add_column("Name", style="cyan")
    table.add_column("Differentiable", justify="center")
    table.add_column("Description")
    table.add_column("Notation", style="dim")
    for row in rows:
        table.add_row(
            row["name"],
            "yes" if row["differentiable"] else "[dim]no[/]",
            row["description"],
            "\n".join(row["notation"]),
        )
    console.print(table)
    return EXIT_OK
