"""
Argument parsing for the fuzzy-systems command line.
"""

import argparse
from typing import List, Optional

from ..opset.registry import list_opsets
from .utils import parse_assignment


def setup_argparse(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments for fuzzy_cli.

    Supports:
      eval EXPR --set a=0.1 ...     Evaluate under one operation set
      compare EXPR --set a=0.1 ...  Evaluate under every operation set
      check EXPR                    Compile only; show canonical form
      opsets                        List registered operation sets
    """
    parser = build_parser()
    return parser.parse_args(argv)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fuzzy-systems",
        description="Evaluate and inspect fuzzy-logic expressions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fuzzy-systems eval "(a | b) & !c" --set a=0.1 --set b=0.6 --set c=0.4
  fuzzy-systems eval "a & 0.5" --set a=0.8 --opset yagerinf --json
  fuzzy-systems compare "a | b & !c" --set a=0.1 --set b=0.6 --set c=0.4
  fuzzy-systems check "a | b & !c"
  fuzzy-systems opsets
        """
    )

    # Verbosity: mutually exclusive group (-q / -v / --debug)
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        default=False,
        help="Quiet mode: WARNING only"
    )
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        default=False,
        help="Verbose mode: INFO"
    )
    verbosity.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Debug mode: DEBUG, including compiler traces"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    _setup_eval_subcommand(subparsers)
    _setup_compare_subcommand(subparsers)
    _setup_check_subcommand(subparsers)
    _setup_opsets_subcommand(subparsers)

    return parser


def _add_operand_arguments(subparser) -> None:
    subparser.add_argument("expression", help="Infix expression, e.g. \"(a | b) & !c\"")
    subparser.add_argument(
        "--set", "-s",
        dest="assignments",
        metavar="NAME=VALUE",
        action="append",
        type=parse_assignment,
        default=[],
        help="Bind an operand to a membership degree in [0, 1] (repeatable)"
    )
    subparser.add_argument(
        "--no-labels",
        action="store_false",
        dest="labels",
        default=None,
        help="Render operands by value instead of by name"
    )
    subparser.add_argument("--json", action="store_true", dest="json_output", help="Output results as JSON")


def _setup_eval_subcommand(subparsers) -> None:
    eval_parser = subparsers.add_parser("eval", help="Evaluate an expression")
    _add_operand_arguments(eval_parser)
    eval_parser.add_argument(
        "--opset",
        choices=list_opsets(),
        default=None,
        help="Operation set (default: FUZZY_DEFAULT_OPSET or hamacher1)"
    )


def _setup_compare_subcommand(subparsers) -> None:
    compare_parser = subparsers.add_parser(
        "compare", help="Evaluate an expression under every operation set"
    )
    _add_operand_arguments(compare_parser)


def _setup_check_subcommand(subparsers) -> None:
    check_parser = subparsers.add_parser("check", help="Compile an expression without evaluating it")
    check_parser.add_argument("expression", help="Infix expression")
    check_parser.add_argument("--json", action="store_true", dest="json_output", help="Output results as JSON")


def _setup_opsets_subcommand(subparsers) -> None:
    opsets_parser = subparsers.add_parser("opsets", help="List registered operation sets")
    opsets_parser.add_argument("--json", action="store_true", dest="json_output", help="Output results as JSON")
