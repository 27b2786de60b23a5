"""Command-line front end."""

from .argparser import build_parser, setup_argparse
from .subcommands import (
    EXIT_EXPRESSION_ERROR,
    EXIT_OK,
    EXIT_USAGE_ERROR,
    handle_check,
    handle_compare,
    handle_eval,
    handle_opsets,
)

__all__ = [
    "build_parser",
    "setup_argparse",
    "handle_eval",
    "handle_compare",
    "handle_check",
    "handle_opsets",
    "EXIT_OK",
    "EXIT_EXPRESSION_ERROR",
    "EXIT_USAGE_ERROR",
]
