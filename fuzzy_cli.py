#!/usr/bin/env python3
"""
fuzzy-systems command line.

Usage:
    python fuzzy_cli.py eval "(a | b) & !c" --set a=0.1 --set b=0.6 --set c=0.4
    python fuzzy_cli.py compare "a | b & !c" --set a=0.1 --set b=0.6 --set c=0.4
    python fuzzy_cli.py check "a | b & !c"
    python fuzzy_cli.py opsets
"""

import sys
from typing import List, Optional

from fuzzy_systems.cli import (
    EXIT_USAGE_ERROR,
    handle_check,
    handle_compare,
    handle_eval,
    handle_opsets,
    setup_argparse,
)
from fuzzy_systems.cli.utils import console
from fuzzy_systems.config import get_config
from fuzzy_systems.utils import setup_logger


HANDLERS = {
    "eval": handle_eval,
    "compare": handle_compare,
    "check": handle_check,
    "opsets": handle_opsets,
}


def _log_level(args, config) -> str:
    if args.debug:
        return "DEBUG"
    if args.verbose:
        return "INFO"
    if args.quiet:
        return "WARNING"
    return config.log.level


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    # Parse CLI arguments FIRST (before any config or logging)
    args = setup_argparse(argv)

    config = get_config()
    is_valid, messages = config.validate()
    if not is_valid:
        for msg in messages:
            console.print(f"[bold red]{msg}[/]")
        return EXIT_USAGE_ERROR

    setup_logger(config.log.log_dir, _log_level(args, config), config.log.log_to_file)

    handler = HANDLERS.get(args.command)
    if handler is None:
        console.print("[yellow]Usage: fuzzy-systems {eval|compare|check|opsets} --help[/]")
        return EXIT_USAGE_ERROR
    return handler(args, config)


if __name__ == "__main__":
    sys.exit(main())
