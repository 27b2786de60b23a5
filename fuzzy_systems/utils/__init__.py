"""Shared utilities."""

from .logger import ColoredFormatter, FuzzyLogger, get_logger, setup_logger

__all__ = [
    "ColoredFormatter",
    "FuzzyLogger",
    "get_logger",
    "setup_logger",
]
