"""
Logging system for fuzzy_systems.
Provides human-readable console logs and an optional dated log file.

Library modules log through child loggers of "fuzzy_systems"
(e.g. "fuzzy_systems.compiler"); this module only attaches handlers.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional


# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Formatter with colored level names for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        # Format a copy so other handlers see the plain record
        record = logging.makeLogRecord(record.__dict__)
        record.levelname = f"{color}{record.levelname}{Colors.RESET}"
        return super().format(record)


class FuzzyLogger:
    """
    Handler setup for the "fuzzy_systems" logger hierarchy.

    Features:
    - Console output with colors (stderr)
    - Optional plain-text file output, one file per day
    """

    ROOT_NAME = "fuzzy_systems"

    _instance: Optional['FuzzyLogger'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_dir: str = "logs", log_level: str = "INFO", log_to_file: bool = False):
        if FuzzyLogger._initialized:
            return

        self.log_dir = Path(log_dir or "logs")
        self.log_file: Optional[Path] = None
        self.logger = self._create_logger(self.ROOT_NAME, log_level, log_to_file)

        FuzzyLogger._initialized = True

    def _create_logger(self, name: str, level: str, log_to_file: bool) -> logging.Logger:
        """Create a configured logger instance."""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        logger.propagate = False

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)

        if log_to_file:
            self.log_dir.mkdir(parents=True, exist_ok=True)
            self.log_file = self.log_dir / f"fuzzy_{datetime.now().strftime('%Y%m%d')}.log"
            file_handler = logging.FileHandler(self.log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logger.addHandler(file_handler)

        return logger


# Global logger instance
_logger: Optional[FuzzyLogger] = None


def get_logger(log_dir: str = "logs", log_level: str = "INFO", log_to_file: bool = False) -> FuzzyLogger:
    """Get or create the global logger instance."""
    global _logger
    if _logger is None:
        _logger = FuzzyLogger(log_dir, log_level, log_to_file)
    return _logger


def setup_logger(log_dir: str = "logs", log_level: str = "INFO", log_to_file: bool = False) -> FuzzyLogger:
    """Initialize the logger with custom settings, replacing any previous setup."""
    global _logger
    FuzzyLogger._initialized = False
    FuzzyLogger._instance = None
    _logger = FuzzyLogger(log_dir, log_level, log_to_file)
    return _logger
