"""
Configuration management for the fuzzy expression tools.
Loads settings from environment variables with sensible defaults.

Only the command-line front end reads configuration; the expression core
takes every choice (operation set, labels) as an explicit argument.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from ..opset.registry import get_opset, list_opsets


VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class LogConfig:
    """Logging configuration."""
    level: str = "INFO"
    log_dir: str = "logs"
    log_to_file: bool = False

    def __post_init__(self):
        self.level = self.level.upper()


@dataclass
class EvalConfig:
    """
    Defaults for evaluating expressions from the command line.

    Attributes:
        default_opset: Registry name of the operation set used when none is
            given explicitly
        label_atoms: Render operands by name rather than by value
    """
    default_opset: str = "hamacher1"
    label_atoms: bool = True

    def __post_init__(self):
        self.default_opset = self.default_opset.strip().lower()


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables and provides
    typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        # Later files override earlier ones
        for env_name in dict.fromkeys([".env", env_file]):
            env_path = Path(env_name)
            if env_path.exists():
                load_dotenv(env_path, override=True)

        self.env_file = env_file
        self.log = self._load_log_config()
        self.eval = self._load_eval_config()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration."""
        return LogConfig(
            level=os.getenv("FUZZY_LOG_LEVEL", "INFO"),
            log_dir=os.getenv("FUZZY_LOG_DIR", "logs"),
            log_to_file=_env_bool("FUZZY_LOG_TO_FILE", "false"),
        )

    def _load_eval_config(self) -> EvalConfig:
        """Load evaluation defaults."""
        return EvalConfig(
            default_opset=os.getenv("FUZZY_DEFAULT_OPSET", "hamacher1"),
            label_atoms=_env_bool("FUZZY_LABEL_ATOMS", "true"),
        )

    def reload(self, env_file: Optional[str] = None) -> 'Config':
        """Reload configuration from environment."""
        self._initialized = False
        Config._instance = None
        return Config(env_file or self.env_file)

    def validate(self) -> tuple[bool, List[str]]:
        """
        Validate configuration.

        Returns:
            Tuple of (is_valid, list of error/warning messages)
        """
        errors = []
        warnings = []

        if self.log.level not in VALID_LOG_LEVELS:
            errors.append(
                f"INVALID: FUZZY_LOG_LEVEL={self.log.level}. "
                f"Allowed: {', '.join(VALID_LOG_LEVELS)}"
            )

        if get_opset(self.eval.default_opset) is None:
            errors.append(
                f"INVALID: FUZZY_DEFAULT_OPSET={self.eval.default_opset} is not a registered "
                f"operation set. Available: {', '.join(list_opsets())}"
            )

        if self.log.log_to_file and not self.log.log_dir:
            warnings.append("FUZZY_LOG_TO_FILE=true but FUZZY_LOG_DIR is empty; using 'logs'")

        return len(errors) == 0, errors + warnings

    @property
    def log_level(self) -> int:
        """Numeric logging level, INFO when the configured name is unknown."""
        return getattr(logging, self.log.level, logging.INFO)

    def summary(self) -> str:
        """Generate a human-readable configuration summary."""
        lines = [
            "Fuzzy Systems Configuration",
            f"  Log level:      {self.log.level}",
            f"  Log to file:    {self.log.log_to_file} ({self.log.log_dir or 'logs'})",
            f"  Default opset:  {self.eval.default_opset}",
            f"  Label atoms:    {self.eval.label_atoms}",
        ]
        return "\n".join(lines)


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)
