"""Configuration loaded from the environment and .env files."""

from .config import Config, EvalConfig, LogConfig, get_config

__all__ = [
    "Config",
    "EvalConfig",
    "LogConfig",
    "get_config",
]
