"""Application configuration helpers."""

from __future__ import annotations

from .cli import CliConfig, get_cli_config
from .env import optional_env_var
from .errors import ConfigurationError
from .logging import configure_logging

__all__ = [
    "CliConfig",
    "ConfigurationError",
    "configure_logging",
    "get_cli_config",
    "optional_env_var",
]
