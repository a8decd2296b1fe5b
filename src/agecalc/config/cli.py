"""Settings for the command-line entry point."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime  # noqa: TC003
from typing import Final

from agecalc.adapters.schema import parse_date_input
from agecalc.domain.errors import InvalidDateError

from .env import optional_env_var
from .errors import ConfigurationError

LOG_LEVEL_VAR: Final[str] = "AGECALC_LOG_LEVEL"
REFERENCE_DATE_VAR: Final[str] = "AGECALC_REFERENCE_DATE"
DEFAULT_LOG_LEVEL: Final[int] = logging.INFO


@dataclass(frozen=True, slots=True)
class CliConfig:
    log_level: int = DEFAULT_LOG_LEVEL
    reference_date: datetime | None = None


def _parse_log_level(value: str) -> int:
    level = logging.getLevelNamesMapping().get(value.upper())
    if level is None:
        raise ConfigurationError(f"Unknown log level in {LOG_LEVEL_VAR}: {value}")
    return level


def get_cli_config() -> CliConfig:
    level_value = optional_env_var(LOG_LEVEL_VAR)
    reference_value = optional_env_var(REFERENCE_DATE_VAR)

    reference_date: datetime | None = None
    if reference_value is not None:
        try:
            reference_date = parse_date_input(reference_value)
        except InvalidDateError as exc:
            raise ConfigurationError(
                f"Invalid date in {REFERENCE_DATE_VAR}: {reference_value}"
            ) from exc

    return CliConfig(
        log_level=_parse_log_level(level_value) if level_value else DEFAULT_LOG_LEVEL,
        reference_date=reference_date,
    )
