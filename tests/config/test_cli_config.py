from __future__ import annotations

import logging
from datetime import datetime

import pytest

from agecalc.config import ConfigurationError, get_cli_config, optional_env_var
from agecalc.config.cli import LOG_LEVEL_VAR, REFERENCE_DATE_VAR


def test_cli_config_defaults(clean_env: pytest.MonkeyPatch) -> None:
    config = get_cli_config()

    assert config.log_level == logging.INFO
    assert config.reference_date is None


def test_cli_config_reads_environment(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv(LOG_LEVEL_VAR, "debug")
    clean_env.setenv(REFERENCE_DATE_VAR, "2024-07-04")

    config = get_cli_config()

    assert config.log_level == logging.DEBUG
    assert config.reference_date == datetime(2024, 7, 4)


def test_cli_config_treats_blank_values_as_unset(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv(LOG_LEVEL_VAR, "   ")
    clean_env.setenv(REFERENCE_DATE_VAR, "")

    config = get_cli_config()

    assert config.log_level == logging.INFO
    assert config.reference_date is None


def test_cli_config_rejects_unknown_log_level(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv(LOG_LEVEL_VAR, "chatty")

    with pytest.raises(ConfigurationError, match=LOG_LEVEL_VAR):
        get_cli_config()


def test_cli_config_rejects_invalid_reference_date(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv(REFERENCE_DATE_VAR, "yesterday")

    with pytest.raises(ConfigurationError, match=REFERENCE_DATE_VAR):
        get_cli_config()


def test_optional_env_var_strips_values(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AGECALC_EXAMPLE", "  value ")
    monkeypatch.delenv("AGECALC_MISSING", raising=False)

    assert optional_env_var("AGECALC_EXAMPLE") == "value"
    assert optional_env_var("AGECALC_MISSING") is None
