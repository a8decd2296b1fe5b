from __future__ import annotations

import json

import pytest

from agecalc.config.cli import LOG_LEVEL_VAR, REFERENCE_DATE_VAR
from agecalc.ui import cli as cli_module


def _run(argv: list[str], capsys: pytest.CaptureFixture[str]) -> str:
    cli_module.main(argv)
    return capsys.readouterr().out.strip()


@pytest.mark.parametrize(
    ("argv", "expected"),
    [
        (["age", "1990-01-01", "--at", "2024-07-04"], "34 years, 6 months, 3 days"),
        (["age-in", "1990-01-01", "months", "--at", "2024-07-04"], "414"),
        (["age-in", "1990-01-01", "weeks", "--at", "1990-01-15"], "2"),
        (["adult", "2000-01-01", "--at", "2024-01-01"], "true"),
        (["adult", "2010-01-01", "--at", "2024-01-01"], "false"),
        (["next-birthday", "1990-12-25", "--at", "2024-01-01"], "2024-12-25 (359 days)"),
        (["zodiac", "1990-04-01"], "Aries"),
        (["zodiac", "1990-08-01"], "Leo"),
    ],
)
def test_cli_commands(
    argv: list[str],
    expected: str,
    clean_env: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert _run(argv, capsys) == expected


def test_cli_report_prints_json(
    clean_env: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    output = _run(["report", "1990-01-01", "--at", "2024-07-04"], capsys)

    data = json.loads(output)
    assert data["age"] == {"years": 34, "months": 6, "days": 3}
    assert data["zodiac_sign"] == "Capricorn"


def test_cli_uses_reference_date_from_environment(
    clean_env: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    clean_env.setenv(REFERENCE_DATE_VAR, "2024-07-04")

    assert _run(["age", "1990-01-01"], capsys) == "34 years, 6 months, 3 days"


def test_cli_reference_flag_overrides_environment(
    clean_env: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    clean_env.setenv(REFERENCE_DATE_VAR, "2000-01-01")

    assert _run(["age-in", "1990-01-01", "years", "--at", "2024-07-04"], capsys) == "34"


@pytest.mark.parametrize(
    "argv",
    [
        ["age", "not-a-date"],
        ["age", "1990-01-01", "--at", "garbage"],
        ["age-in", "1990-01-01", "bogus", "--at", "2024-01-01"],
        ["age", "2025-01-01", "--at", "2024-01-01"],
        ["adult", "2025-01-01", "--at", "2024-01-01"],
    ],
)
def test_cli_invalid_input_exits_with_usage_error(
    argv: list[str],
    clean_env: pytest.MonkeyPatch,
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(argv)

    assert excinfo.value.code == 2


def test_cli_configuration_error_exits_with_usage_error(clean_env: pytest.MonkeyPatch) -> None:
    clean_env.setenv(LOG_LEVEL_VAR, "chatty")

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["zodiac", "1990-04-01"])

    assert excinfo.value.code == 2


def test_cli_unexpected_error_exits_with_failure(
    clean_env: pytest.MonkeyPatch,
) -> None:
    def boom(*_: object, **__: object) -> None:
        raise RuntimeError("boom")

    clean_env.setattr(cli_module, "get_zodiac_sign", boom)

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["zodiac", "1990-04-01"])

    assert excinfo.value.code == 1
