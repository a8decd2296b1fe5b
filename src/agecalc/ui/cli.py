# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from agecalc.adapters.schema import parse_date_input
from agecalc.app import create_age_report
from agecalc.config import ConfigurationError, configure_logging, get_cli_config
from agecalc.domain import (
    AgeCalculatorError,
    AgeUnit,
    get_age,
    get_age_in,
    get_days_until_next_birthday,
    get_next_birthday,
    get_zodiac_sign,
    is_adult,
)

if TYPE_CHECKING:
    from collections.abc import Sequence
    from datetime import datetime
    from types import FrameType

log = logging.getLogger(__name__)


def _add_reference_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--at",
        type=str,
        help="ISO-8601 reference date (defaults to AGECALC_REFERENCE_DATE, then now)",
    )


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Calculate ages and birthday facts")
    subparsers = parser.add_subparsers(dest="command", required=True)

    age = subparsers.add_parser("age", help="Age in years, months and days")
    age.add_argument("date_of_birth", help="ISO-8601 date of birth")
    _add_reference_argument(age)

    age_in = subparsers.add_parser("age-in", help="Age as a whole number of one unit")
    age_in.add_argument("date_of_birth", help="ISO-8601 date of birth")
    age_in.add_argument("unit", help=f"One of: {', '.join(AgeUnit)}")
    _add_reference_argument(age_in)

    adult = subparsers.add_parser("adult", help="Whether the person is 18 or older")
    adult.add_argument("date_of_birth", help="ISO-8601 date of birth")
    _add_reference_argument(adult)

    next_birthday = subparsers.add_parser("next-birthday", help="Date of the next birthday")
    next_birthday.add_argument("date_of_birth", help="ISO-8601 date of birth")
    _add_reference_argument(next_birthday)

    zodiac = subparsers.add_parser("zodiac", help="Zodiac sign for a birth date")
    zodiac.add_argument("date_of_birth", help="ISO-8601 date of birth")

    report = subparsers.add_parser("report", help="Every fact above as JSON")
    report.add_argument("date_of_birth", help="ISO-8601 date of birth")
    _add_reference_argument(report)

    return parser.parse_args(list(argv))


def _run_command(
    args: argparse.Namespace,
    date_of_birth: datetime,
    reference_date: datetime | None,
) -> str:
    if args.command == "age":
        age = get_age(date_of_birth, reference_date)
        return f"{age.years} years, {age.months} months, {age.days} days"
    if args.command == "age-in":
        return str(get_age_in(date_of_birth, args.unit, reference_date))
    if args.command == "adult":
        return "true" if is_adult(date_of_birth, reference_date) else "false"
    if args.command == "next-birthday":
        birthday = get_next_birthday(date_of_birth, reference_date)
        days = get_days_until_next_birthday(date_of_birth, reference_date)
        return f"{birthday.isoformat()} ({days} days)"
    if args.command == "zodiac":
        return str(get_zodiac_sign(date_of_birth))
    if args.command == "report":
        return create_age_report(date_of_birth, reference_date).model_dump_json(indent=2)
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    try:
        config = get_cli_config()
    except ConfigurationError:
        configure_logging()
        log.exception("Configuration error")
        sys.exit(2)

    configure_logging(level=config.log_level)
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        date_of_birth = parse_date_input(parsed_args.date_of_birth)
        at = getattr(parsed_args, "at", None)
        reference_date = parse_date_input(at) if at else config.reference_date
        output = _run_command(parsed_args, date_of_birth, reference_date)
    except AgeCalculatorError:
        log.exception("Invalid input")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)

    print(output)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
