"""Pydantic schemas for textual input and JSON output."""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict

from agecalc.domain.age import AgeUnit  # noqa: TC001
from agecalc.domain.errors import InvalidDateError
from agecalc.domain.zodiac import ZodiacSign  # noqa: TC001

if TYPE_CHECKING:
    from agecalc.domain.report import AgeReport


def parse_date_input(value: str) -> datetime:
    """Parse ISO-8601 text (``1990-01-01``, ``1990-01-01T08:30Z`` ...) into a datetime."""

    normalized = value.strip()
    if normalized.endswith("Z"):
        normalized = normalized[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(normalized)
    except ValueError as exc:
        raise InvalidDateError(f"Invalid date: {value}") from exc


class AgeBreakdownPayload(BaseModel):
    model_config = ConfigDict(frozen=True)

    years: int
    months: int
    days: int


class AgeReportPayload(BaseModel):
    """JSON shape of :class:`~agecalc.domain.report.AgeReport`."""

    model_config = ConfigDict(frozen=True)

    date_of_birth: datetime
    reference_date: datetime
    age: AgeBreakdownPayload
    age_in: dict[AgeUnit, int]
    is_adult: bool
    next_birthday: date
    days_until_next_birthday: int
    zodiac_sign: ZodiacSign

    @classmethod
    def from_report(cls, report: AgeReport) -> AgeReportPayload:
        return cls(
            date_of_birth=report.date_of_birth,
            reference_date=report.reference_date,
            age=AgeBreakdownPayload(
                years=report.age.years,
                months=report.age.months,
                days=report.age.days,
            ),
            age_in=dict(report.age_in),
            is_adult=report.is_adult,
            next_birthday=report.next_birthday,
            days_until_next_birthday=report.days_until_next_birthday,
            zodiac_sign=report.zodiac_sign,
        )
