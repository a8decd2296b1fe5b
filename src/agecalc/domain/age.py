"""Calendar age breakdowns and scalar ages in a chosen unit."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import timedelta
from enum import StrEnum
from typing import TYPE_CHECKING, Final

from ._dates import ONE_DAY, local_now, resolve_dates
from .errors import FutureDateError, InvalidUnitError

if TYPE_CHECKING:
    from datetime import datetime

    from ._dates import Clock, DateLike

ADULT_AGE_YEARS: Final[int] = 18

_MILLISECOND = timedelta(milliseconds=1)
_MILLISECONDS_PER_DAY: Final[int] = 86_400_000
# 365.25 days scaled by 4 so the average year stays integral.
_MILLISECONDS_PER_FOUR_YEARS: Final[int] = _MILLISECONDS_PER_DAY * 1461


class AgeUnit(StrEnum):
    """Units accepted by :func:`get_age_in`."""

    YEARS = "years"
    MONTHS = "months"
    WEEKS = "weeks"
    DAYS = "days"
    HOURS = "hours"
    MINUTES = "minutes"
    SECONDS = "seconds"


_ELAPSED_UNITS: Final[dict[AgeUnit, timedelta]] = {
    AgeUnit.WEEKS: timedelta(weeks=1),
    AgeUnit.DAYS: ONE_DAY,
    AgeUnit.HOURS: timedelta(hours=1),
    AgeUnit.MINUTES: timedelta(minutes=1),
    AgeUnit.SECONDS: timedelta(seconds=1),
}


@dataclass(frozen=True, slots=True)
class AgeResult:
    """Calendar-accurate decomposition of the time between two dates."""

    years: int
    months: int
    days: int

    @property
    def total_months(self) -> int:
        return self.years * 12 + self.months


def _days_in_month_before(year: int, month: int) -> tuple[int, int, int]:
    """Return ``(year, month, length)`` of the month preceding ``year-month``."""

    if month == 1:
        year, month = year - 1, 12
    else:
        month -= 1
    return year, month, calendar.monthrange(year, month)[1]


def _checked_dates(
    date_of_birth: object,
    current_date: object | None,
    clock: Clock,
) -> tuple[datetime, datetime]:
    dob, current = resolve_dates(date_of_birth, current_date, clock)
    if dob > current:
        raise FutureDateError
    return dob, current


def get_age(
    date_of_birth: DateLike,
    current_date: DateLike | None = None,
    *,
    clock: Clock = local_now,
) -> AgeResult:
    """Break the age at ``current_date`` down into years, months and days.

    Raw field differences are normalised by borrowing whole months from the
    calendar, starting with the month preceding ``current_date``'s month. A
    single borrow is not always enough (Jan 31 to Mar 1 goes through February),
    so borrowing continues into earlier months until the day count is
    non-negative.
    """

    dob, current = _checked_dates(date_of_birth, current_date, clock)

    years = current.year - dob.year
    months = current.month - dob.month
    days = current.day - dob.day

    year, month = current.year, current.month
    while days < 0:
        year, month, length = _days_in_month_before(year, month)
        months -= 1
        days += length

    carry, months = divmod(months, 12)
    return AgeResult(years=years + carry, months=months, days=days)


def get_age_in(
    date_of_birth: DateLike,
    unit: AgeUnit | str,
    current_date: DateLike | None = None,
    *,
    clock: Clock = local_now,
) -> int:
    """Return the age expressed as a whole number of ``unit``.

    ``years`` divides the elapsed time by an average Julian year of 365.25 days and
    so can differ from :func:`get_age` around birthdays. ``months`` subtracts the
    calendar fields and ignores the day of month. Every other unit is the elapsed
    time floored to that unit.
    """

    dob, current = _checked_dates(date_of_birth, current_date, clock)
    try:
        age_unit = AgeUnit(unit)
    except ValueError:
        raise InvalidUnitError(unit) from None

    if age_unit is AgeUnit.MONTHS:
        return (current.year - dob.year) * 12 + (current.month - dob.month)

    elapsed = current - dob
    if age_unit is AgeUnit.YEARS:
        return (elapsed // _MILLISECOND) * 4 // _MILLISECONDS_PER_FOUR_YEARS
    return elapsed // _ELAPSED_UNITS[age_unit]


def is_adult(
    date_of_birth: DateLike,
    current_date: DateLike | None = None,
    *,
    clock: Clock = local_now,
    age_of_majority: int = ADULT_AGE_YEARS,
) -> bool:
    """Whether the age in (average) years has reached ``age_of_majority``."""

    return get_age_in(date_of_birth, AgeUnit.YEARS, current_date, clock=clock) >= age_of_majority


__all__ = [
    "ADULT_AGE_YEARS",
    "AgeResult",
    "AgeUnit",
    "get_age",
    "get_age_in",
    "is_adult",
]
