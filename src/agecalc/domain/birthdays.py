"""Next-birthday lookups."""

from __future__ import annotations

import calendar
from datetime import MAXYEAR
from typing import TYPE_CHECKING

from ._dates import ONE_DAY, local_now, midnight, resolve_dates
from .errors import DateRangeError

if TYPE_CHECKING:
    from datetime import date, datetime

    from ._dates import Clock, DateLike


def birthday_in(year: int, date_of_birth: date) -> tuple[int, int, int]:
    """Return the ``(year, month, day)`` a birthday falls on in ``year``.

    29 February rolls over to 1 March in common years.
    """

    if date_of_birth.month == 2 and date_of_birth.day == 29 and not calendar.isleap(year):
        return year, 3, 1
    return year, date_of_birth.month, date_of_birth.day


def _next_birthday_at(
    date_of_birth: DateLike,
    current_date: DateLike | None,
    clock: Clock,
) -> tuple[datetime, datetime]:
    dob, current = resolve_dates(date_of_birth, current_date, clock)

    candidate = midnight(*birthday_in(current.year, dob), like=current)
    if candidate < current:
        if current.year == MAXYEAR:
            raise DateRangeError
        candidate = midnight(*birthday_in(current.year + 1, dob), like=current)
    return candidate, current


def get_next_birthday(
    date_of_birth: DateLike,
    current_date: DateLike | None = None,
    *,
    clock: Clock = local_now,
) -> date:
    """Return the first birthday falling on or after ``current_date``.

    Birthdays are compared at midnight, so once the reference has moved past
    midnight on the birthday itself the next one is a year away. Birth dates
    after ``current_date`` are accepted.
    """

    birthday, _ = _next_birthday_at(date_of_birth, current_date, clock)
    return birthday.date()


def get_days_until_next_birthday(
    date_of_birth: DateLike,
    current_date: DateLike | None = None,
    *,
    clock: Clock = local_now,
) -> int:
    """Whole days, rounded up, from ``current_date`` to the next birthday."""

    birthday, current = _next_birthday_at(date_of_birth, current_date, clock)
    return -((current - birthday) // ONE_DAY)


__all__ = ["birthday_in", "get_days_until_next_birthday", "get_next_birthday"]
