"""Normalisation of host date values shared by the calculators."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Protocol, TypeAlias

from .errors import INVALID_CURRENT_DATE, InvalidDateError

DateLike: TypeAlias = date | datetime

ONE_DAY = timedelta(days=1)


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def local_now() -> datetime:
    return datetime.now()


def ensure_datetime(value: object, *, message: str | None = None) -> datetime:
    """Return ``value`` as a ``datetime``; plain dates become midnight of that day."""

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if message is None:
        raise InvalidDateError
    raise InvalidDateError(message)


def resolve_dates(
    date_of_birth: object,
    current_date: object | None,
    clock: Clock,
) -> tuple[datetime, datetime]:
    """Validate both inputs and align them onto a comparable timeline.

    The clock is only consulted when ``current_date`` is omitted. A naive value
    paired with an aware one is read in the aware value's timezone, and an aware
    birth date is converted into the reference's timezone so calendar fields
    are read in one zone.
    """

    dob = ensure_datetime(date_of_birth)
    if current_date is None:
        current = datetime.now(dob.tzinfo) if clock is local_now else clock()
    else:
        current = ensure_datetime(current_date, message=INVALID_CURRENT_DATE)

    if current.tzinfo is None:
        if dob.tzinfo is not None:
            current = current.replace(tzinfo=dob.tzinfo)
    elif dob.tzinfo is None:
        dob = dob.replace(tzinfo=current.tzinfo)
    else:
        dob = dob.astimezone(current.tzinfo)
    return dob, current


def midnight(year: int, month: int, day: int, *, like: datetime) -> datetime:
    """Midnight of the given day, carrying the timezone of ``like``."""

    return datetime(year, month, day, tzinfo=like.tzinfo)


__all__ = [
    "ONE_DAY",
    "Clock",
    "DateLike",
    "ensure_datetime",
    "local_now",
    "midnight",
    "resolve_dates",
]
