"""Aggregate every age fact for one birth date at one instant."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ._dates import local_now, resolve_dates
from .age import AgeResult, AgeUnit, get_age, get_age_in, is_adult
from .birthdays import get_days_until_next_birthday, get_next_birthday
from .errors import FutureDateError
from .zodiac import ZodiacSign, get_zodiac_sign

if TYPE_CHECKING:
    from datetime import date, datetime

    from ._dates import Clock, DateLike


@dataclass(frozen=True, slots=True)
class AgeReport:
    date_of_birth: datetime
    reference_date: datetime
    age: AgeResult
    age_in: dict[AgeUnit, int]
    is_adult: bool
    next_birthday: date
    days_until_next_birthday: int
    zodiac_sign: ZodiacSign


def build_age_report(
    date_of_birth: DateLike,
    current_date: DateLike | None = None,
    *,
    clock: Clock = local_now,
) -> AgeReport:
    """Compute the full report, reading the clock at most once."""

    dob, current = resolve_dates(date_of_birth, current_date, clock)
    if dob > current:
        raise FutureDateError

    return AgeReport(
        date_of_birth=dob,
        reference_date=current,
        age=get_age(dob, current),
        age_in={unit: get_age_in(dob, unit, current) for unit in AgeUnit},
        is_adult=is_adult(dob, current),
        next_birthday=get_next_birthday(dob, current),
        days_until_next_birthday=get_days_until_next_birthday(dob, current),
        zodiac_sign=get_zodiac_sign(dob),
    )


__all__ = ["AgeReport", "build_age_report"]
