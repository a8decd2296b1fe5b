"""Western tropical zodiac signs."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Final, TypeAlias

from ._dates import ensure_datetime

if TYPE_CHECKING:
    from ._dates import DateLike

MonthDay: TypeAlias = tuple[int, int]


class ZodiacSign(StrEnum):
    ARIES = "Aries"
    TAURUS = "Taurus"
    GEMINI = "Gemini"
    CANCER = "Cancer"
    LEO = "Leo"
    VIRGO = "Virgo"
    LIBRA = "Libra"
    SCORPIO = "Scorpio"
    SAGITTARIUS = "Sagittarius"
    CAPRICORN = "Capricorn"
    AQUARIUS = "Aquarius"
    PISCES = "Pisces"


# Inclusive (month, day) bounds; Pisces takes whatever is left.
SIGN_RANGES: Final[tuple[tuple[ZodiacSign, MonthDay, MonthDay], ...]] = (
    (ZodiacSign.ARIES, (3, 21), (4, 19)),
    (ZodiacSign.TAURUS, (4, 20), (5, 20)),
    (ZodiacSign.GEMINI, (5, 21), (6, 20)),
    (ZodiacSign.CANCER, (6, 21), (7, 22)),
    (ZodiacSign.LEO, (7, 23), (8, 22)),
    (ZodiacSign.VIRGO, (8, 23), (9, 22)),
    (ZodiacSign.LIBRA, (9, 23), (10, 22)),
    (ZodiacSign.SCORPIO, (10, 23), (11, 21)),
    (ZodiacSign.SAGITTARIUS, (11, 22), (12, 21)),
    (ZodiacSign.CAPRICORN, (12, 22), (1, 19)),
    (ZodiacSign.AQUARIUS, (1, 20), (2, 18)),
)


def _in_range(month_day: MonthDay, start: MonthDay, end: MonthDay) -> bool:
    month, day = month_day
    start_month, start_day = start
    end_month, end_day = end
    return (month == start_month and day >= start_day) or (month == end_month and day <= end_day)


def get_zodiac_sign(date_of_birth: DateLike) -> ZodiacSign:
    """Return the sign for the birth date's month and day; the year is ignored."""

    dob = ensure_datetime(date_of_birth)
    month_day = (dob.month, dob.day)
    for sign, start, end in SIGN_RANGES:
        if _in_range(month_day, start, end):
            return sign
    return ZodiacSign.PISCES


__all__ = ["SIGN_RANGES", "ZodiacSign", "get_zodiac_sign"]
