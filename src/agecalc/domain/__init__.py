"""Pure date arithmetic over a birth date and a reference date."""

from __future__ import annotations

from ._dates import Clock, DateLike
from .age import ADULT_AGE_YEARS, AgeResult, AgeUnit, get_age, get_age_in, is_adult
from .birthdays import get_days_until_next_birthday, get_next_birthday
from .errors import (
    AgeCalculatorError,
    DateRangeError,
    FutureDateError,
    InvalidDateError,
    InvalidUnitError,
)
from .report import AgeReport, build_age_report
from .zodiac import ZodiacSign, get_zodiac_sign

__all__ = [
    "ADULT_AGE_YEARS",
    "AgeCalculatorError",
    "AgeReport",
    "AgeResult",
    "AgeUnit",
    "Clock",
    "DateRangeError",
    "DateLike",
    "FutureDateError",
    "InvalidDateError",
    "InvalidUnitError",
    "ZodiacSign",
    "build_age_report",
    "get_age",
    "get_age_in",
    "get_days_until_next_birthday",
    "get_next_birthday",
    "get_zodiac_sign",
    "is_adult",
]
