from __future__ import annotations

from importlib import metadata

from agecalc.domain import (
    ADULT_AGE_YEARS,
    AgeCalculatorError,
    AgeReport,
    AgeResult,
    AgeUnit,
    DateRangeError,
    FutureDateError,
    InvalidDateError,
    InvalidUnitError,
    ZodiacSign,
    build_age_report,
    get_age,
    get_age_in,
    get_days_until_next_birthday,
    get_next_birthday,
    get_zodiac_sign,
    is_adult,
)

try:
    __version__ = metadata.version("agecalc")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "ADULT_AGE_YEARS",
    "AgeCalculatorError",
    "AgeReport",
    "AgeResult",
    "AgeUnit",
    "DateRangeError",
    "FutureDateError",
    "InvalidDateError",
    "InvalidUnitError",
    "ZodiacSign",
    "__version__",
    "build_age_report",
    "get_age",
    "get_age_in",
    "get_days_until_next_birthday",
    "get_next_birthday",
    "get_zodiac_sign",
    "is_adult",
]
