"""Errors raised by the age calculations."""

from __future__ import annotations

INVALID_DATE_OF_BIRTH = "Invalid date of birth provided"
INVALID_CURRENT_DATE = "Invalid current date provided"
FUTURE_DATE_OF_BIRTH = "Date of birth cannot be in the future"
BIRTHDAY_OUT_OF_RANGE = "Next birthday falls after the last supported year"


class AgeCalculatorError(ValueError):
    """Base class for invalid inputs to the calculator."""


class InvalidDateError(AgeCalculatorError):
    """Raised when a supplied value is not a usable date."""

    def __init__(self, message: str = INVALID_DATE_OF_BIRTH) -> None:
        super().__init__(message)


class FutureDateError(AgeCalculatorError):
    """Raised when the date of birth lies after the reference date."""

    def __init__(self, message: str = FUTURE_DATE_OF_BIRTH) -> None:
        super().__init__(message)


class DateRangeError(AgeCalculatorError):
    """Raised when a computed date would fall outside ``datetime.MAXYEAR``."""

    def __init__(self, message: str = BIRTHDAY_OUT_OF_RANGE) -> None:
        super().__init__(message)


class InvalidUnitError(AgeCalculatorError):
    """Raised when an age unit is not one of :class:`~agecalc.domain.age.AgeUnit`."""

    def __init__(self, unit: object) -> None:
        super().__init__(f"Invalid unit: {unit}")
        self.unit = unit


__all__ = [
    "AgeCalculatorError",
    "DateRangeError",
    "FutureDateError",
    "InvalidDateError",
    "InvalidUnitError",
]
