"""
caleth.core.rules
-----------------
Leap-year predicates and month-length tables for both calendars.
Every other module takes its calendar rules from here.
"""

from __future__ import annotations

from .errors import InvalidMonthError

# JDN of Meskerem 1, year 1 (Amete Mihret era)
ETHIOPIAN_EPOCH_JDN = 1724221

ETHIOPIAN_MONTHS_PER_YEAR = 13
GREGORIAN_MONTHS_PER_YEAR = 12

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_ethiopian_leap_year(year: int) -> bool:
    """Year 3, 7, 11, ... (the year before a Gregorian leap year)."""
    return year % 4 == 3


def is_gregorian_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def ethiopian_leap_years_before(year: int) -> int:
    """
    Number of leap years Y with 1 <= Y < year.

    Must agree with is_ethiopian_leap_year: the leap years are 3, 7, 11, ...
    so the count is floor(year / 4).
    """
    return year // 4


def days_in_ethiopian_month(year: int, month: int) -> int:
    if not (1 <= month <= ETHIOPIAN_MONTHS_PER_YEAR):
        raise InvalidMonthError(f"Ethiopian month must be in 1..13, got {month}")
    if month == 13:
        # Pagume
        return 6 if is_ethiopian_leap_year(year) else 5
    return 30


def days_in_ethiopian_year(year: int) -> int:
    return 366 if is_ethiopian_leap_year(year) else 365


def days_in_gregorian_month(year: int, month: int) -> int:
    if not (1 <= month <= GREGORIAN_MONTHS_PER_YEAR):
        raise InvalidMonthError(f"Gregorian month must be in 1..12, got {month}")
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]
