from __future__ import annotations

from .core.errors import InvalidDateError, InvalidMonthError
from .core.rules import (
    ETHIOPIAN_MONTHS_PER_YEAR,
    GREGORIAN_MONTHS_PER_YEAR,
    days_in_ethiopian_month,
    days_in_gregorian_month,
)
from .core.time import GregorianLike
from .core.types import EthiopianDate


def is_valid_ethiopian_date(d: EthiopianDate) -> bool:
    if d.year < 1 or d.month < 1 or d.month > ETHIOPIAN_MONTHS_PER_YEAR or d.day < 1:
        return False
    return d.day <= days_in_ethiopian_month(d.year, d.month)


def validate_ethiopian_date(d: EthiopianDate) -> EthiopianDate:
    """Return d unchanged, or raise InvalidMonthError / InvalidDateError."""
    if not (1 <= d.month <= ETHIOPIAN_MONTHS_PER_YEAR):
        raise InvalidMonthError(f"Ethiopian month must be in 1..13, got {d.month}")
    if d.year < 1:
        raise InvalidDateError(f"Ethiopian year must be >= 1, got {d.year}")
    max_day = days_in_ethiopian_month(d.year, d.month)
    if not (1 <= d.day <= max_day):
        raise InvalidDateError(
            f"Ethiopian month {d.month} of year {d.year} has {max_day} days, got day {d.day}"
        )
    return d


def is_valid_gregorian_date(d: GregorianLike) -> bool:
    if d.month < 1 or d.month > GREGORIAN_MONTHS_PER_YEAR or d.day < 1:
        return False
    return d.day <= days_in_gregorian_month(d.year, d.month)


def validate_gregorian_date(d: GregorianLike) -> GregorianLike:
    max_day = days_in_gregorian_month(d.year, d.month)
    if not (1 <= d.day <= max_day):
        raise InvalidDateError(
            f"Gregorian month {d.month} of year {d.year} has {max_day} days, got day {d.day}"
        )
    return d
