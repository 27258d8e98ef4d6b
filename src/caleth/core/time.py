from __future__ import annotations
from datetime import date, datetime
from typing import Union

from .types import GregorianDate

GregorianLike = Union[GregorianDate, date]


def gregorian_to_jdn(year: int, month: int, day: int) -> int:
    """Proleptic Gregorian (year, month, day) -> Julian Day Number (JDN)."""
    a = (14 - month) // 12
    y2 = year + 4800 - a
    m2 = month + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_gregorian(jdn: int) -> GregorianDate:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return GregorianDate(year, month, day)


def to_jdn(d: GregorianLike) -> int:
    """Convert a Gregorian date (host date or GregorianDate) to JDN."""
    return gregorian_to_jdn(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    return jdn_to_gregorian(jdn).to_date()


def as_gregorian(value: GregorianLike) -> GregorianDate:
    """Normalize a host date/datetime or GregorianDate. Time of day is dropped."""
    if isinstance(value, GregorianDate):
        return value
    if isinstance(value, datetime):
        value = value.date()
    if isinstance(value, date):
        return GregorianDate.from_date(value)
    raise TypeError(f"Expected date or GregorianDate, got {type(value).__name__}")


def weekday_from_jdn(jdn: int) -> int:
    # 0=Mon..6=Sun, same convention as date.weekday()
    return jdn % 7
