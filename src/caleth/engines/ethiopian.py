"""
caleth.engines.ethiopian
------------------------
Ethiopian (Amete Mihret) calendar engine. Dates are bridged to the
Gregorian calendar through the Julian Day Number, counted from
ETHIOPIAN_EPOCH_JDN (Meskerem 1, year 1).

The year layout is 12 months of 30 days followed by Pagume (5 days,
6 in leap years). Four consecutive years span 3*365 + 366 = 1461 days,
with the leap year last in each cycle (years 3, 7, 11, ...).
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Sequence

from caleth.core.errors import InvalidDateError
from caleth.core.rules import (
    ETHIOPIAN_EPOCH_JDN,
    days_in_ethiopian_month,
    ethiopian_leap_years_before,
)
from caleth.core.time import as_gregorian, to_jdn, weekday_from_jdn, jdn_to_gregorian
from caleth.core.types import DateStyle, DayInfo, EngineId, EthiopianDate, GregorianDate
from caleth.formatting import format_ethiopian_date
from caleth.names import ethiopian_month_names
from caleth.validation import validate_ethiopian_date, validate_gregorian_date


# ---------------------------------------------------------
# JDN bridge
# ---------------------------------------------------------

def year_start_jdn(year: int) -> int:
    """JDN of Meskerem 1 of the given year."""
    return ETHIOPIAN_EPOCH_JDN + 365 * (year - 1) + ethiopian_leap_years_before(year)


def ethiopian_to_jdn(year: int, month: int, day: int) -> int:
    """Assumes a valid date; see validate_ethiopian_date."""
    jdn = year_start_jdn(year)
    for m in range(1, month):
        jdn += days_in_ethiopian_month(year, m)
    return jdn + day - 1


def jdn_to_ethiopian(jdn: int) -> EthiopianDate:
    """Inverse of ethiopian_to_jdn for jdn >= ETHIOPIAN_EPOCH_JDN."""
    n = jdn - ETHIOPIAN_EPOCH_JDN
    # Closed form for the 1461-day cycle; exact for every n.
    year = (4 * n + 1463) // 1461

    day_of_year = jdn - year_start_jdn(year)
    month = 1
    while day_of_year >= days_in_ethiopian_month(year, month):
        day_of_year -= days_in_ethiopian_month(year, month)
        month += 1
    return EthiopianDate(year=year, month=month, day=day_of_year + 1)


def day_of_year(e: EthiopianDate) -> int:
    """1-based day of the Ethiopian year (Meskerem 1 = 1)."""
    return ethiopian_to_jdn(e.year, e.month, e.day) - year_start_jdn(e.year) + 1


# ---------------------------------------------------------
# Engine
# ---------------------------------------------------------

class EthiopianEngine:
    """Calendar engine whose native value is EthiopianDate."""

    def __init__(self, id: EngineId | None = None):
        self.id = id or EngineId(family="ethiopian", name="ethiopian", version="1")

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.__dict__,
            "epoch_jdn": ETHIOPIAN_EPOCH_JDN,
            "months_per_year": 13,
            "leap_rule": "year % 4 == 3",
        }

    def to_jdn(self, value: EthiopianDate) -> int:
        e = validate_ethiopian_date(value)
        return ethiopian_to_jdn(e.year, e.month, e.day)

    def from_jdn(self, jdn: int) -> EthiopianDate:
        if jdn < ETHIOPIAN_EPOCH_JDN:
            raise InvalidDateError(
                f"JDN {jdn} precedes the Ethiopian epoch (JDN {ETHIOPIAN_EPOCH_JDN})"
            )
        return jdn_to_ethiopian(jdn)

    def coerce(self, value: Any) -> EthiopianDate:
        """Return value as an EthiopianDate, converting Gregorian input."""
        if isinstance(value, EthiopianDate):
            return validate_ethiopian_date(value)
        g = validate_gregorian_date(as_gregorian(value))
        return self.from_jdn(to_jdn(g))

    def days_in_month(self, year: int, month: int) -> int:
        return days_in_ethiopian_month(year, month)

    def month_names(self, script: str = "latin") -> Sequence[str]:
        return ethiopian_month_names(script)

    def format(self, value: Any, style: DateStyle | str = DateStyle.SHORT) -> str:
        return format_ethiopian_date(self.coerce(value), style)

    def to_gregorian(self, value: EthiopianDate) -> GregorianDate:
        return jdn_to_gregorian(self.to_jdn(value))

    def day_info(self, d: date) -> DayInfo:
        g = validate_gregorian_date(as_gregorian(d))
        jdn = to_jdn(g)
        return DayInfo(
            civil_date=g.to_date(),
            ethiopian=self.from_jdn(jdn),
            jdn=jdn,
            weekday=weekday_from_jdn(jdn),
        )
