"""
caleth.formatting
-----------------
Render Ethiopian and Gregorian dates as strings.

Inputs are assumed valid; a month outside its table raises InvalidMonthError
instead of producing a wrong name.
"""

from __future__ import annotations

from .core.errors import InvalidMonthError
from .core.time import GregorianLike, as_gregorian, to_jdn, weekday_from_jdn
from .core.types import DateStyle, EthiopianDate
from .names import GREGORIAN_MONTHS, ethiopian_month_names, ethiopian_weekday_names


def ethiopian_month_name(month: int, script: str = "latin") -> str:
    names = ethiopian_month_names(script)
    if not (1 <= month <= len(names)):
        raise InvalidMonthError(f"Ethiopian month must be in 1..13, got {month}")
    return names[month - 1]


def gregorian_month_name(month: int) -> str:
    if not (1 <= month <= len(GREGORIAN_MONTHS)):
        raise InvalidMonthError(f"Gregorian month must be in 1..12, got {month}")
    return GREGORIAN_MONTHS[month - 1]


def format_ethiopian_date(d: EthiopianDate, style: DateStyle | str = DateStyle.SHORT) -> str:
    style = DateStyle.parse(style)
    if style is DateStyle.AMHARIC:
        return f"{d.day} {ethiopian_month_name(d.month, 'geez')} {d.year}"
    if style is DateStyle.LONG:
        return f"{d.day} {ethiopian_month_name(d.month)} {d.year}"
    return f"{d.day}/{d.month}/{d.year}"


def format_gregorian_date(d: GregorianLike, style: DateStyle | str = DateStyle.SHORT) -> str:
    """Only LONG spells the month; every other style renders numerically."""
    g = as_gregorian(d)
    style = DateStyle.parse(style)
    if style is DateStyle.LONG:
        return f"{g.day} {gregorian_month_name(g.month)} {g.year}"
    return f"{g.day}/{g.month}/{g.year}"


def ethiopian_weekday_name(d: GregorianLike, script: str = "latin") -> str:
    """Ethiopian weekday name of a Gregorian civil date."""
    return ethiopian_weekday_names(script)[weekday_from_jdn(to_jdn(as_gregorian(d)))]


def format_ethiopian_date_with_weekday(
    d: EthiopianDate,
    weekday: int,
    style: DateStyle | str = DateStyle.LONG,
) -> str:
    """Prefix the formatted date with its weekday (0=Mon..6=Sun), in the style's script."""
    style = DateStyle.parse(style)
    script = "geez" if style is DateStyle.AMHARIC else "latin"
    return f"{ethiopian_weekday_names(script)[weekday]}, {format_ethiopian_date(d, style)}"
