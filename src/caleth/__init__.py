"""caleth public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    gregorian_to_ethiopian,
    ethiopian_to_gregorian,
    ethiopian_to_date,
    date_to_ethiopian,
    format_ethiopian_date,
    format_gregorian_date,
    format_date_by_calendar,
    parse_ethiopian_date,
    is_valid_ethiopian_date,
    validate_ethiopian_date,
    compare_ethiopian_dates,
    add_days_to_ethiopian,
    days_between_ethiopian,
    get_ethiopian_days_in_month,
    get_current_ethiopian_date,
    get_current_gregorian_date,
    get_today_formatted,
    ethiopian_new_year,
    ethiopian_year_range,
    ethiopian_year_months,
    day_info,
    list_engines,
    engine_info,
    get_engine,
    register_engine,
)
from .core.clock import Clock, FixedClock, SystemClock, set_default_clock
from .core.errors import CalethError, InvalidDateError, InvalidMonthError
from .core.rules import is_ethiopian_leap_year, is_gregorian_leap_year
from .core.types import CalendarType, DateStyle, EthiopianDate, GregorianDate

__all__ = [
    "gregorian_to_ethiopian",
    "ethiopian_to_gregorian",
    "ethiopian_to_date",
    "date_to_ethiopian",
    "format_ethiopian_date",
    "format_gregorian_date",
    "format_date_by_calendar",
    "parse_ethiopian_date",
    "is_valid_ethiopian_date",
    "validate_ethiopian_date",
    "compare_ethiopian_dates",
    "add_days_to_ethiopian",
    "days_between_ethiopian",
    "get_ethiopian_days_in_month",
    "get_current_ethiopian_date",
    "get_current_gregorian_date",
    "get_today_formatted",
    "ethiopian_new_year",
    "ethiopian_year_range",
    "ethiopian_year_months",
    "day_info",
    "list_engines",
    "engine_info",
    "get_engine",
    "register_engine",
    "is_ethiopian_leap_year",
    "is_gregorian_leap_year",
    "Clock",
    "FixedClock",
    "SystemClock",
    "set_default_clock",
    "CalethError",
    "InvalidDateError",
    "InvalidMonthError",
    "CalendarType",
    "DateStyle",
    "EthiopianDate",
    "GregorianDate",
]
