from __future__ import annotations
from typing import Any, Dict

from ..core.rules import is_ethiopian_leap_year, is_gregorian_leap_year
from ..core.types import DayInfo
from ..engines.ethiopian import day_of_year as ethiopian_day_of_year
from ..names import ETHIOPIAN_WEEKDAYS, ETHIOPIAN_WEEKDAYS_AMHARIC
from .registry import register_attribute

def weekday(info: DayInfo) -> Dict[str, Any]:
    # 0=Mon..6=Sun, as date.weekday()
    return {
        "weekday": info.weekday,
        "weekday_name": ETHIOPIAN_WEEKDAYS[info.weekday],
        "weekday_name_amharic": ETHIOPIAN_WEEKDAYS_AMHARIC[info.weekday],
    }

def day_of_year(info: DayInfo) -> Dict[str, Any]:
    return {"day_of_year": ethiopian_day_of_year(info.ethiopian)}

def leap_year(info: DayInfo) -> Dict[str, Any]:
    return {
        "ethiopian_leap_year": is_ethiopian_leap_year(info.ethiopian.year),
        "gregorian_leap_year": is_gregorian_leap_year(info.civil_date.year),
    }

register_attribute("weekday", weekday)
register_attribute("day_of_year", day_of_year)
register_attribute("leap_year", leap_year)
