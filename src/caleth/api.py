from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .arithmetic import (
    add_days_to_ethiopian,
    compare_ethiopian_dates,
    days_between_ethiopian,
    get_current_ethiopian_date,
    get_current_gregorian_date,
)
from .attributes import standard as _standard  # noqa: F401  (registers attributes)
from .attributes.registry import compute_attributes
from .core.clock import Clock, resolve_clock
from .core.engine import CalendarEngine, EngineRegistry
from .core.rules import days_in_ethiopian_month
from .core.time import GregorianLike
from .core.types import CalendarType, DateStyle, DayInfo, EthiopianDate, GregorianDate, MonthInfo
from .formatting import format_ethiopian_date, format_gregorian_date
from .names import ETHIOPIAN_MONTHS, ETHIOPIAN_MONTHS_AMHARIC
from .parsing import parse_ethiopian_date
from .settings import get_settings
from .validation import is_valid_ethiopian_date, validate_ethiopian_date

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry

def list_engines() -> List[str]:
    return _reg().list()

def engine_info(engine: str) -> Dict[str, Any]:
    return _reg().get(engine).info()

def get_engine(calendar_type: CalendarType | str) -> CalendarEngine:
    return _reg().get(CalendarType.parse(calendar_type).value)

def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Conversion
# ============================================================

def gregorian_to_ethiopian(g: GregorianLike) -> EthiopianDate:
    """Host date or GregorianDate -> EthiopianDate. Raises InvalidDateError for invalid input."""
    jdn = get_engine(CalendarType.GREGORIAN).to_jdn(g)
    return get_engine(CalendarType.ETHIOPIAN).from_jdn(jdn)

def ethiopian_to_gregorian(e: EthiopianDate) -> GregorianDate:
    jdn = get_engine(CalendarType.ETHIOPIAN).to_jdn(e)
    return get_engine(CalendarType.GREGORIAN).from_jdn(jdn)

def ethiopian_to_date(e: EthiopianDate) -> date:
    return ethiopian_to_gregorian(e).to_date()

def date_to_ethiopian(d: date) -> EthiopianDate:
    return gregorian_to_ethiopian(d)

def get_ethiopian_days_in_month(year: int, month: int) -> int:
    return days_in_ethiopian_month(year, month)

def ethiopian_new_year(year: int) -> GregorianDate:
    """Gregorian date of Meskerem 1 (Enkutatash) of the given Ethiopian year."""
    return ethiopian_to_gregorian(EthiopianDate(year, 1, 1))

def ethiopian_year_range(gregorian_start_year: int, gregorian_end_year: int) -> Tuple[int, int]:
    """Ethiopian years touched by the Gregorian years [start, end]."""
    start = gregorian_to_ethiopian(GregorianDate(gregorian_start_year, 1, 1))
    end = gregorian_to_ethiopian(GregorianDate(gregorian_end_year, 12, 31))
    return start.year, end.year

def ethiopian_year_months(year: int) -> List[MonthInfo]:
    return [
        MonthInfo(month=i, name=name, amharic=amharic, days=days_in_ethiopian_month(year, i))
        for i, (name, amharic) in enumerate(zip(ETHIOPIAN_MONTHS, ETHIOPIAN_MONTHS_AMHARIC), 1)
    ]

# ============================================================
# Calendar-type dispatch
# ============================================================

def format_date_by_calendar(
    value: GregorianLike | EthiopianDate,
    calendar_type: CalendarType | str,
    style: DateStyle | str = DateStyle.SHORT,
) -> str:
    """Format value in the requested calendar, converting it first if needed."""
    return get_engine(calendar_type).format(value, style)

def get_today_formatted(
    calendar_type: CalendarType | str | None = None,
    style: DateStyle | str = DateStyle.LONG,
    *,
    clock: Optional[Clock] = None,
) -> str:
    if calendar_type is None:
        calendar_type = get_settings().calendar_type
    return format_date_by_calendar(resolve_clock(clock).today(), calendar_type, style)

# ============================================================
# Day-level API
# ============================================================

def day_info(d: GregorianLike, *, attributes: Sequence[str] = ()) -> DayInfo:
    if isinstance(d, GregorianDate):
        d = d.to_date()
    info = get_engine(CalendarType.ETHIOPIAN).day_info(d)
    if attributes:
        info = replace(info, attributes=compute_attributes(info, attributes))
    return info
