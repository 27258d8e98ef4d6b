"""
caleth.engines.gregorian
------------------------
Proleptic Gregorian engine. Its native value is GregorianDate; host dates
are accepted everywhere a GregorianDate is.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Dict, Sequence

from caleth.core.rules import days_in_gregorian_month
from caleth.core.time import as_gregorian, jdn_to_gregorian, to_jdn
from caleth.core.types import DateStyle, DayInfo, EngineId, EthiopianDate, GregorianDate
from caleth.engines.ethiopian import EthiopianEngine
from caleth.formatting import format_gregorian_date
from caleth.names import GREGORIAN_MONTHS
from caleth.validation import validate_gregorian_date


class GregorianEngine:

    def __init__(self, id: EngineId | None = None, ethiopian: EthiopianEngine | None = None):
        self.id = id or EngineId(family="gregorian", name="gregorian", version="1")
        # used for converting EthiopianDate input
        self._ethiopian = ethiopian or EthiopianEngine()

    def info(self) -> Dict[str, Any]:
        return {"id": self.id.__dict__, "months_per_year": 12, "proleptic": True}

    def to_jdn(self, value: Any) -> int:
        g = as_gregorian(value)
        validate_gregorian_date(g)
        return to_jdn(g)

    def from_jdn(self, jdn: int) -> GregorianDate:
        return jdn_to_gregorian(jdn)

    def coerce(self, value: Any) -> GregorianDate:
        if isinstance(value, EthiopianDate):
            return self.from_jdn(self._ethiopian.to_jdn(value))
        return validate_gregorian_date(as_gregorian(value))

    def days_in_month(self, year: int, month: int) -> int:
        return days_in_gregorian_month(year, month)

    def month_names(self, script: str = "latin") -> Sequence[str]:
        if script != "latin":
            raise ValueError(f"Gregorian month names are only available in 'latin', got '{script}'")
        return GREGORIAN_MONTHS

    def format(self, value: Any, style: DateStyle | str = DateStyle.SHORT) -> str:
        return format_gregorian_date(self.coerce(value), style)

    def to_ethiopian(self, value: Any) -> EthiopianDate:
        return self._ethiopian.from_jdn(self.to_jdn(value))

    def day_info(self, d: date) -> DayInfo:
        return self._ethiopian.day_info(d)
