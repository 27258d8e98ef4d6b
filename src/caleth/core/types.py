from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Dict, Literal, Optional


class CalendarType(str, Enum):
    GREGORIAN = "gregorian"
    ETHIOPIAN = "ethiopian"

    @classmethod
    def parse(cls, value: "CalendarType | str") -> "CalendarType":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown calendar type '{value}'. Available: {[c.value for c in cls]}") from None


class DateStyle(str, Enum):
    SHORT = "short"
    LONG = "long"
    AMHARIC = "amharic"

    @classmethod
    def parse(cls, value: "DateStyle | str") -> "DateStyle":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown date style '{value}'. Available: {[s.value for s in cls]}") from None


@dataclass(frozen=True)
class EngineId:
    family: Literal["ethiopian", "gregorian", "custom"]
    name: str
    version: str


@dataclass(frozen=True, order=True)
class EthiopianDate:
    year: int
    month: int  # 1..13
    day: int    # 1..30, 1..5/6 for Pagume


@dataclass(frozen=True, order=True)
class GregorianDate:
    year: int
    month: int
    day: int

    @classmethod
    def from_date(cls, d: date) -> "GregorianDate":
        return cls(d.year, d.month, d.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)


@dataclass(frozen=True)
class MonthInfo:
    month: int
    name: str
    amharic: str
    days: int


@dataclass(frozen=True)
class DayInfo:
    civil_date: date
    ethiopian: EthiopianDate
    jdn: int
    weekday: int  # 0=Mon..6=Sun
    attributes: Optional[Dict[str, Any]] = None
