from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Optional, Protocol


class Clock(Protocol):
    def today(self) -> date: ...


class SystemClock:
    """Host local civil date."""

    def today(self) -> date:
        return date.today()


@dataclass(frozen=True)
class FixedClock:
    fixed: date

    def today(self) -> date:
        return self.fixed


_default_clock: Clock = SystemClock()


def get_default_clock() -> Clock:
    return _default_clock


def set_default_clock(clock: Clock) -> None:
    global _default_clock
    _default_clock = clock


def resolve_clock(clock: Optional[Clock]) -> Clock:
    return clock if clock is not None else _default_clock
