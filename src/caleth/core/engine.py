from __future__ import annotations
import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict, List, Protocol, Sequence

from .types import DateStyle, DayInfo

logger = logging.getLogger(__name__)


class CalendarEngine(Protocol):
    def info(self) -> Dict[str, Any]: ...
    def to_jdn(self, value: Any) -> int: ...
    def from_jdn(self, jdn: int) -> Any: ...
    def coerce(self, value: Any) -> Any: ...
    def days_in_month(self, year: int, month: int) -> int: ...
    def month_names(self, script: str = "latin") -> Sequence[str]: ...
    def format(self, value: Any, style: DateStyle = DateStyle.SHORT) -> str: ...
    def day_info(self, d: date) -> DayInfo: ...

@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise KeyError(f"Unknown engine '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Engine '{name}' already exists. Use overwrite=True to replace.")
        logger.debug("registering calendar engine %r (%s)", name, type(engine).__name__)
        self._engines[name] = engine
