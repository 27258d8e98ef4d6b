from __future__ import annotations
from caleth.core.engine import EngineRegistry
from caleth.core.types import CalendarType
from caleth.engines.factory import make_engine

def build_registry() -> EngineRegistry:
    engines = {}
    for calendar_type in CalendarType:
        engines[calendar_type.value] = make_engine(calendar_type)
    return EngineRegistry(engines)
