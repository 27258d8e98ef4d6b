"""
caleth.engines.factory
----------------------
Builds live engine objects from a CalendarType selector.
"""

from __future__ import annotations
from caleth.core.engine import CalendarEngine
from caleth.core.types import CalendarType
from caleth.engines.ethiopian import EthiopianEngine
from caleth.engines.gregorian import GregorianEngine


def make_engine(calendar_type: CalendarType | str) -> CalendarEngine:
    """The universal entry point."""
    calendar_type = CalendarType.parse(calendar_type)
    if calendar_type is CalendarType.ETHIOPIAN:
        return EthiopianEngine()
    if calendar_type is CalendarType.GREGORIAN:
        return GregorianEngine()
    raise TypeError(f"Unknown calendar type: {calendar_type!r}")
