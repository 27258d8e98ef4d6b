from __future__ import annotations

from typing import Optional

from .core.clock import Clock, resolve_clock
from .core.types import EthiopianDate, GregorianDate
from .engines.ethiopian import EthiopianEngine

_ETH = EthiopianEngine()


def compare_ethiopian_dates(a: EthiopianDate, b: EthiopianDate) -> int:
    """-1, 0 or 1, ordering by (year, month, day)."""
    ka = (a.year, a.month, a.day)
    kb = (b.year, b.month, b.day)
    if ka < kb:
        return -1
    if ka > kb:
        return 1
    return 0


def add_days_to_ethiopian(d: EthiopianDate, days: int) -> EthiopianDate:
    """Shift by a (possibly negative) number of days on the JDN line."""
    return _ETH.from_jdn(_ETH.to_jdn(d) + days)


def days_between_ethiopian(a: EthiopianDate, b: EthiopianDate) -> int:
    """Signed day count from a to b."""
    return _ETH.to_jdn(b) - _ETH.to_jdn(a)


def get_current_gregorian_date(clock: Optional[Clock] = None) -> GregorianDate:
    return GregorianDate.from_date(resolve_clock(clock).today())


def get_current_ethiopian_date(clock: Optional[Clock] = None) -> EthiopianDate:
    return _ETH.coerce(resolve_clock(clock).today())
