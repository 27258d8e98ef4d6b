from __future__ import annotations

import re
from datetime import date
from typing import Optional

from .core.types import EthiopianDate
from .names import ETHIOPIAN_MONTH_MAP, ETHIOPIAN_MONTH_MAP_AMHARIC

_SHORT_RE = re.compile(r"([0-9]{1,2})/([0-9]{1,2})/([0-9]{4})")
_LONG_RE = re.compile(r"([0-9]{1,2})\s+(\S+)\s+([0-9]{4})")
_ISO_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")


def _month_from_name(name: str) -> Optional[int]:
    # Latin table first (case-insensitive), then exact Ge'ez spelling
    month = ETHIOPIAN_MONTH_MAP.get(name.lower())
    if month is None:
        month = ETHIOPIAN_MONTH_MAP_AMHARIC.get(name)
    return month


def parse_ethiopian_date(text: str) -> Optional[EthiopianDate]:
    """
    Parse "D/M/YYYY" or "D MonthName YYYY" (Latin or Ge'ez month name).

    Returns None when nothing matches. The result is not validated:
    "31/13/2016" parses, and callers check it with is_valid_ethiopian_date.
    """
    if not isinstance(text, str):
        return None
    m = _SHORT_RE.fullmatch(text)
    if m:
        return EthiopianDate(year=int(m.group(3)), month=int(m.group(2)), day=int(m.group(1)))

    m = _LONG_RE.fullmatch(text)
    if m:
        month = _month_from_name(m.group(2))
        if month is not None:
            return EthiopianDate(year=int(m.group(3)), month=month, day=int(m.group(1)))

    return None


def parse_iso_date(text: str) -> Optional[date]:
    """YYYY-MM-DD -> date, or None if malformed or out of range."""
    if not isinstance(text, str):
        return None
    m = _ISO_RE.fullmatch(text.strip())
    if not m:
        return None
    try:
        return date(int(m.group(1)), int(m.group(2)), int(m.group(3)))
    except ValueError:
        return None
