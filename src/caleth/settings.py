"""
Process-wide defaults for the calendar shown to users.

CALETH_CALENDAR  gregorian | ethiopian   (default: gregorian)
CALETH_STYLE     short | long | amharic  (default: short)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .core.types import CalendarType, DateStyle

logger = logging.getLogger(__name__)

ENV_CALENDAR = "CALETH_CALENDAR"
ENV_STYLE = "CALETH_STYLE"


@dataclass(frozen=True)
class Settings:
    calendar_type: CalendarType = CalendarType.GREGORIAN
    style: DateStyle = DateStyle.SHORT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        """Read overrides from the environment; unknown values are ignored with a warning."""
        env = os.environ if environ is None else environ
        out = cls()

        raw = env.get(ENV_CALENDAR)
        if raw:
            try:
                out = cls(calendar_type=CalendarType.parse(raw), style=out.style)
            except ValueError:
                logger.warning("ignoring %s=%r: not a calendar type", ENV_CALENDAR, raw)

        raw = env.get(ENV_STYLE)
        if raw:
            try:
                out = cls(calendar_type=out.calendar_type, style=DateStyle.parse(raw))
            except ValueError:
                logger.warning("ignoring %s=%r: not a date style", ENV_STYLE, raw)

        logger.debug("resolved settings: %s", out)
        return out


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings


def set_settings(settings: Optional[Settings]) -> None:
    """Replace the active settings; None re-reads the environment on next use."""
    global _settings
    _settings = settings
