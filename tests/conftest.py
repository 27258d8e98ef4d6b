"""
pytest configuration and shared fixtures for caleth tests.
"""

from datetime import date

import pytest

from caleth.core import clock as clock_mod
from caleth.core.clock import FixedClock
from caleth import settings as settings_mod


# 2024-09-11 is Meskerem 1, 2017
ENKUTATASH_2017 = date(2024, 9, 11)


@pytest.fixture
def fixed_clock():
    """Pin the process default clock, restoring the previous one afterwards."""
    previous = clock_mod.get_default_clock()
    clk = FixedClock(ENKUTATASH_2017)
    clock_mod.set_default_clock(clk)
    yield clk
    clock_mod.set_default_clock(previous)


@pytest.fixture
def clean_settings(monkeypatch):
    """Settings re-read from an environment without CALETH_* overrides."""
    monkeypatch.delenv(settings_mod.ENV_CALENDAR, raising=False)
    monkeypatch.delenv(settings_mod.ENV_STYLE, raising=False)
    settings_mod.set_settings(None)
    yield
    settings_mod.set_settings(None)
