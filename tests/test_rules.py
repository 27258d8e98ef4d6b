# tests/test_rules.py

import pytest

from caleth.core.errors import InvalidMonthError
from caleth.core import rules


def test_ethiopian_leap_years():
    assert rules.is_ethiopian_leap_year(2015)
    assert rules.is_ethiopian_leap_year(3)
    assert not rules.is_ethiopian_leap_year(2016)
    assert not rules.is_ethiopian_leap_year(2017)
    assert not rules.is_ethiopian_leap_year(2018)
    assert rules.is_ethiopian_leap_year(2019)


def test_gregorian_leap_years():
    assert rules.is_gregorian_leap_year(2024)
    assert rules.is_gregorian_leap_year(2000)
    assert not rules.is_gregorian_leap_year(1900)
    assert not rules.is_gregorian_leap_year(2023)


def test_pagume_length():
    for year in range(1, 200):
        expected = 6 if year % 4 == 3 else 5
        assert rules.days_in_ethiopian_month(year, 13) == expected
        assert rules.days_in_ethiopian_year(year) == 360 + expected


def test_regular_months_have_thirty_days():
    for month in range(1, 13):
        assert rules.days_in_ethiopian_month(2016, month) == 30
        assert rules.days_in_ethiopian_month(2015, month) == 30


@pytest.mark.parametrize("month", [0, 14, -1])
def test_ethiopian_month_out_of_range(month):
    with pytest.raises(InvalidMonthError):
        rules.days_in_ethiopian_month(2016, month)


def test_gregorian_month_lengths():
    assert rules.days_in_gregorian_month(2024, 2) == 29
    assert rules.days_in_gregorian_month(2023, 2) == 28
    assert rules.days_in_gregorian_month(1900, 2) == 28
    assert rules.days_in_gregorian_month(2023, 9) == 30
    with pytest.raises(InvalidMonthError):
        rules.days_in_gregorian_month(2023, 13)


def test_leap_count_matches_predicate():
    count = 0
    for year in range(1, 2000):
        assert rules.ethiopian_leap_years_before(year) == count
        count += rules.is_ethiopian_leap_year(year)
