# tests/test_conversion.py

import random
from datetime import date, timedelta

import pytest

import caleth
from caleth import EthiopianDate, GregorianDate
from caleth.core import time as ct
from caleth.core.rules import ETHIOPIAN_EPOCH_JDN, days_in_ethiopian_month
from caleth.engines.ethiopian import day_of_year, ethiopian_to_jdn, jdn_to_ethiopian

EPOCH_DATE = date(8, 8, 27)


def test_jdn_date_roundtrip():
    random.seed(42)
    # Constrain to year 1 - 9999 to avoid datetime out of range
    for _ in range(10000):
        jdn_in = random.randint(1721426, 5373484)
        d = ct.from_jdn(jdn_in)
        assert ct.to_jdn(d) == jdn_in


def test_known_jdn():
    assert ct.to_jdn(date(2000, 1, 1)) == 2451545
    assert ct.jdn_to_gregorian(ETHIOPIAN_EPOCH_JDN) == GregorianDate(8, 8, 27)


def test_epoch():
    assert ethiopian_to_jdn(1, 1, 1) == ETHIOPIAN_EPOCH_JDN
    assert caleth.ethiopian_to_gregorian(EthiopianDate(1, 1, 1)) == GregorianDate(8, 8, 27)
    assert caleth.gregorian_to_ethiopian(EPOCH_DATE) == EthiopianDate(1, 1, 1)


@pytest.mark.parametrize(
    "eth, greg",
    [
        (EthiopianDate(2016, 1, 1), GregorianDate(2023, 9, 12)),
        (EthiopianDate(2015, 13, 6), GregorianDate(2023, 9, 11)),
        (EthiopianDate(2016, 13, 5), GregorianDate(2024, 9, 10)),
        (EthiopianDate(2017, 1, 1), GregorianDate(2024, 9, 11)),
        (EthiopianDate(2017, 4, 29), GregorianDate(2025, 1, 7)),   # Genna
        (EthiopianDate(2017, 5, 11), GregorianDate(2025, 1, 19)),  # Timket
        (EthiopianDate(1992, 4, 22), GregorianDate(2000, 1, 1)),
    ],
)
def test_pinned_pairs(eth, greg):
    assert caleth.ethiopian_to_gregorian(eth) == greg
    assert caleth.gregorian_to_ethiopian(greg) == eth
    assert caleth.gregorian_to_ethiopian(greg.to_date()) == eth


def test_enkutatash_2017_regression():
    assert caleth.gregorian_to_ethiopian(GregorianDate(2024, 9, 11)) == EthiopianDate(2017, 1, 1)


def test_new_year_follows_leap_year():
    # Meskerem 1 falls on Sep 12 after an Ethiopian leap year, Sep 11 otherwise (1900-2099)
    for year in range(1894, 2092):
        ny = caleth.ethiopian_new_year(year)
        assert ny.month == 9
        assert ny.day == (12 if caleth.is_ethiopian_leap_year(year - 1) else 11)


def test_continuity():
    one_day = timedelta(days=1)
    for first_year, last_year in [(1, 40), (1990, 2030)]:
        greg = caleth.ethiopian_to_date(EthiopianDate(first_year, 1, 1))
        for year in range(first_year, last_year + 1):
            for month in range(1, 14):
                for day in range(1, days_in_ethiopian_month(year, month) + 1):
                    e = EthiopianDate(year, month, day)
                    assert caleth.ethiopian_to_date(e) == greg
                    assert caleth.date_to_ethiopian(greg) == e
                    greg += one_day


def test_roundtrip_ethiopian_gregorian_ethiopian():
    random.seed(7)
    for _ in range(20000):
        year = random.randint(1, 2100)
        month = random.randint(1, 13)
        day = random.randint(1, days_in_ethiopian_month(year, month))
        e = EthiopianDate(year, month, day)
        assert caleth.gregorian_to_ethiopian(caleth.ethiopian_to_gregorian(e)) == e


def test_roundtrip_gregorian_ethiopian_gregorian():
    random.seed(11)
    span = (date(9999, 12, 31) - EPOCH_DATE).days
    for _ in range(20000):
        d = EPOCH_DATE + timedelta(days=random.randint(0, span))
        assert caleth.ethiopian_to_date(caleth.gregorian_to_ethiopian(d)) == d


def test_leap_cycle_boundaries():
    # last day of each year, then first day of the next, across several 4-year cycles
    for year in range(1, 60):
        last = EthiopianDate(year, 13, days_in_ethiopian_month(year, 13))
        jdn = ethiopian_to_jdn(last.year, last.month, last.day)
        assert jdn_to_ethiopian(jdn) == last
        assert jdn_to_ethiopian(jdn + 1) == EthiopianDate(year + 1, 1, 1)


def test_day_of_year():
    assert day_of_year(EthiopianDate(2017, 1, 1)) == 1
    assert day_of_year(EthiopianDate(2017, 13, 5)) == 365
    assert day_of_year(EthiopianDate(2015, 13, 6)) == 366


def test_datetime_input_drops_time():
    from datetime import datetime

    assert caleth.gregorian_to_ethiopian(datetime(2024, 9, 11, 23, 59)) == EthiopianDate(2017, 1, 1)


@pytest.mark.parametrize(
    "bad, exc",
    [
        (EthiopianDate(2016, 13, 6), caleth.InvalidDateError),
        (EthiopianDate(2016, 1, 31), caleth.InvalidDateError),
        (EthiopianDate(2016, 1, 0), caleth.InvalidDateError),
        (EthiopianDate(0, 1, 1), caleth.InvalidDateError),
        (EthiopianDate(2016, 14, 1), caleth.InvalidMonthError),
        (EthiopianDate(2016, 0, 1), caleth.InvalidMonthError),
    ],
)
def test_invalid_ethiopian_rejected(bad, exc):
    with pytest.raises(exc):
        caleth.ethiopian_to_gregorian(bad)


def test_invalid_gregorian_rejected():
    with pytest.raises(caleth.InvalidDateError):
        caleth.gregorian_to_ethiopian(GregorianDate(2023, 2, 29))
    with pytest.raises(caleth.InvalidMonthError):
        caleth.gregorian_to_ethiopian(GregorianDate(2023, 13, 1))
    # the day before the epoch has no Ethiopian year
    with pytest.raises(caleth.InvalidDateError):
        caleth.gregorian_to_ethiopian(EPOCH_DATE - timedelta(days=1))


def test_errors_are_value_errors():
    with pytest.raises(ValueError):
        caleth.ethiopian_to_gregorian(EthiopianDate(2016, 13, 6))


def test_year_range_and_months():
    assert caleth.ethiopian_year_range(2024, 2024) == (2016, 2017)
    assert caleth.ethiopian_year_range(2000, 2030) == (1992, 2023)

    months = caleth.ethiopian_year_months(2015)
    assert len(months) == 13
    assert months[0].name == "Meskerem"
    assert months[0].amharic == "መስከረም"
    assert months[12].name == "Pagume"
    assert months[12].days == 6
    assert caleth.ethiopian_year_months(2016)[12].days == 5
    assert sum(m.days for m in months) == 366


def test_gregorian_validity():
    from caleth.validation import is_valid_gregorian_date

    assert is_valid_gregorian_date(GregorianDate(2024, 2, 29))
    assert not is_valid_gregorian_date(GregorianDate(2023, 2, 29))
    assert not is_valid_gregorian_date(GregorianDate(2023, 13, 1))
    assert not is_valid_gregorian_date(GregorianDate(2023, 1, 0))
