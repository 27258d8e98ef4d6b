# tests/test_cli.py

import pytest

from caleth.cli import main


def test_day(capsys):
    assert main(["day", "2024-09-11"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "1 Meskerem 2017"
    assert "jdn       = 2460565" in out


def test_day_shorthand_with_attributes(capsys):
    assert main(["2023-09-11", "--style", "short", "--attr", "weekday"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines()[0] == "6/13/2015"
    assert "weekday_name = Segno" in out


def test_day_rejects_bad_date():
    with pytest.raises(SystemExit):
        main(["day", "2023-02-29"])


def test_to_greg(capsys):
    assert main(["to-greg", "1", "Meskerem", "2017"]) == 0
    assert main(["to-greg", "29/4/2017"]) == 0
    assert capsys.readouterr().out.split() == ["2024-09-11", "2025-01-07"]


def test_to_greg_invalid():
    with pytest.raises(SystemExit):
        main(["to-greg", "6/13/2016"])
    with pytest.raises(SystemExit):
        main(["to-greg", "yesterday"])


def test_format(capsys, clean_settings):
    assert main(["format", "2024-09-11", "--calendar", "ethiopian", "--style", "amharic"]) == 0
    assert main(["format", "2024-09-11"]) == 0
    assert capsys.readouterr().out.splitlines() == ["1 መስከረም 2017", "11/9/2024"]


def test_parse(capsys):
    assert main(["parse", "6", "ጳጉሜ", "2015"]) == 0
    assert main(["parse", "31/13/2016"]) == 1
    assert main(["parse", "nonsense"]) == 1
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "year=2015 month=13 day=6 valid=True"
    assert out[1] == "year=2016 month=13 day=31 valid=False"
    assert out[2].startswith("no match")


def test_today(capsys, fixed_clock, clean_settings):
    assert main(["today", "--calendar", "ethiopian"]) == 0
    assert capsys.readouterr().out.strip() == "1 Meskerem 2017"


def test_new_years(capsys):
    assert main(["new-years", "--from-year", "2015", "--to-year", "2017"]) == 0
    out = capsys.readouterr().out
    assert "2023-09-12" in out
    assert "2024-09-11" in out
    assert "(Y=2016)" in out


def test_pretty_month(capsys):
    assert main(["pretty-month", "--ethiopian", "2015", "13"]) == 0
    out = capsys.readouterr().out
    assert "Pagume 2015" in out
    assert "09-11" in out


def test_round_trip_diag(capsys):
    assert main(["diag", "round-trip", "--N", "300"]) == 0
    assert "All round-trip tests passed." in capsys.readouterr().out
