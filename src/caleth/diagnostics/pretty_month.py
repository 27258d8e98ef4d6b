from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import caleth
from caleth.formatting import ethiopian_month_name


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def build_weeks(first: date, days: list[tuple[str, str]]) -> list[list[tuple[str, str]]]:
    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = first.weekday()  # Monday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def ethiopian_month_calendar(Y: int, M: int, script: str = "latin") -> None:
    n_days = caleth.get_ethiopian_days_in_month(Y, M)
    d0 = caleth.ethiopian_to_date(caleth.EthiopianDate(Y, M, 1))
    d1 = d0 + timedelta(days=n_days - 1)

    days = []
    d = d0
    for day in range(1, n_days + 1):
        days.append((f"{day:2d}", f"{d.month:02d}-{d.day:02d}"))
        d += timedelta(days=1)

    title = f"Ethiopian month  {ethiopian_month_name(M, script)} {Y}  (M={M})   ({d0} .. {d1})"
    print_grid(title, build_weeks(d0, days))


def gregorian_month_calendar(gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last_day = pycal.monthrange(gy, gm)[1]

    days = []
    d = first
    for _ in range(last_day):
        e = caleth.date_to_ethiopian(d)
        days.append((f"{d.day:2d}", f"{e.month:02d}-{e.day:02d}"))
        d += timedelta(days=1)

    title = f"Gregorian month  {gy}-{gm:02d}  (Ethiopian MM-DD below)"
    print_grid(title, build_weeks(first, days))

def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print an Ethiopian-month calendar and/or a Gregorian-month calendar with paired labels."
    )
    p.add_argument("--ethiopian", nargs=2, type=int, metavar=("Y", "M"),
                   help="Ethiopian month to print: Y M (e.g. 2017 13)")
    p.add_argument("--script", choices=("latin", "geez"), default="latin",
                   help="Script for the Ethiopian month name in the title.")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2025 9)")

    args = p.parse_args(argv)

    if not args.ethiopian and not args.greg:
        # sensible default demo: Pagume and the start of the year
        ethiopian_month_calendar(2017, 13, script=args.script)
        gregorian_month_calendar(2025, 9)
        return 0

    if args.ethiopian:
        Y, M = args.ethiopian
        ethiopian_month_calendar(Y, M, script=args.script)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(gy, gm)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
