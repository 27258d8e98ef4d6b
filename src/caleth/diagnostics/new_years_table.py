from __future__ import annotations

import argparse

import caleth
from caleth.core.rules import is_ethiopian_leap_year


def mmdd(d: caleth.GregorianDate) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def iso(d: caleth.GregorianDate) -> str:
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian date of Enkutatash (Meskerem 1) for a range of Ethiopian years."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="iso",
        help="Display format of the Gregorian date (default: iso).",
    )
    args = p.parse_args(argv)

    fmt = mmdd if args.dates == "mmdd" else iso

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")
    if Y0 < 1:
        raise SystemExit("--from-year must be >= 1")

    headers = ["Year", "Meskerem 1", "Pagume", "Leap"]
    colw = [6, 12, 6, 4]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    shifted: list[tuple[int, caleth.GregorianDate]] = []
    for Y in range(Y0, Y1 + 1):
        ny = caleth.ethiopian_new_year(Y)
        pagume = caleth.get_ethiopian_days_in_month(Y, 13)
        leap = "yes" if is_ethiopian_leap_year(Y) else ""
        row = [str(Y), fmt(ny), str(pagume), leap]
        print("  ".join(c.ljust(w) for c, w in zip(row, colw)))
        if ny.day != 11:
            shifted.append((Y, ny))

    print("\nNew Years not on September 11:")
    if not shifted:
        print("(none)")
        return 0
    for Y, ny in shifted:
        print(f"{iso(ny)}  (Y={Y})")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
