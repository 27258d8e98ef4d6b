from __future__ import annotations

import argparse
import random
from datetime import date, timedelta

import caleth
from caleth.core.rules import days_in_ethiopian_month


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def random_ethiopian(y0: int, y1: int) -> caleth.EthiopianDate:
    year = random.randint(y0, y1)
    month = random.randint(1, 13)
    day = random.randint(1, days_in_ethiopian_month(year, month))
    return caleth.EthiopianDate(year, month, day)


def roundtrip_test(
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    random.seed(seed)
    failures = 0
    y0 = caleth.date_to_ethiopian(start).year
    y1 = max(y0, caleth.date_to_ethiopian(end).year - 1)

    for _ in range(N):
        d0 = random_date(start, end)
        e = caleth.gregorian_to_ethiopian(d0)
        back = caleth.ethiopian_to_date(e)
        if back != d0:
            failures += 1
            print("\nFAIL (gregorian -> ethiopian -> gregorian)")
            print("d0:", d0)
            print("eth:", e)
            print("back:", back)
            if failures >= max_failures:
                return failures

        e0 = random_ethiopian(y0, y1)
        g = caleth.ethiopian_to_gregorian(e0)
        e_back = caleth.gregorian_to_ethiopian(g)
        if e_back != e0:
            failures += 1
            print("\nFAIL (ethiopian -> gregorian -> ethiopian)")
            print("e0:", e0)
            print("greg:", g)
            print("back:", e_back)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests in both conversion directions.")
    p.add_argument("--N", type=int, default=2000, help="Trials per direction.")
    p.add_argument("--start", type=str, default="1600-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2400-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    failures = roundtrip_test(N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)

    if failures == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {failures}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
