#!/usr/bin/env python3
"""
Scatter plot of the Gregorian date of Enkutatash (Meskerem 1) over the
centuries. The Ethiopian leap rule is Julian, so the New Year drifts
against the Gregorian calendar by three days every 400 years.
"""
from __future__ import annotations

from datetime import date
from typing import List, Optional, Tuple

import argparse

import caleth


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "caleth[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "caleth[diagnostics]"') from e


def days_since_sep_1(d: date) -> int:
    """Sep 1 = 1."""
    return (d - date(d.year, 9, 1)).days + 1


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray", "np.ndarray"]:
    """(Gregorian year, days since Sep 1, Ethiopian leap flag) per Ethiopian year."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    x = np.empty_like(years, dtype=int)
    y = np.empty_like(years, dtype=float)
    leap_before = np.zeros_like(years, dtype=bool)

    for i, Y in enumerate(years):
        ny = caleth.ethiopian_new_year(int(Y)).to_date()
        x[i] = ny.year
        y[i] = float(days_since_sep_1(ny))
        leap_before[i] = caleth.is_ethiopian_leap_year(int(Y) - 1)

    return x, y, leap_before


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Enkutatash dates against the Gregorian calendar.")
    p.add_argument("--from-year", type=int, default=1500, help="First Ethiopian year.")
    p.add_argument("--to-year", type=int, default=2500, help="Last Ethiopian year.")
    p.add_argument("--outbase", default="enkutatash_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    np = _need_numpy()
    plt = _need_matplotlib()

    plt.rcParams.update({
        "font.size": 10,
        "axes.labelsize": 11,
        "axes.titlesize": 12,
        "legend.fontsize": 10,
        "axes.linewidth": 0.8,
    })

    x, y, leap_before = build_series(np, args.from_year, args.to_year)

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)

    ax.set_xlabel("Gregorian year")
    ax.set_ylabel("Day of September (Sep 1 = 1)")
    ax.set_title("Enkutatash (Meskerem 1) in the Gregorian calendar")

    ax.scatter(x[~leap_before], y[~leap_before], s=10, c="tab:blue", alpha=0.5, linewidths=0.0,
               label="after a common year")
    ax.scatter(x[leap_before], y[leap_before], s=14, marker="_", c="tab:red", linewidths=1.0,
               label="after a leap year")

    ax.legend(loc="upper left", frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=200)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
