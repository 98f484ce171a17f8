#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from orthocal.core.date import Date
from orthocal.engines.pascha import pascha_date


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "orthocal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "orthocal[diagnostics]"') from e


def days_since_equinox(year: int) -> int:
    """Days from Gregorian March 21 to Pascha, March 21 = 0."""
    d = pascha_date(year)
    return d.cjdn() - Date(d.year("G"), 3, 21, "G").cjdn()


def build_series(np, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    years = np.arange(start_year, end_year + 1, dtype=int)
    y = np.empty_like(years, dtype=float)
    for i, Y in enumerate(years):
        y[i] = float(days_since_equinox(int(Y)))
    return years, y


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of Orthodox Pascha against the Gregorian equinox date.")
    p.add_argument("--start-year", type=int, default=1583)
    p.add_argument("--end-year", type=int, default=2400)
    p.add_argument("--outbase", default="pascha_scatter", help="Output base name (writes .png)")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    x, y = build_series(np, args.start_year, args.end_year)

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.scatter(x, y, s=10, c="tab:blue", linewidths=0.0, alpha=0.5, label="Pascha")

    # linear drift of the Julian computus against the Gregorian calendar
    k, b = np.polyfit(x.astype(float), y, 1)
    ax.plot(x, k * x + b, color="tab:red", linewidth=1.5, label=f"trend {k * 100:.2f} days/century")

    ax.set_xlabel("Julian year")
    ax.set_ylabel("Days after March 21 (Gregorian)")
    ax.set_title("Orthodox Pascha drift")
    ax.legend(loc="upper left", frameon=False)

    outbase = args.outbase
    fig.savefig(outbase + ".png", dpi=300)
    print(f"Saved: {outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
