from __future__ import annotations

import argparse
from typing import List, Optional

from orthocal.core.types import FORMATS
from orthocal.engines.pascha import pascha_date


def row(year: int) -> str:
    d = pascha_date(year)
    cells = []
    for f in FORMATS:
        y, m, day = d.ymd(f)
        cells.append(f"{y:5d}-{m:02d}-{day:02d}")
    return f"{year:5d}  " + "  ".join(cells) + f"  jdn={d.cjdn()}"


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Pascha of each Julian year in the Julian, Milankovic and Gregorian calendars.")
    p.add_argument("--start", type=int, default=2000, help="first Julian year")
    p.add_argument("--end", type=int, default=2030, help="last Julian year (inclusive)")
    args = p.parse_args(argv)

    if args.end < args.start:
        raise SystemExit("--end must be >= --start")

    print(" year  " + "  ".join(f"{f:>11s}" for f in FORMATS))
    for y in range(args.start, args.end + 1):
        print(row(y))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
