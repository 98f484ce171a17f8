from __future__ import annotations

import argparse

import orthocal
from orthocal.core.engine import YearSchedule
from orthocal.core.time import is_leap_year, month_length
from orthocal.format import MONTHS_NOMINATIVE
from orthocal.properties import tags as T


def dow_header() -> str:
    return "Su     Mo     Tu     We     Th     Fr     Sa"


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


def _mark(props: tuple[int, ...]) -> str:
    if T.vel_prazd in props:
        return "!"
    if T.dvana10_per_prazd in props or T.dvana10_nep_prazd in props:
        return "*"
    return ""


def julian_month_calendar(oy: YearSchedule, m: int) -> None:
    """Top line: day and feast mark; bottom line: glas/n50."""
    last = month_length(m, is_leap_year(oy.year))

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    for _ in range(oy.weekday(m, 1)):  # Sunday=0
        wk.append(cell("", ""))
    for d in range(1, last + 1):
        top = f"{d:2d}{_mark(oy.properties(m, d))}"
        bot = f"{oy.glas(m, d)}/{oy.n50(m, d)}"
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    title = f"{MONTHS_NOMINATIVE[m - 1]} {oy.year} (Julian)  winter={oy.winter_indent} autumn={oy.spring_indent}"
    print_grid(title, weeks)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Julian month grids with glas/n50 per day (* twelve great feasts, ! other great feasts)."
    )
    p.add_argument("year", nargs="?", default="2024", help="Julian year (default: 2024)")
    p.add_argument("--month", type=int, action="append", default=[],
                   help="month 1..12 (repeatable; default: all)")
    args = p.parse_args(argv)

    oy = orthocal.year(args.year)
    for m in args.month or range(1, 13):
        if not (1 <= m <= 12):
            raise SystemExit(f"month must be 1..12, got {m}")
        julian_month_calendar(oy, m)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
