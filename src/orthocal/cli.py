from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import sys

from .core.date import DEFAULT_FORMAT


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _fmt_reading(r) -> str:
    if not r:
        return "-"
    out = f"{r.book_name} {r.zach}"
    if r.comment:
        out += f" ({r.comment})"
    return out


def cmd_pascha(argv: list[str]) -> int:
    import orthocal

    p = argparse.ArgumentParser(prog="orthocal pascha", description="Date of Pascha for a year")
    p.add_argument("year", help="Julian year (or year of --fmt)")
    p.add_argument("--fmt", choices=["J", "M", "G"], default="J", help="calendar of the year and the output")
    args = p.parse_args(argv)

    d = orthocal.pascha(args.year, args.fmt)
    if d is None:
        print(f"no Pascha in {args.fmt} year {args.year}")
        return 1
    y, m, day = d.ymd(args.fmt)
    print(f"{y:04d}-{m:02d}-{day:02d} ({args.fmt})")
    return 0


def cmd_day(argv: list[str]) -> int:
    import orthocal
    from orthocal.properties.tags import tag_name

    p = argparse.ArgumentParser(prog="orthocal day", description="Liturgical information for one day")
    p.add_argument("year")
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--fmt", choices=["J", "M", "G"], default="J", help="calendar of the given date")
    p.add_argument("--date-fmt", default=DEFAULT_FORMAT, help="format of the date in the description")
    p.add_argument("--tags", action="store_true", help="also print property tag names")
    args = p.parse_args(argv)

    d = orthocal.Date(args.year, args.month, args.day, args.fmt)
    info = orthocal.day_info(d)

    print(orthocal.describe(d, args.date_fmt))
    print(f"  weekday : {info.weekday}")
    print(f"  glas    : {info.glas}")
    print(f"  n50     : {info.n50}")
    print(f"  apostol : {_fmt_reading(info.apostol)}")
    print(f"  gospel  : {_fmt_reading(info.gospel)}")
    if info.resurrect_gospel:
        print(f"  matins  : {_fmt_reading(info.resurrect_gospel)}")
    if args.tags:
        print("  tags    : " + " ".join(tag_name(t) or str(t) for t in info.properties))
    return 0


def cmd_find(argv: list[str]) -> int:
    import orthocal

    p = argparse.ArgumentParser(prog="orthocal find", description="Dates carrying a property tag")
    p.add_argument("year")
    p.add_argument("tag", help="tag constant name (e.g. pasha, m12d25) or number")
    p.add_argument("--fmt", choices=["J", "M", "G"], default="J")
    p.add_argument("--all", action="store_true", help="every date, not just the first")
    args = p.parse_args(argv)

    if args.all:
        found = orthocal.find_all(args.year, args.tag, args.fmt)
    else:
        d = orthocal.find(args.year, args.tag, args.fmt)
        found = [d] if d is not None else []

    if not found:
        print("not found")
        return 1
    for d in found:
        y, m, day = d.ymd(args.fmt)
        print(f"{y:04d}-{m:02d}-{day:02d}")
    return 0


def cmd_year(argv: list[str]) -> int:
    import orthocal
    from orthocal.engines.orthyear import year_days

    p = argparse.ArgumentParser(prog="orthocal year", description="Every day of a Julian year with its description")
    p.add_argument("year", help="Julian year")
    p.add_argument("--fmt", choices=["J", "M", "G"], default="J", help="calendar of the printed dates")
    args = p.parse_args(argv)

    cal = orthocal.get_calendar()
    oy = orthocal.year(args.year)
    date_fmt = f"%{args.fmt}D.%{args.fmt}Q.%{args.fmt}Y %Wd"
    print(repr(oy))
    print(f"apostol fast: {cal.apostol_post_length(oy.year)} days")
    for m, d in year_days(oy.year):
        if not orthocal.Date.check(oy.year, m, d):
            continue
        print(cal.get_description_for_date(orthocal.Date(oy.year, m, d), date_fmt))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="orthocal", description="Orthodox liturgical calendar CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("pascha", help="Date of Pascha")
    sub.add_parser("day", help="Glas, n50, readings and feasts of a day")
    sub.add_parser("find", help="Find dates by property tag")
    sub.add_parser("year", help="Every day of a Julian year with its description")

    # diagnostics
    sub.add_parser("pretty-year", help="Print month grids with glas/n50 (diagnostics)")
    sub.add_parser("pascha-table", help="Print Pascha in all three calendars (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["pascha-scatter", "round-trip"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    if args.cmd == "pascha":
        return cmd_pascha(rest)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "find":
        return cmd_find(rest)

    if args.cmd == "year":
        return cmd_year(rest)

    if args.cmd == "pretty-year":
        return _run_module_main("orthocal.diagnostics.pretty_year", rest)

    if args.cmd == "pascha-table":
        return _run_module_main("orthocal.diagnostics.pascha_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "pascha-scatter": "orthocal.diagnostics.pascha_scatter",
            "round-trip": "orthocal.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
