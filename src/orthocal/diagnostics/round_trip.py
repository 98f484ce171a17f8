from __future__ import annotations

import argparse
import random

from orthocal.core.date import Date
from orthocal.core.time import MIN_CJDN, from_cjdn, to_cjdn, weekday
from orthocal.core.types import FORMATS


def roundtrip_test(N: int, lo: int, hi: int, seed: int, *, max_failures: int) -> int:
    """cjdn -> (y, m, d) -> cjdn in every calendar, plus Date consistency."""
    random.seed(seed)
    failures = 0

    for _ in range(N):
        j = random.randint(lo, hi)
        d = Date()
        if not d.reset_cjdn(j):
            continue
        for f in FORMATS:
            y, m, day = from_cjdn(j, f)
            back = to_cjdn(y, m, day, f)
            same = Date(y, m, day, f)
            if back != j or same != d or d.ymd(f) != (y, m, day):
                failures += 1
                print("\nFAIL")
                print("cjdn:", j, "format:", f)
                print("ymd:", (y, m, day), "back:", back)
                print("date:", repr(d), repr(same))
                if failures >= max_failures:
                    return failures
        if d.weekday() != weekday(j) or d.inc_by_days(7).weekday() != d.weekday():
            failures += 1
            print("\nFAIL (weekday)", j)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests between day numbers and J/M/G dates.")
    p.add_argument("--N", type=int, default=20000, help="Trials.")
    p.add_argument("--start", type=int, default=MIN_CJDN, help="Lowest day number.")
    p.add_argument("--end", type=int, default=5373484, help="Highest day number.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures.")
    args = p.parse_args(argv)

    if args.end < args.start:
        raise SystemExit("--end must be >= --start")
    if args.start < MIN_CJDN:
        raise SystemExit(f"--start must be >= {MIN_CJDN}")

    total_fail = roundtrip_test(args.N, args.start, args.end, args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
