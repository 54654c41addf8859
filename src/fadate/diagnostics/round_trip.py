from __future__ import annotations

import argparse
import random
from typing import List, Optional, Tuple

import fadate


def exhaustive(start_year: int, end_year: int, *, max_failures: int) -> List[Tuple[int, int, int]]:
    """Every Persian day in [start_year, end_year] must survive Persian -> Gregorian -> Persian."""
    failures = []
    for y in range(start_year, end_year + 1):
        for m in range(1, 13):
            for d in range(1, fadate.days_in_month(y, m, "persian") + 1):
                back = fadate.to_persian(*fadate.to_gregorian(y, m, d))
                if back != (y, m, d):
                    failures.append((y, m, d))
                    print(f"FAIL {y:04d}/{m:02d}/{d:02d} -> {back}")
                    if len(failures) >= max_failures:
                        return failures
    return failures


def sampled(N: int, start_year: int, end_year: int, seed: int, *, max_failures: int) -> List[Tuple[int, int, int]]:
    """Random Gregorian days must survive Gregorian -> Persian -> Gregorian."""
    random.seed(seed)
    eng = fadate.get_calendar("persian")
    lo = eng.to_jdn(start_year, 1, 1)
    hi = eng.to_jdn(end_year, 12, eng.days_in_month(end_year, 12))
    greg = fadate.get_calendar("gregorian")

    failures = []
    for _ in range(N):
        g = greg.from_jdn(random.randint(lo, hi))
        back = fadate.to_gregorian(*fadate.to_persian(*g))
        if back != g:
            failures.append(g)
            print(f"FAIL {g} -> {back}")
            if len(failures) >= max_failures:
                break
    return failures


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Round-trip test: Persian <-> Gregorian.")
    p.add_argument("--start-year", type=int, default=1, help="first Persian year")
    p.add_argument("--end-year", type=int, default=3000, help="last Persian year")
    p.add_argument("--N", type=int, default=0, help="random samples instead of an exhaustive sweep")
    p.add_argument("--seed", type=int, default=1)
    p.add_argument("--max-failures", type=int, default=20)
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")
    eng = fadate.get_calendar("persian")
    if args.start_year < eng.min_year or args.end_year > eng.max_year:
        raise SystemExit(f"years must lie in {eng.min_year}..{eng.max_year}")

    if args.N > 0:
        failures = sampled(args.N, args.start_year, args.end_year, args.seed, max_failures=args.max_failures)
        checked = f"{args.N} random days"
    else:
        failures = exhaustive(args.start_year, args.end_year, max_failures=args.max_failures)
        checked = f"Persian years {args.start_year}..{args.end_year}"

    print(f"{checked}: {'OK' if not failures else f'{len(failures)} failure(s)'}")
    return 0 if not failures else 2


if __name__ == "__main__":
    raise SystemExit(main())
