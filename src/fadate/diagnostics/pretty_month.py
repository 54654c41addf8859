from __future__ import annotations

import argparse

import fadate
from fadate.core.types import DateValue

# Persian week starts on Saturday
DOW_HEADER = "Sa     Su     Mo     Tu     We     Th     Fr"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(DOW_HEADER)
    print("-" * len(DOW_HEADER))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def month_grid(calendar: str, other: str, Y: int, M: int) -> list[list[tuple[str, str]]]:
    eng = fadate.get_calendar(calendar)
    first = DateValue(eng.to_jdn(Y, M, 1))
    n = eng.days_in_month(Y, M)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = (first.to_date().weekday() + 2) % 7  # Saturday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for i in range(n):
        o = fadate.fields(first.add_days(i), other)
        wk.append(cell(f"{i + 1:2d}", f"{o.month:02d}-{o.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a month of one calendar with the other calendar's month-day beneath each day."
    )
    p.add_argument("year", type=int, nargs="?")
    p.add_argument("month", type=int, nargs="?")
    p.add_argument("--calendar", default="persian", help="calendar of the month to print (default: persian)")
    p.add_argument("--other", default=None, help="calendar for the second row (default: the other one)")
    args = p.parse_args(argv)

    other = args.other or ("gregorian" if args.calendar == "persian" else "persian")
    if args.year is None or args.month is None:
        t = fadate.today(args.calendar)
        Y, M = t.year, t.month
    else:
        Y, M = args.year, args.month

    title = f"{args.calendar} {Y:04d}/{M:02d}  (second row: {other} MM-DD)"
    print_grid(title, month_grid(args.calendar, other, Y, M))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
