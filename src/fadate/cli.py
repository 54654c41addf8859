from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from fadate.core.errors import FADateError

_DATE_RE = re.compile(r"^\d{1,4}/\d{1,2}/\d{1,2}$")


def _parse_ymd(s: str) -> tuple[int, int, int]:
    if not _DATE_RE.match(s):
        raise SystemExit(f"expected Y/M/D, got {s!r}")
    y, m, d = map(int, s.split("/"))
    return y, m, d


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


def cmd_convert(argv: list[str]) -> int:
    import fadate

    p = argparse.ArgumentParser(prog="fadate convert", description="Convert a date between calendars")
    p.add_argument("date", help="Y/M/D")
    p.add_argument("--from", dest="source", default="persian")
    p.add_argument("--to", dest="target", default="gregorian")
    args = p.parse_args(argv)

    y, m, d = fadate.convert(*_parse_ymd(args.date), source=args.source, target=args.target)
    print(f"{y:04d}/{m:02d}/{d:02d}")
    return 0


def cmd_parse(argv: list[str]) -> int:
    import fadate

    p = argparse.ArgumentParser(prog="fadate parse", description="Parse date text and print it canonically")
    p.add_argument("text")
    p.add_argument("--calendar", default="persian")
    p.add_argument("--format", default="short_date", help="short_date|date_short_time|full_date_time")
    p.add_argument("--list", action="store_true", help="parse a separator-joined list")
    p.add_argument("--separator", default=";")
    args = p.parse_args(argv)

    if args.list:
        values = fadate.parse_list(args.text, args.separator, args.calendar)
        for v in values:
            print(fadate.format_value(v, args.format, args.calendar), v.to_datetime().isoformat(sep=" "))
        return 0

    value = fadate.parse(args.text, args.calendar, required=True)
    print(fadate.format_value(value, args.format, args.calendar), value.to_datetime().isoformat(sep=" "))
    return 0


def cmd_normalize(argv: list[str]) -> int:
    import fadate

    p = argparse.ArgumentParser(prog="fadate normalize", description="Repair hand-typed date text")
    p.add_argument("text")
    p.add_argument("--calendar", default="persian")
    args = p.parse_args(argv)

    print(fadate.normalize(args.text, args.calendar))
    return 0


def cmd_step(argv: list[str]) -> int:
    import fadate

    p = argparse.ArgumentParser(prog="fadate step", description="Step the field under a cursor offset")
    p.add_argument("text")
    p.add_argument("--offset", type=int, default=0, help="cursor offset in the canonical text")
    p.add_argument("--delta", type=int, default=1)
    p.add_argument("--calendar", default="persian")
    p.add_argument("--format", default="short_date", help="short_date|date_short_time")
    args = p.parse_args(argv)

    value = fadate.parse(args.text, args.calendar, required=True)
    field = fadate.field_at(args.offset, args.format)
    res = fadate.step(value, field, args.delta, kind=args.format, calendar=args.calendar)
    sel = res.selection
    print(res.text)
    print(" " * sel.start + "^" * sel.length, f"({sel.field})")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `fadate Y/M/D ...` converts Persian -> Gregorian
    if argv and _DATE_RE.match(argv[0]):
        return cmd_convert(argv)

    p = argparse.ArgumentParser(prog="fadate", description="Persian/Gregorian date text toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("convert", help="Convert a date between calendars")
    sub.add_parser("parse", help="Parse date text and print it canonically")
    sub.add_parser("normalize", help="Repair hand-typed date text")
    sub.add_parser("step", help="Step the field under a cursor offset")
    sub.add_parser("month", help="Print a month grid with paired labels (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-years"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "convert": cmd_convert,
        "parse": cmd_parse,
        "normalize": cmd_normalize,
        "step": cmd_step,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "month":
            return _run_module_main("fadate.diagnostics.pretty_month", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "fadate.diagnostics.round_trip",
                "leap-years": "fadate.diagnostics.leap_years",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except (FADateError, KeyError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
