from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from bsdual.core.errors import BsdualError


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


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


def _print_dual(d) -> None:
    import bsdual

    print(f"BS {bsdual.format_date(d, 'np', 'YYYY-MM-DD')}  ({d.bs_year}-{d.bs_month + 1:02d}-{d.bs_day:02d})")
    print(f"AD {bsdual.format_date(d, 'en', 'YYYY-MM-DD')}")


def cmd_convert(argv: list[str]) -> int:
    import bsdual
    from bsdual.core.time import parse_ymd
    from bsdual.numerals import to_ascii_digits

    p = argparse.ArgumentParser(prog="bsdual convert", description="BS <-> AD day conversion")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--from", dest="calendar", choices=["bs", "ad"], default="bs")
    p.add_argument("--oracle", default=bsdual.DEFAULT_ORACLE)
    args = p.parse_args(argv)

    y, m, d = parse_ymd(to_ascii_digits(args.date))
    limit = bsdual.days_in_month(y, m, calendar=args.calendar, oracle=args.oracle)
    if d > limit:
        raise bsdual.InvalidDateString(f"Day {d} out of range 1..{limit} in {args.date!r}")
    _print_dual(bsdual.convert(y, m, d, calendar=args.calendar, oracle=args.oracle))
    return 0


def cmd_format(argv: list[str]) -> int:
    import bsdual

    p = argparse.ArgumentParser(prog="bsdual format", description="Render a date in both languages")
    p.add_argument("date", help="YYYY-MM-DD in the primary calendar of --lang")
    p.add_argument("--lang", choices=["np", "en"], default="np")
    p.add_argument("--template", choices=list(bsdual.TEMPLATES), default=bsdual.DEFAULT_TEMPLATE)
    p.add_argument("--oracle", default=bsdual.DEFAULT_ORACLE)
    args = p.parse_args(argv)

    cursor = bsdual.init_cursor(args.date, language=args.lang, oracle=args.oracle)
    print(f"english: {bsdual.format_date(cursor.selected, 'en', args.template)}")
    print(f"nepali:  {bsdual.format_date(cursor.selected, 'np', args.template)}")
    return 0


def cmd_today(argv: list[str]) -> int:
    import bsdual

    p = argparse.ArgumentParser(prog="bsdual today", description="Today in both calendars")
    p.add_argument("--oracle", default=bsdual.DEFAULT_ORACLE)
    args = p.parse_args(argv)

    _print_dual(bsdual.today(oracle=args.oracle))
    return 0


def _dispatch(argv: list[str]) -> int:
    # Backward compatibility: `bsdual YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_convert(argv)

    p = argparse.ArgumentParser(prog="bsdual", description="Bikram Sambat / Gregorian date toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("convert", help="BS <-> AD day conversion")
    sub.add_parser("format", help="Render a date in one of the fixed templates")
    sub.add_parser("month", help="Print header labels and the day grid of a month")
    sub.add_parser("today", help="Today in both calendars")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["round-trip"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    if args.cmd == "convert":
        return cmd_convert(rest)

    if args.cmd == "format":
        return cmd_format(rest)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "month":
        return _run_module_main("bsdual.diagnostics.pretty_month", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "bsdual.diagnostics.round_trip",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    try:
        return _dispatch(argv)
    except BsdualError as e:
        print(f"bsdual: error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
