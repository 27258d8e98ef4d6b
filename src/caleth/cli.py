from __future__ import annotations

import argparse
import logging
import sys
import re
import importlib
import inspect
from datetime import date


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

logger = logging.getLogger(__name__)


def _parse_ymd(s: str) -> date:
    from caleth.parsing import parse_iso_date

    d = parse_iso_date(s)
    if d is None:
        raise SystemExit(f"Not a valid YYYY-MM-DD date: {s!r}")
    return d


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


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def cmd_day(argv: list[str]) -> int:
    import caleth
    from caleth.attributes.registry import available_attributes

    p = argparse.ArgumentParser(prog="caleth day", description="Gregorian -> Ethiopian day label")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--style", choices=[s.value for s in caleth.DateStyle], default="long")
    p.add_argument("--attr", action="append", default=[],
                   help=f"attribute name (repeatable): {', '.join(available_attributes())}")
    args = p.parse_args(argv)

    d = _parse_ymd(args.date)
    try:
        info = caleth.day_info(d, attributes=tuple(args.attr))
    except caleth.InvalidDateError as e:
        raise SystemExit(str(e)) from None

    print(caleth.format_ethiopian_date(info.ethiopian, args.style))
    print(f"  ethiopian = {info.ethiopian.year}-{info.ethiopian.month:02d}-{info.ethiopian.day:02d}")
    print(f"  jdn       = {info.jdn}")
    for k, v in (info.attributes or {}).items():
        print(f"  {k} = {v}")
    return 0


def cmd_to_greg(argv: list[str]) -> int:
    import caleth

    p = argparse.ArgumentParser(prog="caleth to-greg", description="Ethiopian date -> Gregorian (ISO 8601)")
    p.add_argument("date", nargs="+", help='"D/M/YYYY" or "D MonthName YYYY" (Latin or Ge\'ez month name)')
    args = p.parse_args(argv)

    text = " ".join(args.date)
    e = caleth.parse_ethiopian_date(text)
    if e is None:
        raise SystemExit(f"Could not parse Ethiopian date: {text!r}")
    if not caleth.is_valid_ethiopian_date(e):
        raise SystemExit(f"Not a valid Ethiopian date: {text!r}")

    print(caleth.ethiopian_to_date(e).isoformat())
    return 0


def cmd_format(argv: list[str]) -> int:
    import caleth
    from caleth.settings import get_settings

    settings = get_settings()
    p = argparse.ArgumentParser(prog="caleth format", description="Format a Gregorian date in either calendar")
    p.add_argument("date", help="YYYY-MM-DD")
    p.add_argument("--calendar", choices=[c.value for c in caleth.CalendarType], default=settings.calendar_type.value)
    p.add_argument("--style", choices=[s.value for s in caleth.DateStyle], default=settings.style.value)
    args = p.parse_args(argv)

    try:
        print(caleth.format_date_by_calendar(_parse_ymd(args.date), args.calendar, args.style))
    except caleth.InvalidDateError as e:
        raise SystemExit(str(e)) from None
    return 0


def cmd_parse(argv: list[str]) -> int:
    import caleth

    p = argparse.ArgumentParser(prog="caleth parse", description="Parse an Ethiopian date string")
    p.add_argument("text", nargs="+")
    args = p.parse_args(argv)

    text = " ".join(args.text)
    e = caleth.parse_ethiopian_date(text)
    if e is None:
        print(f"no match: {text!r}")
        return 1
    valid = caleth.is_valid_ethiopian_date(e)
    print(f"year={e.year} month={e.month} day={e.day} valid={valid}")
    return 0 if valid else 1


def cmd_today(argv: list[str]) -> int:
    import caleth
    from caleth.settings import get_settings

    settings = get_settings()
    p = argparse.ArgumentParser(prog="caleth today", description="Print today's date")
    p.add_argument("--calendar", choices=[c.value for c in caleth.CalendarType], default=settings.calendar_type.value)
    p.add_argument("--style", choices=[s.value for s in caleth.DateStyle], default="long")
    args = p.parse_args(argv)

    print(caleth.get_today_formatted(args.calendar, args.style))
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `caleth YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="caleth", description="Ethiopian/Gregorian calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> Ethiopian day label")
    sub.add_parser("to-greg", help="Ethiopian -> Gregorian date")
    sub.add_parser("format", help="Format a date in the Ethiopian or Gregorian calendar")
    sub.add_parser("parse", help="Parse an Ethiopian date string")
    sub.add_parser("today", help="Print today's date")

    # diagnostics
    sub.add_parser("pretty-month", help="Print Ethiopian/Gregorian month grids (diagnostics)")
    sub.add_parser("new-years", help="Print Enkutatash table (diagnostics)")

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "new-year-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)
    _setup_logging(args.verbose)
    logger.debug("command %s, args %s", args.cmd, rest)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "to-greg":
        return cmd_to_greg(rest)

    if args.cmd == "format":
        return cmd_format(rest)

    if args.cmd == "parse":
        return cmd_parse(rest)

    if args.cmd == "today":
        return cmd_today(rest)

    if args.cmd == "pretty-month":
        return _run_module_main("caleth.diagnostics.pretty_month", rest)

    if args.cmd == "new-years":
        return _run_module_main("caleth.diagnostics.new_years_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "round-trip": "caleth.diagnostics.round_trip",
            "new-year-scatter": "caleth.diagnostics.new_year_scatter",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
