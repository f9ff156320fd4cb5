from __future__ import annotations

import argparse
from datetime import date, datetime
import logging
import sys
import re
import time
import importlib
import inspect

from calzh.core.errors import CalzhError


_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def _parse_ymd(s: str) -> date:
    try:
        y, m, d = map(int, s.split("-"))
        return date(y, m, d)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid date {s!r}, expected YYYY-MM-DD") from e


def _parse_datetime(s: str) -> datetime:
    try:
        return datetime.fromisoformat(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid ISO datetime {s!r}") from e


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


def cmd_day(argv: list[str]) -> int:
    import calzh

    p = argparse.ArgumentParser(prog="calzh day", description="Gregorian -> lunar labels")
    p.add_argument("date", type=_parse_ymd, help="YYYY-MM-DD")
    p.add_argument("--converter", default="lunar_python")
    p.add_argument("--rule", choices=("legacy", "wuhu"), default="legacy", help="month-stem rule")
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable, default: labels)")
    args = p.parse_args(argv)

    config = calzh.LabelConfig(converter=args.converter, month_stem_rule=args.rule)
    info = calzh.day_info(args.date, config=config, attributes=tuple(args.attr or ["labels"]))

    t = info.lunar
    leap_tag = "闰" if t.is_leap_month else ""
    print(f"{info.civil_date.isoformat()}  lunar {t.lunar_year or '?'}-{leap_tag}{t.month:02d}-{t.day:02d}  (#{t.year_ordinal}, {info.converter.name})")
    for k, v in (info.attributes or {}).items():
        print(f"  {k:14s} {v}")
    return 0


def cmd_render(argv: list[str]) -> int:
    from calzh import display
    from calzh.core.types import DisplayConfig, LabelConfig

    p = argparse.ArgumentParser(prog="calzh render", description="Render a menu-bar label")
    p.add_argument("format", nargs="?", default="", help="strftime pattern with GY/GM/LD/LM tokens (custom mode)")
    p.add_argument("--mode", choices=("icon", "time", "date", "custom"), default=None,
                   help="display mode (default: custom when a format is given, else time)")
    p.add_argument("--at", type=_parse_datetime, default=None, help="ISO datetime to render instead of now")
    p.add_argument("--converter", default="lunar_python")
    p.add_argument("--rule", choices=("legacy", "wuhu"), default="legacy")
    p.add_argument("--watch", action="store_true", help="keep printing on every refresh tick")
    p.add_argument("--count", type=int, default=0, help="with --watch, stop after N lines (0 = forever)")
    args = p.parse_args(argv)

    mode = args.mode or ("custom" if args.format else "time")
    config = DisplayConfig(
        mode=mode,
        custom_format=args.format,
        label=LabelConfig(converter=args.converter, month_stem_rule=args.rule),
    )

    if not args.watch:
        now = args.at or datetime.now()
        print(display.render(now, config))
        return 0

    _, unit = display.refresh_interval(config)
    if unit is None:
        print(display.render(datetime.now(), config))
        return 0

    n = 0
    while True:
        print(display.render(datetime.now(), config), flush=True)
        n += 1
        if args.count and n >= args.count:
            return 0
        time.sleep(display.seconds_until_next_tick(datetime.now(), unit))


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    verbose = False
    if argv and argv[0] in ("-v", "--verbose"):
        verbose = True
        argv = argv[1:]
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        return _dispatch(argv)
    except CalzhError as e:
        print(f"calzh: {e}", file=sys.stderr)
        return 2


def _dispatch(argv: list[str]) -> int:
    # Shortcut: `calzh YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        return cmd_day(argv)

    p = argparse.ArgumentParser(prog="calzh", description="Chinese lunar calendar labels for clocks and menu bars. Put -v first for debug logging.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian -> lunar labels", add_help=False)
    sub.add_parser("render", help="Render a menu-bar label", add_help=False)
    sub.add_parser("months", help="Print ganzhi month labels for a lunar year", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument("tool", choices=["year-check"], help="Which diagnostic to run")

    args, rest = p.parse_known_args(argv)

    if args.cmd == "day":
        return cmd_day(rest)

    if args.cmd == "render":
        return cmd_render(rest)

    if args.cmd == "months":
        return _run_module_main("calzh.diagnostics.month_table", rest)

    if args.cmd == "diag":
        tool_map = {
            "year-check": "calzh.diagnostics.year_check",
        }
        return _run_module_main(tool_map[args.tool], rest)

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
