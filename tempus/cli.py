"""Command line front end.

Usage:
  tempus now -f "%Y-%m-%d %H:%M:%S"
  tempus parse "15.10.2013"
  tempus format 1383609600 "%d %B %Y"
  tempus reformat "2013-03-12" "%Y-%m-%d" "%d.%m.%Y"
  tempus validate "29.02.2013" -p "%d.%m.%Y"
  tempus range 2013-11-01 2013-11-30 --period day --format "%a %d" --group-by week
  tempus --monday week 2013-11-05
  tempus leap 2012
  tempus days Feb 2012

Settings come from TEMPUS_LOCALE / TEMPUS_WEEK_STARTS_MONDAY (env or .env)
unless --locale / --monday are given. Results go to stdout; a command that
cannot produce a value exits with a short message.
"""

from __future__ import annotations

import argparse
import json
from collections.abc import Sequence

from .config import TempusConfig
from .engine import Tempus


def _period(value: str) -> int | str:
    try:
        return int(value)
    except ValueError:
        return value


def _require(value, what: str):
    if value is None:
        raise SystemExit(f"Could not {what}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tempus")
    ap.add_argument("--locale", default=None, help="Locale id, e.g. en_US or ru_RU")
    ap.add_argument("--monday", action="store_true", default=None, help="Weeks start on Monday")
    sub = ap.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("now", help="Current UTC date")
    p.add_argument("-f", "--format", default="%F %H:%M:%S")

    p = sub.add_parser("parse", help="Parse text into date fields (JSON)")
    p.add_argument("text")
    p.add_argument("-p", "--pattern", default=None, help="Pattern; autodetected when omitted")

    p = sub.add_parser("format", help="Render a timestamp")
    p.add_argument("timestamp", type=int)
    p.add_argument("pattern")

    p = sub.add_parser("reformat", help="Parse with one pattern, render with another")
    p.add_argument("text")
    p.add_argument("pattern_from")
    p.add_argument("pattern_to")

    p = sub.add_parser("validate", help="Check that text names a real date")
    p.add_argument("text")
    p.add_argument("-p", "--pattern", default=None)

    p = sub.add_parser("range", help="List dates between two endpoints")
    p.add_argument("date_from")
    p.add_argument("date_to")
    p.add_argument("--period", type=_period, default="day", help="Seconds or a unit name")
    p.add_argument("--format", default="%F %H:%M:%S")
    p.add_argument("--from-format", default=None)
    p.add_argument("--to-format", default=None)
    p.add_argument("--group-by", default=None, help="Start a new group when this field changes (e.g. week)")
    p.add_argument("--json", action="store_true")

    p = sub.add_parser("week", help="Week number of a date")
    p.add_argument("text")
    p.add_argument("-p", "--pattern", default=None)

    p = sub.add_parser("leap", help="Is the year a leap year")
    p.add_argument("year")

    p = sub.add_parser("days", help="Days in a month (number or name)")
    p.add_argument("month")
    p.add_argument("year", nargs="?", default=None)

    return ap


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = TempusConfig.from_env(locale=args.locale, week_starts_monday=args.monday)
    except ValueError as e:
        raise SystemExit(str(e))
    engine = Tempus(config)

    if args.cmd == "now":
        print(_require(engine.now(args.format), "format the current date"))
        return 0

    if args.cmd == "parse":
        d = _require(engine.parse(args.text, args.pattern), f"parse {args.text!r}")
        print(json.dumps(d.as_dict(), ensure_ascii=False))
        return 0

    if args.cmd == "format":
        print(_require(engine.format(args.timestamp, args.pattern), "format the timestamp"))
        return 0

    if args.cmd == "reformat":
        print(_require(engine.reformat(args.text, args.pattern_from, args.pattern_to), f"reformat {args.text!r}"))
        return 0

    if args.cmd == "validate":
        ok = engine.validate(args.text, args.pattern)
        print("OK" if ok else "INVALID")
        return 0 if ok else 1

    if args.cmd == "range":
        out = _require(
            engine.generate_dates(
                args.date_from,
                args.date_to,
                args.period,
                format_from=args.from_format,
                format_to=args.to_format,
                format=args.format,
                group_by=args.group_by,
            ),
            "build the date range",
        )
        if args.json:
            print(json.dumps(out, ensure_ascii=False, indent=2))
        elif args.group_by is None:
            for line in out:
                print(line)
        else:
            print("\n\n".join("\n".join(bucket) for bucket in out))
        return 0

    if args.cmd == "week":
        d = _require(engine.parse(args.text, args.pattern), f"parse {args.text!r}")
        print(engine.week_number(d))
        return 0

    if args.cmd == "leap":
        leap = _require(engine.is_leap_year(args.year), f"read year {args.year!r}")
        print("yes" if leap else "no")
        return 0

    if args.cmd == "days":
        month: int | str = int(args.month) if args.month.isdigit() else args.month
        print(_require(engine.days_in_month(month, args.year), f"find month {args.month!r}"))
        return 0

    raise SystemExit(f"Unknown command: {args.cmd}")


if __name__ == "__main__":
    raise SystemExit(main())
