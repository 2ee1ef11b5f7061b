from __future__ import annotations

import argparse
import sys
import re
import importlib
import inspect


_DATE_RE = re.compile(r"^[0-9]{4}-[0-9]{2}-[0-9]{2}$")

_DIAGNOSTICS = {
    "easter-table": "cwcal.diagnostics.easter_table",
    "pretty-year": "cwcal.diagnostics.pretty_year",
    "easter-scatter": "cwcal.diagnostics.easter_scatter",
}


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


def _add_reckoning(p: argparse.ArgumentParser) -> None:
    p.add_argument("--reckoning", default="western", help="western|julian|orthodox (default: western)")


def cmd_day(argv: list[str]) -> int:
    import cwcal

    p = argparse.ArgumentParser(prog="cwcal day", description="Church year, season and lectionary for a date")
    p.add_argument("date", help="YYYY-MM-DD")
    _add_reckoning(p)
    p.add_argument("--attr", action="append", default=[], help="attribute name (repeatable)")
    args = p.parse_args(argv)

    attrs = tuple(args.attr) or ("weekday", "season", "lectionary")
    info = cwcal.day_info(args.date, reckoning=args.reckoning, attributes=attrs)
    print(f"date         {info.date.isoformat()}")
    print(f"church_year  {info.church_year}")
    for k, v in (info.attributes or {}).items():
        print(f"{k:<12} {v.isoformat() if hasattr(v, 'isoformat') else v}")
    for ev in cwcal.fixed_events_on(info.date):
        print(f"[{ev.type}] {ev.title}")
    return 0


def cmd_easter(argv: list[str]) -> int:
    import cwcal

    p = argparse.ArgumentParser(prog="cwcal easter", description="Easter Day for a year")
    p.add_argument("year", type=int)
    _add_reckoning(p)
    args = p.parse_args(argv)

    print(cwcal.compute_easter(args.year, reckoning=args.reckoning).isoformat())
    return 0


def cmd_moveable(argv: list[str]) -> int:
    import cwcal

    p = argparse.ArgumentParser(prog="cwcal moveable", description="Moveable dates of a church year")
    p.add_argument("year", type=int, help="church year")
    _add_reckoning(p)
    args = p.parse_args(argv)

    md = cwcal.moveable_dates(args.year, reckoning=args.reckoning)
    for name, d in md.as_dict().items():
        print(f"{name:<20} {d.isoformat()}")
    print(f"{'ember_days':<20} {', '.join(d.isoformat() for d in cwcal.ember_days(args.year, reckoning=args.reckoning))}")
    return 0


def cmd_seasons(argv: list[str]) -> int:
    import cwcal

    p = argparse.ArgumentParser(prog="cwcal seasons", description="Season intervals of a church year")
    p.add_argument("year", type=int, help="church year")
    _add_reckoning(p)
    args = p.parse_args(argv)

    for s in cwcal.seasons_of_year(args.year, reckoning=args.reckoning):
        print(f"{s.code or '-'}  {s.name:<14} {s.start.isoformat()} .. {s.end.isoformat()}  ({s.days} days)")
    return 0


def cmd_sundays(argv: list[str]) -> int:
    import cwcal

    p = argparse.ArgumentParser(prog="cwcal sundays", description="Sundays of a church year")
    p.add_argument("year", type=int, help="church year")
    args = p.parse_args(argv)

    sundays = cwcal.sundays_of_church_year(args.year)
    for i, d in enumerate(sundays, start=1):
        print(f"{i:2d}  {d.isoformat()}")
    return 0


def cmd_fixed(argv: list[str]) -> int:
    import cwcal

    p = argparse.ArgumentParser(prog="cwcal fixed", description="Fixed observances of a calendar year")
    p.add_argument("year", type=int, help="calendar year")
    p.add_argument("--type", choices=("F", "C", "L", "P"), action="append", default=[],
                   help="observance type to keep (repeatable; default: all)")
    args = p.parse_args(argv)

    table = cwcal.load_fixed_calendar()
    for ev in cwcal.fixed_dates_for_year(args.year, table):
        if args.type and ev.type not in args.type:
            continue
        when = " / ".join(d.isoformat() for d in ev.observed)
        print(f"{when:<23} [{ev.type}] {ev.title}  ({ev.type_name(table)})")
    return 0


def cmd_reckonings(argv: list[str]) -> int:
    import cwcal

    argparse.ArgumentParser(prog="cwcal reckonings", description="List named Easter reckonings").parse_args(argv)
    for name in cwcal.list_reckonings():
        info = cwcal.reckoning_info(name)
        print(f"{name:<10} {info['description']}")
    return 0


_COMMANDS = {
    "day": cmd_day,
    "easter": cmd_easter,
    "moveable": cmd_moveable,
    "seasons": cmd_seasons,
    "sundays": cmd_sundays,
    "fixed": cmd_fixed,
    "reckonings": cmd_reckonings,
}


def main(argv: list[str] | None = None) -> int:
    from cwcal.core.errors import CwcalError

    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `cwcal YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + list(argv)

    p = argparse.ArgumentParser(prog="cwcal", description="Common Worship liturgical calendar toolkit CLI.")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Church year, season and lectionary for a date")
    sub.add_parser("easter", help="Easter Day for a year")
    sub.add_parser("moveable", help="Moveable dates of a church year")
    sub.add_parser("seasons", help="Season intervals of a church year")
    sub.add_parser("sundays", help="Sundays of a church year")
    sub.add_parser("fixed", help="Fixed observances of a calendar year")
    sub.add_parser("reckonings", help="List named Easter reckonings")

    # diagnostics
    sub.add_parser("easter-table", help="Print an Easter table for several reckonings (diagnostics)")
    sub.add_parser("pretty-year", help="Print month grids with seasons and observances (diagnostics)")
    sub.add_parser("easter-scatter", help="Summarize and plot the Western/Orthodox Easter gap (diagnostics; plot needs numpy and matplotlib)")

    args, rest = p.parse_known_args(argv)

    try:
        if args.cmd in _COMMANDS:
            return _COMMANDS[args.cmd](rest)
        if args.cmd in _DIAGNOSTICS:
            return _run_module_main(_DIAGNOSTICS[args.cmd], rest)
    except CwcalError as e:
        raise SystemExit(str(e)) from e

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
