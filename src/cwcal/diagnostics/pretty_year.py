from __future__ import annotations

from datetime import date, timedelta
import calendar as pycal
import argparse

import cwcal

# rank used to pick one fixed observance per cell
_TYPE_RANK = {"P": 0, "F": 1, "L": 2, "C": 3}


def dow_header() -> str:
    return "Mo     Tu     We     Th     Fr     Sa     Su"


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def day_label(d: date, reckoning: str, fixed_by_date: dict[date, str]) -> str:
    """Season code, then the highest-ranking fixed observance type (if any)."""
    season = cwcal.liturgical_season(d, reckoning=reckoning)
    code = season.code or "?"
    return f"{code} {fixed_by_date.get(d, '')}".rstrip()


def fixed_index(year: int) -> dict[date, str]:
    out: dict[date, str] = {}
    for ev in cwcal.fixed_dates_for_year(year):
        for d in ev.observed:
            cur = out.get(d)
            if cur is None or _TYPE_RANK[ev.type] < _TYPE_RANK[cur]:
                out[d] = ev.type
    return out


def gregorian_month_calendar(reckoning: str, gy: int, gm: int) -> None:
    first = date(gy, gm, 1)
    last = date(gy, gm, pycal.monthrange(gy, gm)[1])
    fixed = fixed_index(gy)

    days = []
    d = first
    while d <= last:
        days.append((d, f"{d.day:2d}", day_label(d, reckoning, fixed)))
        d += timedelta(days=1)

    weeks: list[list[tuple[str, str]]] = []
    wk: list[tuple[str, str]] = []
    pad = first.weekday()  # Monday=0
    for _ in range(pad):
        wk.append(cell("", ""))
    for _, top, bot in days:
        wk.append(cell(top, bot))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)

    title = f"{reckoning} {gy}-{gm:02d}"
    print_grid(title, weeks)


def church_year_calendar(reckoning: str, cy: int) -> None:
    first, last = cwcal.church_year_bounds(cy)
    md = cwcal.moveable_dates(cy, reckoning=reckoning)
    letter, number = cwcal.lectionary(first)
    print(f"Church year {cy}  ({first} .. {last})  Sunday lectionary {letter}, weekday year {number}")
    for name, d in md.as_dict().items():
        print(f"  {name:<20} {d.isoformat()}")
    print()

    y, m = first.year, first.month
    while (y, m) <= (last.year, last.month):
        gregorian_month_calendar(reckoning, y, m)
        y, m = (y + 1, 1) if m == 12 else (y, m + 1)


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print Gregorian month grids labelled with season codes and fixed observance types."
    )
    p.add_argument("--reckoning", default="western", help="western|julian|orthodox (default: western)")
    p.add_argument("--church-year", type=int, metavar="N",
                   help="Print every month of church year N with its moveable dates")
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2024 12)")
    args = p.parse_args(argv)

    if not args.church_year and not args.greg:
        # sensible default demo
        gregorian_month_calendar(args.reckoning, gy=2024, gm=12)
        return 0

    if args.church_year:
        church_year_calendar(args.reckoning, args.church_year)

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(args.reckoning, gy=gy, gm=gm)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
