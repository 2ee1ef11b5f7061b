"""Easter Day per year under one or more registered reckonings."""
from __future__ import annotations

import argparse
from datetime import date
from typing import List, Optional

import cwcal


def fmt(d: date, style: str) -> str:
    return f"{d.month:02d}-{d.day:02d}" if style == "mmdd" else d.isoformat()


def rows(years: range, reckonings: List[str]) -> List[List[date]]:
    return [[cwcal.compute_easter(y, reckoning=rk) for rk in reckonings] for y in years]


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Print an Easter date table for several reckonings.")
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--reckoning",
        action="append",
        default=[],
        help="registered reckoning name (repeatable; default: every registered reckoning)",
    )
    p.add_argument("--dates", choices=("mmdd", "iso"), default="mmdd")
    args = p.parse_args(argv)

    if args.to_year < args.from_year:
        raise SystemExit("--to-year must be >= --from-year")

    # unknown names fail here, before any output
    names = args.reckoning or cwcal.list_reckonings()
    for name in names:
        cwcal.reckoning_info(name)

    width = 10 if args.dates == "iso" else 5
    widths = [max(width, len(n)) for n in names]
    header = "Year  " + "  ".join(n.ljust(w) for n, w in zip(names, widths))
    print(header.rstrip())
    print("-" * len(header.rstrip()))

    years = range(args.from_year, args.to_year + 1)
    shared = []
    for y, dates in zip(years, rows(years, names)):
        print(f"{y:<4}  " + "  ".join(fmt(d, args.dates).ljust(w) for d, w in zip(dates, widths)).rstrip())
        if len(names) > 1 and len(set(dates)) == 1:
            shared.append(dates[0])

    if len(names) > 1:
        print(f"\nSame date under all {len(names)} reckonings: {len(shared)} of {len(years)} years")
        for d in shared:
            print(f"  {d.isoformat()}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
