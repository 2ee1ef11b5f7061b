#!/usr/bin/env python3
"""
How far apart are Western and Orthodox Easter?

For every year in a range the gap (Orthodox minus Western, in days) is a
multiple of 7: 0 when the churches keep Easter together, otherwise one or
more weeks, growing by a week each time the Julian calendar loses another day
(2100, 2200, 2300, ...). The plot shows the gap per year with the shared
Easters marked, and a bar chart of how often each gap occurs.
"""
from __future__ import annotations

import argparse
import importlib
from collections import Counter
from typing import Dict, List, Optional, Tuple

import cwcal


def _optional(module: str):
    try:
        return importlib.import_module(module)
    except ImportError as e:
        name = module.split(".")[0]
        raise RuntimeError(f'Need {name}. Install: pip install "cwcal[diagnostics]"') from e


def gap_series(start_year: int, end_year: int) -> Tuple[List[int], List[int]]:
    """Years and Orthodox-minus-Western gaps in days."""
    years = list(range(start_year, end_year + 1))
    gaps = [
        (cwcal.compute_easter(y, reckoning="orthodox") - cwcal.compute_easter(y, reckoning="western")).days
        for y in years
    ]
    return years, gaps


def gap_counts(gaps: List[int]) -> Dict[int, int]:
    return dict(sorted(Counter(gaps).items()))


def plot(years: List[int], gaps: List[int], outbase: str) -> str:
    np = _optional("numpy")
    plt = _optional("matplotlib.pyplot")

    x = np.asarray(years)
    y = np.asarray(gaps) / 7.0
    together = y == 0

    fig, (ax_gap, ax_hist) = plt.subplots(
        1, 2, figsize=(10.0, 4.2), gridspec_kw={"width_ratios": (3, 1)}, constrained_layout=True
    )

    ax_gap.vlines(x[~together], 0, y[~together], color="tab:red", linewidth=0.8, alpha=0.6)
    ax_gap.plot(x[together], y[together], "o", color="tab:blue", markersize=3.5, label="same Sunday")
    ax_gap.set_xlabel("Year")
    ax_gap.set_ylabel("Orthodox after Western (weeks)")
    ax_gap.set_title(f"Easter gap {years[0]}-{years[-1]}")
    ax_gap.legend(loc="upper left", frameon=False)

    values, counts = np.unique(y, return_counts=True)
    ax_hist.barh(values, counts, height=0.6, color="0.45")
    ax_hist.set_xlabel("Years")
    ax_hist.set_yticks(values)
    ax_hist.set_title("Frequency")

    path = outbase + ".png"
    fig.savefig(path, dpi=200)
    plt.close(fig)
    return path


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Plot the gap between Western and Orthodox Easter.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--outbase", default="easter_gap", help="Output base name (writes .png)")
    p.add_argument("--no-plot", action="store_true", help="Only print the gap summary")
    args = p.parse_args(argv)

    if args.end_year < args.start_year:
        raise SystemExit("--end-year must be >= --start-year")

    years, gaps = gap_series(args.start_year, args.end_year)
    for gap, n in gap_counts(gaps).items():
        print(f"gap {gap // 7} week(s): {n} years")

    if not args.no_plot:
        print(f"Saved: {plot(years, gaps, args.outbase)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
