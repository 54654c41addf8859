#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import List, Optional, Tuple

from matplotlib.colors import ListedColormap

import fadate

# Mean tropical year (days), used for the drift panel
TROPICAL_YEAR = 365.24219


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "fadate[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "fadate[diagnostics]"') from e


def build_points(np, calendar: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """(cycle start year, position in cycle) of every leap year."""
    Q = fadate.get_calendar(calendar).p.Q
    xs, ys = [], []
    for Y in range(start_year, end_year + 1):
        if fadate.is_leap_year(Y, calendar):
            xs.append(Y - (Y % Q))
            ys.append(Y % Q)
    return np.array(xs, dtype=int), np.array(ys, dtype=int)


def drift_days(np, calendar: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """Cumulative calendar-minus-tropical drift (days) at the end of each year."""
    eng = fadate.get_calendar(calendar)
    years = np.arange(start_year, end_year + 1)
    lengths = np.array([eng.days_in_year(int(y)) for y in years], dtype=float)
    return years, np.cumsum(lengths - TROPICAL_YEAR)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Leap-year barcode of a cycle calendar, one column per cycle, plus drift against the tropical year."
    )
    p.add_argument("--calendar", default="persian")
    p.add_argument("--start-year", type=int, default=1300)
    p.add_argument("--end-year", type=int, default=1500)
    p.add_argument("--out", default="leap_years.png")
    p.add_argument("--title", default="Leap years per 33-year cycle")
    p.add_argument("--cell-edge", default="0.88", help="Cell border color (matplotlib gray string).")
    p.add_argument("--cell-lw", type=float, default=0.6, help="Cell border line width.")
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    eng = fadate.get_calendar(args.calendar)
    if not hasattr(eng, "p") or not hasattr(eng.p, "Q"):
        raise SystemExit(f"Calendar '{args.calendar}' has no leap cycle to plot")
    Q = eng.p.Q

    x, pos = build_points(np, args.calendar, start_year, end_year)
    first_cycle = start_year - (start_year % Q)
    last_cycle = end_year - (end_year % Q)
    n_cycles = (last_cycle - first_cycle) // Q + 1

    fig, (ax, ax2) = plt.subplots(2, 1, figsize=(14, 7), gridspec_kw={"height_ratios": [2, 1]})

    x_edges = np.arange(first_cycle - Q / 2, last_cycle + Q, Q)
    y_edges = np.arange(-0.5, Q + 0.5, 1.0)
    Z = np.zeros((Q, n_cycles), dtype=float)
    ax.pcolormesh(
        x_edges,
        y_edges,
        Z,
        shading="flat",
        cmap=ListedColormap(["white"]),
        vmin=0, vmax=1,
        edgecolors=args.cell_edge,
        linewidth=float(args.cell_lw),
        antialiased=True,
        zorder=0,
    )
    ax.scatter(x, pos, s=30, marker="o", c="0.15", linewidths=0.0, zorder=5)
    ax.set_xlim(x_edges[0], x_edges[-1])
    ax.set_ylim(-0.5, Q - 0.5)
    ax.tick_params(axis="both", which="both", length=0)
    ax.set_xlabel(f"{args.calendar} cycle start year")
    ax.set_ylabel(f"year mod {Q}")
    ax.set_title(args.title)

    years, drift = drift_days(np, args.calendar, start_year, end_year)
    ax2.plot(years, drift, lw=1.0, c="0.15")
    ax2.axhline(0.0, lw=0.6, c="0.6")
    ax2.set_xlabel(f"{args.calendar} year")
    ax2.set_ylabel("drift vs tropical year (days)")

    fig.tight_layout()
    fig.savefig(args.out, dpi=200)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
