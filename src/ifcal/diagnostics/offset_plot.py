#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import Dict, List, Optional

import ifcal
from ifcal.core.time import nth_day_of_year


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "ifcal[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "ifcal[diagnostics]"') from e


def parse_years(s: str) -> List[int]:
    out = [int(x.strip()) for x in s.split(",") if x.strip()]
    if not (1 <= len(out) <= 4):
        raise SystemExit("--years must contain 1 to 4 comma-separated years")
    return out


def build_series(np, year: int) -> Dict[str, "np.ndarray"]:
    """
    Per day-of-year arrays for one Gregorian year.

    ifc_month is 1..13 and ifc_day 1..28; both are NaN on Leap Day / Year Day.
    offset is Gregorian day-of-month minus IFC day-of-month.
    """
    n = 366 if ifcal.is_leap_year(year) else 365
    doy = np.arange(1, n + 1)
    greg_month = np.empty(n, dtype=float)
    greg_day = np.empty(n, dtype=float)
    ifc_month = np.full(n, np.nan)
    ifc_day = np.full(n, np.nan)

    for k in range(n):
        d = nth_day_of_year(year, int(doy[k]))
        greg_month[k] = d.month
        greg_day[k] = d.day
        t = ifcal.gregorian_to_ifc(d)
        if not t.is_special:
            ifc_month[k] = t.month_index + 1
            ifc_day[k] = t.day

    return {
        "doy": doy,
        "greg_month": greg_month,
        "greg_day": greg_day,
        "ifc_month": ifc_month,
        "ifc_day": ifc_day,
        "offset": greg_day - ifc_day,
    }


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Plot Gregorian vs IFC month/day labels across the year."
    )
    p.add_argument("--years", default="2023,2024", help="Comma list of 1-4 years (default: 2023,2024).")
    p.add_argument("--out", default="ifc_offset.png")
    p.add_argument("--title", default="Gregorian vs International Fixed Calendar")
    p.add_argument("--dpi", type=int, default=150)
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    years = parse_years(args.years)

    fig, (ax_m, ax_d) = plt.subplots(2, 1, figsize=(12, 6), sharex=True)

    for Y in years:
        s = build_series(np, Y)
        tag = f"{Y} (leap)" if ifcal.is_leap_year(Y) else str(Y)
        ax_m.step(s["doy"], s["ifc_month"], where="post", lw=1.2, label=f"IFC {tag}")
        ax_d.plot(s["doy"], s["offset"], lw=1.0, label=tag)
        specials = np.isnan(s["ifc_month"])
        ax_m.scatter(s["doy"][specials], s["greg_month"][specials], marker="x", c="k", zorder=5)

    s0 = build_series(np, years[0])
    ax_m.step(s0["doy"], s0["greg_month"], where="post", lw=1.0, c="0.5", ls="--", label="Gregorian")

    ax_m.set_ylabel("Month number")
    ax_m.set_yticks(list(range(1, 14)))
    ax_m.legend(loc="upper left", frameon=False)
    ax_d.axhline(0.0, c="0.7", lw=0.8)
    ax_d.set_ylabel("Gregorian day - IFC day")
    ax_d.set_xlabel("Day of year")
    ax_d.legend(loc="upper left", frameon=False)

    ax_m.set_title(args.title)
    fig.tight_layout()
    fig.savefig(args.out, dpi=args.dpi)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
