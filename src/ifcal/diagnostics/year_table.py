from __future__ import annotations

from datetime import date
import argparse
from typing import List, Optional

import ifcal
from ifcal.core.time import nth_day_of_year


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def year_row(Y: int) -> dict:
    """Gregorian dates of the IFC landmarks of year Y."""
    sol = ifcal.month_index("Sol")
    leap = ifcal.is_leap_year(Y)
    return {
        "Y": Y,
        "leap": leap,
        "sol_1": ifcal.ifc_to_gregorian(Y, sol, 1),
        "year_day": nth_day_of_year(Y, 365),
        "leap_day": nth_day_of_year(Y, 366) if leap else None,
    }


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian dates of Sol 1, Year Day and Leap Day per year."
    )
    p.add_argument("--from-year", type=int, default=2020)
    p.add_argument("--to-year", type=int, default=2032)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    def fmt(d: Optional[date]) -> str:
        if d is None:
            return "-"
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    Y0, Y1 = args.from_year, args.to_year
    if Y1 < Y0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year", "Leap", "Sol 1", "Year Day", "Leap Day"]
    colw = [5, 5] + [max(10 if args.dates == "iso" else 5, len(h)) for h in headers[2:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    rows: List[dict] = [year_row(Y) for Y in range(Y0, Y1 + 1)]
    for r in rows:
        cols = [str(r["Y"]), "yes" if r["leap"] else "", fmt(r["sol_1"]), fmt(r["year_day"]), fmt(r["leap_day"])]
        print("  ".join(c.ljust(w) for c, w in zip(cols, colw)))

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
