from __future__ import annotations

from datetime import date
import argparse
from typing import Optional

import ifcal
from ifcal.view import CellView, MonthView


def dow_header(w: int = 6) -> str:
    return " ".join(n.ljust(w) for n in ifcal.DAY_NAMES).rstrip()


def cell(top: str, bot: str, w: int = 6) -> tuple[str, str]:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def mark(cv: CellView) -> str:
    # (n) other month, * selected, ! today
    top = f"({cv.label})" if cv.muted else f"{cv.label:>2}"
    if cv.selected:
        top += "*"
    if cv.today:
        top += "!"
    return top


def short_ifc(d: date) -> str:
    t = ifcal.gregorian_to_ifc(d)
    if t.is_special:
        return t.special.split()[0]
    return f"{t.month[:3]}{t.day:02d}"


def print_grid(title: str, weeks: list[list[tuple[str, str]]]) -> None:
    print(title)
    print(dow_header())
    print("-" * len(dow_header()))
    for wk in weeks:
        print(" ".join(c[0] for c in wk))
        print(" ".join(c[1] for c in wk))
    print()


def print_view(view: MonthView, bottom) -> None:
    if view.special is not None:
        print(view.title)
        print(f"  [{view.special}]")
        print()
        return
    weeks = [[cell(mark(cv), bottom(cv.target)) for cv in wk] for wk in view.weeks()]
    print_grid(view.title, weeks)


def gregorian_month_calendar(gy: int, gm: int, selected: Optional[date] = None, today: Optional[date] = None) -> None:
    view = ifcal.render_gregorian_month(gy, gm, selected, today=today)
    print_view(view, short_ifc)


def ifc_month_calendar(y: int, i: int, selected: Optional[date] = None, today: Optional[date] = None) -> None:
    view = ifcal.render_ifc_month(y, i, selected, today=today)
    print_view(view, lambda d: f"{d.month:02d}-{d.day:02d}")


def pair_calendar(selection: ifcal.Selection, today: Optional[date] = None) -> None:
    pair = ifcal.render_pair(selection, today=today)
    print_view(pair.gregorian, short_ifc)
    print(f"  = {pair.gregorian_footer}")
    print()
    print_view(pair.ifc, lambda d: f"{d.month:02d}-{d.day:02d}")
    print(f"  = {pair.ifc_footer}")


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a Gregorian-month and/or an IFC-month calendar with paired labels."
    )
    p.add_argument("--greg", nargs=2, type=int, metavar=("GY", "GM"),
                   help="Gregorian month to print: GY GM (e.g. 2026 2)")
    p.add_argument("--ifc", nargs=2, metavar=("Y", "M"),
                   help="IFC month to print: Y and month name or index 0..12 (e.g. 2026 Sol)")
    p.add_argument("--date", help="Selected date YYYY-MM-DD (default: today)")
    args = p.parse_args(argv)

    today = date.today()

    if not args.greg and not args.ifc:
        sel = ifcal.Selection.from_iso(args.date) if args.date else ifcal.Selection.initial(today)
        pair_calendar(sel, today=today)
        return 0

    selected = ifcal.parse_iso_date(args.date) if args.date else None

    if args.greg:
        gy, gm = args.greg
        gregorian_month_calendar(gy, gm, selected, today=today)

    if args.ifc:
        y, m = args.ifc
        i = int(m) if m.isdigit() else ifcal.month_index(m)
        ifc_month_calendar(int(y), i, selected, today=today)

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
