"""
ifcal.view
----------
Pure view models for a two-panel converter: a Gregorian month and the IFC
month (or intercalary day) that holds the same selected date. Nothing here
draws anything; a front end renders MonthView/PairView however it likes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date
from typing import Optional, Sequence, Tuple

from .convert import format_gregorian_date, format_ifc_date, gregorian_to_ifc
from .core.constants import DAY_NAMES, GREGORIAN_MONTHS, IFC_MONTHS
from .core.errors import InvalidArgument, InvalidDateInput
from .core.time import parse_iso_date
from .core.types import CalendarCell, IFCDate
from .grid import generate_gregorian_grid, generate_ifc_grid, gregorian_grid_start

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CellView:
    label: str
    muted: bool
    today: bool
    selected: bool
    target: Optional[date]  # date selected by clicking; None for the special-day cell

@dataclass(frozen=True)
class MonthView:
    title: str
    cells: Tuple[CellView, ...]
    day_names: Tuple[str, ...] = DAY_NAMES
    special: Optional[str] = None

    def weeks(self) -> Tuple[Tuple[CellView, ...], ...]:
        return tuple(self.cells[i:i + 7] for i in range(0, len(self.cells), 7))

@dataclass(frozen=True)
class PairView:
    gregorian: MonthView
    ifc: MonthView
    gregorian_footer: str
    ifc_footer: str


def render(cells: Sequence[CalendarCell], *, title: str) -> MonthView:
    return MonthView(
        title=title,
        cells=tuple(
            CellView(
                label=str(c.day),
                muted=not c.is_current_month,
                today=c.is_today,
                selected=c.is_selected,
                target=c.to_gregorian(),
            )
            for c in cells
        ),
    )

def gregorian_title(year: int, month: int) -> str:
    return f"{GREGORIAN_MONTHS[month - 1]} {year}".upper()

def ifc_title(year: int, month_index: int) -> str:
    return f"{IFC_MONTHS[month_index]} {year}"

def render_gregorian_month(year: int, month: int, selected: Optional[date] = None, *, today: Optional[date] = None) -> MonthView:
    cells = generate_gregorian_grid(year, month, selected, today=today)
    return render(cells, title=gregorian_title(year, month))

def render_ifc_month(year: int, month_index: int, selected: Optional[date] = None, *, today: Optional[date] = None) -> MonthView:
    cells = generate_ifc_grid(year, month_index, selected, today=today)
    return render(cells, title=ifc_title(year, month_index))

def render_special_day(ifc: IFCDate) -> MonthView:
    """Single selected cell standing in for the month grid on Leap Day / Year Day."""
    if not ifc.is_special:
        raise InvalidArgument(f"{format_ifc_date(ifc)} is an ordinary day")
    cell = CellView(label=ifc.special, muted=False, today=False, selected=True, target=None)
    # No month applies; title uses the page's `IFC_MONTHS[month] || 'SPECIAL'` fallback
    return MonthView(title=f"SPECIAL {ifc.year}", cells=(cell,), special=ifc.special)


@dataclass(frozen=True)
class Selection:
    """The one selected date, plus the Gregorian month currently on display."""
    selected: date
    year: int
    month: int

    @staticmethod
    def initial(today: Optional[date] = None) -> "Selection":
        d = today if today is not None else date.today()
        return Selection(selected=d, year=d.year, month=d.month)

    @staticmethod
    def from_iso(text: str) -> "Selection":
        """Selection for user text; dates whose month grid cannot be shown are refused."""
        d = parse_iso_date(text)
        try:
            gregorian_grid_start(d.year, d.month)
        except InvalidArgument as e:
            raise InvalidDateInput(text.strip(), reason=str(e)) from e
        return Selection.initial(d)

    def select(self, d: date) -> "Selection":
        return replace(self, selected=d, year=d.year, month=d.month)

    def click(self, cell: CalendarCell) -> "Selection":
        return self.select(cell.to_gregorian())

    def iso_value(self) -> str:
        return self.selected.isoformat()


def render_pair(selection: Selection, *, today: Optional[date] = None) -> PairView:
    if today is None:
        today = date.today()

    greg = render_gregorian_month(selection.year, selection.month, selection.selected, today=today)

    ifc = gregorian_to_ifc(selection.selected)
    if ifc.is_special:
        logger.debug("%s is %s; showing special-day view", selection.selected, ifc.special)
        ifc_view = render_special_day(ifc)
    else:
        ifc_view = render_ifc_month(ifc.year, ifc.month_index, selection.selected, today=today)

    return PairView(
        gregorian=greg,
        ifc=ifc_view,
        gregorian_footer=format_ifc_date(ifc),
        ifc_footer=format_gregorian_date(selection.selected),
    )
