"""
ifcal.grid
----------
Month grids for display. A Gregorian month is a fixed 6 x 7 block starting on
the Sunday on or before the 1st; an IFC month is exactly 4 x 7 and always
starts in the Sunday column.
"""

from __future__ import annotations

import logging
from datetime import date
from typing import List, Optional

from .convert import check_ifc_month, gregorian_to_ifc
from .core.constants import GREGORIAN_WEEKS, IFC_MONTHS, IFC_MONTH_DAYS
from .core.errors import InvalidArgument
from .core.time import from_jdn, to_jdn, weekday_sunday0
from .core.types import CalendarCell, IFCDate

logger = logging.getLogger(__name__)

_JDN_MIN = to_jdn(date.min)
_JDN_MAX = to_jdn(date.max)


def gregorian_grid_start(year: int, month: int) -> int:
    """
    JDN of the first (Sunday) cell of the grid for `month`.

    Raises InvalidArgument when the 42-cell window leaves date.min..date.max,
    which happens for 0001-01 and 9999-12.
    """
    if not 1 <= month <= 12:
        raise InvalidArgument(f"Gregorian month must be in 1..12, got {month!r}")
    if not date.min.year <= year <= date.max.year:
        raise InvalidArgument(f"Gregorian year must be in {date.min.year}..{date.max.year}, got {year!r}")

    first = date(year, month, 1)
    start = to_jdn(first) - weekday_sunday0(first)
    if start < _JDN_MIN or start + GREGORIAN_WEEKS * 7 - 1 > _JDN_MAX:
        raise InvalidArgument(f"The {year:04d}-{month:02d} grid runs outside {date.min}..{date.max}")
    return start


def generate_gregorian_grid(
    year: int,
    month: int,
    selected: Optional[date] = None,
    *,
    today: Optional[date] = None,
) -> List[CalendarCell]:
    """42 cells covering `month` (1..12), padded with the adjacent months."""
    start = gregorian_grid_start(year, month)
    if today is None:
        today = date.today()

    logger.debug("gregorian grid %d-%02d starts at %s", year, month, from_jdn(start))

    grid: List[CalendarCell] = []
    for offset in range(GREGORIAN_WEEKS * 7):
        d = from_jdn(start + offset)
        grid.append(CalendarCell(
            day=d.day,
            month=d.month,
            year=d.year,
            is_current_month=d.month == month,
            is_today=d == today,
            is_selected=selected is not None and d == selected,
            day_of_week=offset % 7,
        ))
    return grid

def _matches(ifc: Optional[IFCDate], year: int, month_name: str, day: int) -> bool:
    # Special days never land on a grid cell
    if ifc is None or ifc.is_special:
        return False
    return ifc.year == year and ifc.month == month_name and ifc.day == day

def generate_ifc_grid(
    year: int,
    month_index: int,
    selected: Optional[date] = None,
    *,
    today: Optional[date] = None,
) -> List[CalendarCell]:
    """28 cells for IFC month `month_index` (0..12); week restarts every month."""
    check_ifc_month(month_index)
    if today is None:
        today = date.today()

    month_name = IFC_MONTHS[month_index]
    selected_ifc = gregorian_to_ifc(selected) if selected is not None else None
    today_ifc = gregorian_to_ifc(today)

    grid: List[CalendarCell] = []
    for i in range(1, IFC_MONTH_DAYS + 1):
        grid.append(CalendarCell(
            day=i,
            month=month_index,
            year=year,
            is_current_month=True,
            is_today=_matches(today_ifc, year, month_name, i),
            is_selected=_matches(selected_ifc, year, month_name, i),
            day_of_week=(i - 1) % 7,
            calendar="ifc",
            ifc=IFCDate(year=year, month=month_name, day=i),
        ))
    return grid
