"""ifcal public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .convert import (
    is_leap_year,
    days_in_month,
    day_of_year,
    gregorian_to_ifc,
    ifc_to_gregorian,
    ifc_date_to_gregorian,
    month_index,
    format_ifc_date,
    format_gregorian_date,
)
from .grid import generate_gregorian_grid, generate_ifc_grid
from .view import (
    CellView,
    MonthView,
    PairView,
    Selection,
    render,
    render_gregorian_month,
    render_ifc_month,
    render_special_day,
    render_pair,
)
from .core.constants import IFC_MONTHS, GREGORIAN_MONTHS, DAY_NAMES, LEAP_DAY, YEAR_DAY
from .core.errors import IfcalError, InvalidArgument, InvalidDateInput
from .core.time import parse_iso_date
from .core.types import IFCDate, CalendarCell

__all__ = [
    "is_leap_year",
    "days_in_month",
    "day_of_year",
    "gregorian_to_ifc",
    "ifc_to_gregorian",
    "ifc_date_to_gregorian",
    "month_index",
    "format_ifc_date",
    "format_gregorian_date",
    "generate_gregorian_grid",
    "generate_ifc_grid",
    "CellView",
    "MonthView",
    "PairView",
    "Selection",
    "render",
    "render_gregorian_month",
    "render_ifc_month",
    "render_special_day",
    "render_pair",
    "IFC_MONTHS",
    "GREGORIAN_MONTHS",
    "DAY_NAMES",
    "LEAP_DAY",
    "YEAR_DAY",
    "IfcalError",
    "InvalidArgument",
    "InvalidDateInput",
    "parse_iso_date",
    "IFCDate",
    "CalendarCell",
]
