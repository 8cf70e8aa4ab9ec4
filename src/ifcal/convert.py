"""
ifcal.convert
-------------
Gregorian <-> International Fixed Calendar arithmetic.

The IFC year is 13 months of 28 days (364 days) followed by the intercalary
days. Labels are derived from the raw Gregorian day-of-year: day 365 is Year
Day, and in leap years day 366 is Leap Day. The Leap Day is not moved to its
historical slot after June 28, so ordinary labels are identical in common and
leap years for day-of-year 1..364.
"""

from __future__ import annotations

import logging
from datetime import date

from .core.constants import (
    GREGORIAN_MONTHS,
    IFC_MONTHS,
    IFC_MONTH_DAYS,
    LEAP_DAY,
    MONTH_LENGTHS,
    YEAR_DAY,
)
from .core.errors import InvalidArgument
from .core.time import nth_day_of_year
from .core.types import IFCDate

logger = logging.getLogger(__name__)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or (year % 400 == 0)

def days_in_month(year: int, month: int) -> int:
    """Length of Gregorian `month` (1..12)."""
    if not 1 <= month <= 12:
        raise InvalidArgument(f"Gregorian month must be in 1..12, got {month!r}")
    if month == 2 and is_leap_year(year):
        return 29
    return MONTH_LENGTHS[month - 1]

def day_of_year(d: date) -> int:
    """1-based day of year, summed from the month length table."""
    return sum(days_in_month(d.year, m) for m in range(1, d.month)) + d.day

def gregorian_to_ifc(d: date) -> IFCDate:
    year = d.year
    doy = day_of_year(d)
    leap = is_leap_year(year)

    if doy == 366 and leap:
        logger.debug("%s is day 366 of leap year %d -> %s", d, year, LEAP_DAY)
        return IFCDate.special_day(year, LEAP_DAY)

    if doy == 365 or (doy == 366 and not leap):
        logger.debug("%s is day %d of %d -> %s", d, doy, year, YEAR_DAY)
        return IFCDate.special_day(year, YEAR_DAY)

    month_index = (doy - 1) // IFC_MONTH_DAYS
    day = (doy - 1) % IFC_MONTH_DAYS + 1
    return IFCDate(year=year, month=IFC_MONTHS[month_index], day=day)

def check_ifc_month(month_index: int) -> None:
    if not isinstance(month_index, int) or isinstance(month_index, bool) or not 0 <= month_index < len(IFC_MONTHS):
        raise InvalidArgument(f"IFC month index must be in 0..{len(IFC_MONTHS) - 1}, got {month_index!r}")

def ifc_to_gregorian(year: int, month_index: int, day: int) -> date:
    """
    Gregorian date of an ordinary IFC day in the same year.

    Exact inverse of the ordinary branch of gregorian_to_ifc. Leap Day and
    Year Day have no month/day address and cannot be passed here.
    """
    check_ifc_month(month_index)
    if not isinstance(day, int) or isinstance(day, bool) or not 1 <= day <= IFC_MONTH_DAYS:
        raise InvalidArgument(f"IFC day must be in 1..{IFC_MONTH_DAYS}, got {day!r}")

    doy = month_index * IFC_MONTH_DAYS + day  # 1..364
    return nth_day_of_year(year, doy)

def ifc_date_to_gregorian(ifc: IFCDate) -> date:
    if ifc.is_special:
        raise InvalidArgument(f"{ifc.special} has no month/day address; convert it from the Gregorian side")
    return ifc_to_gregorian(ifc.year, ifc.month_index, ifc.day)

def month_index(name: str) -> int:
    """Index (0..12) of an IFC month name, case-insensitive."""
    key = name.strip().lower()
    for i, m in enumerate(IFC_MONTHS):
        if m.lower() == key:
            return i
    raise InvalidArgument(f"Unknown IFC month {name!r}. Available: {list(IFC_MONTHS)}")

def format_ifc_date(ifc: IFCDate) -> str:
    if ifc.is_special:
        return f"{ifc.special}, {ifc.year}"
    return f"{ifc.month} {ifc.day}, {ifc.year}"

def format_gregorian_date(d: date) -> str:
    return f"{GREGORIAN_MONTHS[d.month - 1]} {d.day}, {d.year}"
