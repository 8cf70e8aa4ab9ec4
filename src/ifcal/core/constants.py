"""
ifcal.core.constants
--------------------
Fixed name and length tables shared by the conversion and grid layers.
"""

from __future__ import annotations

from typing import Tuple

IFC_MONTHS: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "Sol", "July", "August", "September", "October", "November", "December",
)

GREGORIAN_MONTHS: Tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Column 0 is Sunday in both grids
DAY_NAMES: Tuple[str, ...] = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")

# Common-year lengths; February is adjusted for leap years at lookup time
MONTH_LENGTHS: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

IFC_MONTH_DAYS = 28

LEAP_DAY = "Leap Day"
YEAR_DAY = "Year Day"
SPECIAL_DAYS: Tuple[str, ...] = (LEAP_DAY, YEAR_DAY)

GREGORIAN_WEEKS = 6
