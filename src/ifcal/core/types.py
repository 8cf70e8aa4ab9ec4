from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Literal, Optional

from .constants import IFC_MONTHS, IFC_MONTH_DAYS, SPECIAL_DAYS
from .errors import InvalidArgument

SpecialDay = Literal["Leap Day", "Year Day"]
CalendarKind = Literal["gregorian", "ifc"]

@dataclass(frozen=True)
class IFCDate:
    """
    An International Fixed Calendar date.

    Either an ordinary month/day (``special is None``) or one of the two
    intercalary days, which carry no month or day.
    """
    year: int
    month: Optional[str] = None
    day: Optional[int] = None
    special: Optional[SpecialDay] = None

    def __post_init__(self) -> None:
        if self.special is not None:
            if self.special not in SPECIAL_DAYS:
                raise InvalidArgument(f"Unknown special day {self.special!r}. Available: {list(SPECIAL_DAYS)}")
            if self.month is not None or self.day is not None:
                raise InvalidArgument(f"{self.special} has no month or day")
            return
        if self.month not in IFC_MONTHS:
            raise InvalidArgument(f"Unknown IFC month {self.month!r}")
        if self.day is None or not 1 <= self.day <= IFC_MONTH_DAYS:
            raise InvalidArgument(f"IFC day must be in 1..{IFC_MONTH_DAYS}, got {self.day!r}")

    @classmethod
    def special_day(cls, year: int, kind: SpecialDay) -> "IFCDate":
        return cls(year=year, special=kind)

    @property
    def is_special(self) -> bool:
        return self.special is not None

    @property
    def month_index(self) -> Optional[int]:
        """0..12, or None for Leap Day / Year Day."""
        if self.month is None:
            return None
        return IFC_MONTHS.index(self.month)

@dataclass(frozen=True)
class CalendarCell:
    """One position of a month grid. Gregorian months are 1..12, IFC months are indices 0..12."""
    day: int
    month: int
    year: int
    is_current_month: bool
    is_today: bool
    is_selected: bool
    day_of_week: int  # 0=Sun..6=Sat
    calendar: CalendarKind = "gregorian"
    ifc: Optional[IFCDate] = None

    def to_gregorian(self) -> date:
        if self.calendar == "ifc":
            from ..convert import ifc_to_gregorian
            return ifc_to_gregorian(self.year, self.month, self.day)
        return date(self.year, self.month, self.day)
