from __future__ import annotations
import re
from datetime import date

from .errors import InvalidDateInput

_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    y, m, day = d.year, d.month, d.day
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    jdn = day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045
    return jdn

def from_jdn(jdn: int) -> date:
    """Fliegel-Van Flandern inverse of to_jdn (Gregorian)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return date(year, month, day)

def weekday_sunday0(d: date) -> int:
    """Day of week with 0=Sun..6=Sat (JDN 0 fell on a Monday)."""
    return (to_jdn(d) + 1) % 7

def nth_day_of_year(year: int, n: int) -> date:
    """The n-th day of `year`, counting Jan 1 as day 1."""
    return from_jdn(to_jdn(date(year, 1, 1)) + n - 1)

def parse_iso_date(text: str) -> date:
    """
    Parse strict ``YYYY-MM-DD`` user input.

    Raises InvalidDateInput for malformed text and for dates that do not
    exist (e.g. 2023-02-29).
    """
    s = text.strip() if isinstance(text, str) else ""
    m = _DATE_RE.match(s)
    if m is None:
        raise InvalidDateInput(str(text))
    y, mo, d = (int(g) for g in m.groups())
    try:
        return date(y, mo, d)
    except ValueError as e:
        raise InvalidDateInput(s, reason=str(e)) from e
