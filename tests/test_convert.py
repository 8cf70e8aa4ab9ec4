# tests/test_convert.py

import random
from datetime import date, timedelta

import pytest

import ifcal
from ifcal import IFCDate, InvalidArgument


@pytest.mark.parametrize("year, expected", [
    (1900, False),
    (2000, True),
    (2023, False),
    (2024, True),
    (2100, False),
    (2400, True),
])
def test_is_leap_year(year, expected):
    assert ifcal.is_leap_year(year) is expected

def test_leap_rule_matches_calendar_module():
    import calendar
    for y in range(1, 3001):
        assert ifcal.is_leap_year(y) == calendar.isleap(y)

def test_day_of_year_matches_timetuple():
    d = date(2023, 1, 1)
    while d <= date(2024, 12, 31):
        assert ifcal.day_of_year(d) == d.timetuple().tm_yday
        d += timedelta(days=1)

def test_days_in_month():
    assert ifcal.days_in_month(2024, 2) == 29
    assert ifcal.days_in_month(2023, 2) == 28
    assert ifcal.days_in_month(2023, 4) == 30
    with pytest.raises(InvalidArgument):
        ifcal.days_in_month(2023, 13)

@pytest.mark.parametrize("d, text", [
    (date(2023, 1, 1), "January 1, 2023"),
    (date(2023, 1, 28), "January 28, 2023"),
    (date(2023, 1, 29), "February 1, 2023"),
    (date(2023, 6, 18), "Sol 1, 2023"),
    (date(2024, 6, 17), "Sol 1, 2024"),
    (date(2024, 7, 1), "Sol 15, 2024"),
    (date(2024, 2, 29), "March 4, 2024"),
    (date(2023, 12, 30), "December 28, 2023"),
    (date(2024, 12, 29), "December 28, 2024"),
])
def test_gregorian_to_ifc_ordinary(d, text):
    assert ifcal.format_ifc_date(ifcal.gregorian_to_ifc(d)) == text

def test_year_day_and_leap_day():
    assert ifcal.gregorian_to_ifc(date(2023, 12, 31)) == IFCDate.special_day(2023, "Year Day")
    # day 365 is Year Day even in a leap year
    assert ifcal.gregorian_to_ifc(date(2024, 12, 30)) == IFCDate.special_day(2024, "Year Day")
    # day 366 of a leap year is Leap Day
    assert ifcal.gregorian_to_ifc(date(2024, 12, 31)) == IFCDate.special_day(2024, "Leap Day")

def test_last_day_of_every_year_is_special():
    for y in range(1800, 2401):
        t = ifcal.gregorian_to_ifc(date(y, 12, 31))
        assert t.is_special
        assert t.special == ("Leap Day" if ifcal.is_leap_year(y) else "Year Day")

def test_ordinary_labels_ignore_leap_day_position():
    # Sol through December carry the same day-of-year label in common and leap years
    for doy in range(1, 365):
        a = ifcal.gregorian_to_ifc(date(2023, 1, 1) + timedelta(days=doy - 1))
        b = ifcal.gregorian_to_ifc(date(2024, 1, 1) + timedelta(days=doy - 1))
        assert (a.month, a.day) == (b.month, b.day)

@pytest.mark.parametrize("year", [2023, 2024, 1900, 2000])
def test_round_trip_full_year(year):
    d = date(year, 1, 1)
    ordinary = 0
    while d.year == year:
        t = ifcal.gregorian_to_ifc(d)
        if not t.is_special:
            ordinary += 1
            assert ifcal.ifc_to_gregorian(t.year, t.month_index, t.day) == d
            assert ifcal.ifc_date_to_gregorian(t) == d
        d += timedelta(days=1)
    assert ordinary == 364

def test_round_trip_random():
    random.seed(42)
    start = date(1600, 1, 1)
    for _ in range(5000):
        d0 = start + timedelta(days=random.randint(0, 292000))
        t = ifcal.gregorian_to_ifc(d0)
        if t.is_special:
            assert ifcal.day_of_year(d0) >= 365
        else:
            assert ifcal.ifc_date_to_gregorian(t) == d0

def test_ifc_to_gregorian_bounds():
    assert ifcal.ifc_to_gregorian(2023, 0, 1) == date(2023, 1, 1)
    assert ifcal.ifc_to_gregorian(2023, 12, 28) == date(2023, 12, 30)
    assert ifcal.ifc_to_gregorian(2024, 12, 28) == date(2024, 12, 29)
    assert ifcal.ifc_to_gregorian(2024, 6, 15) == date(2024, 7, 1)

@pytest.mark.parametrize("month_index, day", [(13, 1), (-1, 1), (0, 0), (0, 29)])
def test_ifc_to_gregorian_rejects_out_of_range(month_index, day):
    with pytest.raises(InvalidArgument):
        ifcal.ifc_to_gregorian(2024, month_index, day)

def test_special_day_has_no_gregorian_address():
    with pytest.raises(InvalidArgument):
        ifcal.ifc_date_to_gregorian(IFCDate.special_day(2024, "Leap Day"))

def test_ifc_months_table():
    assert len(ifcal.IFC_MONTHS) == 13
    assert ifcal.IFC_MONTHS[6] == "Sol"
    assert ifcal.IFC_MONTHS[7] == "July"
    assert ifcal.month_index("sol") == 6
    assert ifcal.month_index("December") == 12
    with pytest.raises(InvalidArgument):
        ifcal.month_index("Smarch")

def test_format():
    assert ifcal.format_ifc_date(IFCDate(year=2024, month="Sol", day=15)) == "Sol 15, 2024"
    assert ifcal.format_ifc_date(IFCDate.special_day(2024, "Year Day")) == "Year Day, 2024"
    assert ifcal.format_ifc_date(IFCDate.special_day(2024, "Leap Day")) == "Leap Day, 2024"
    assert ifcal.format_gregorian_date(date(2026, 10, 18)) == "October 18, 2026"

@pytest.mark.parametrize("kwargs", [
    dict(year=2024, month="Smarch", day=1),
    dict(year=2024, month="Sol", day=29),
    dict(year=2024, month="Sol", day=None),
    dict(year=2024, special="Leap Year"),
    dict(year=2024, month="Sol", day=1, special="Year Day"),
])
def test_ifc_date_validation(kwargs):
    with pytest.raises(InvalidArgument):
        IFCDate(**kwargs)

def test_ifc_date_properties():
    t = IFCDate(year=2024, month="Sol", day=3)
    assert not t.is_special
    assert t.month_index == 6
    s = IFCDate.special_day(2024, "Year Day")
    assert s.is_special
    assert s.month_index is None

@pytest.mark.parametrize("month_index, day", [(True, 1), (False, 1), (0, True)])
def test_ifc_to_gregorian_rejects_bools(month_index, day):
    with pytest.raises(InvalidArgument):
        ifcal.ifc_to_gregorian(2024, month_index, day)
