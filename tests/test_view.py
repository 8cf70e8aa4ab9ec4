# tests/test_view.py

from datetime import date

import pytest

import ifcal
from ifcal import InvalidArgument, InvalidDateInput, Selection

TODAY = date(2026, 10, 18)


def test_render_maps_cell_flags():
    cells = ifcal.generate_gregorian_grid(2026, 10, date(2026, 10, 5), today=TODAY)
    view = ifcal.render(cells, title="X")
    assert view.title == "X"
    assert len(view.cells) == 42
    assert view.day_names == ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")
    assert [cv.label for cv in view.cells[:5]] == ["27", "28", "29", "30", "1"]
    assert [cv.muted for cv in view.cells[:5]] == [True, True, True, True, False]
    assert [cv.target for cv in view.cells if cv.selected] == [date(2026, 10, 5)]
    assert [cv.target for cv in view.cells if cv.today] == [TODAY]
    assert len(view.weeks()) == 6

def test_month_titles():
    assert ifcal.render_gregorian_month(2026, 10, today=TODAY).title == "OCTOBER 2026"
    v = ifcal.render_ifc_month(2024, 6, today=TODAY)
    assert v.title == "Sol 2024"
    assert len(v.weeks()) == 4
    assert v.special is None

def test_render_special_day():
    v = ifcal.render_special_day(ifcal.IFCDate.special_day(2024, "Leap Day"))
    assert v.title == "SPECIAL 2024"
    assert v.special == "Leap Day"
    assert len(v.cells) == 1
    assert v.cells[0].selected and v.cells[0].target is None
    with pytest.raises(InvalidArgument):
        ifcal.render_special_day(ifcal.IFCDate(year=2024, month="Sol", day=1))

def test_render_pair_ordinary():
    pair = ifcal.render_pair(Selection.initial(TODAY), today=TODAY)
    assert pair.gregorian.title == "OCTOBER 2026"
    assert pair.ifc.title == "October 2026"
    assert pair.gregorian_footer == "October 11, 2026"
    assert pair.ifc_footer == "October 18, 2026"
    assert sum(cv.selected for cv in pair.gregorian.cells) == 1
    assert [cv.label for cv in pair.ifc.cells if cv.selected] == ["11"]

@pytest.mark.parametrize("d, kind", [(date(2024, 12, 31), "Leap Day"), (date(2024, 12, 30), "Year Day"), (date(2023, 12, 31), "Year Day")])
def test_render_pair_special_day(d, kind):
    pair = ifcal.render_pair(Selection.initial(d), today=TODAY)
    assert pair.ifc.special == kind
    assert len(pair.ifc.cells) == 1
    assert pair.gregorian_footer == f"{kind}, {d.year}"
    assert pair.gregorian.title == f"DECEMBER {d.year}"
    assert sum(cv.selected for cv in pair.gregorian.cells) == 1

def test_selection_follows_date():
    s = Selection.initial(TODAY)
    assert (s.year, s.month) == (2026, 10)
    s2 = s.select(date(2025, 3, 9))
    assert (s2.selected, s2.year, s2.month) == (date(2025, 3, 9), 2025, 3)
    assert s.selected == TODAY  # immutable
    assert s2.iso_value() == "2025-03-09"

def test_selection_click_ifc_cell_keeps_panels_in_sync():
    s = Selection.initial(TODAY)
    cell = ifcal.generate_ifc_grid(2024, 6, today=TODAY)[14]
    s2 = s.click(cell)
    assert s2.selected == date(2024, 7, 1)
    pair = ifcal.render_pair(s2, today=TODAY)
    assert pair.gregorian.title == "JULY 2024"
    assert pair.ifc.title == "Sol 2024"
    assert pair.gregorian_footer == "Sol 15, 2024"

def test_selection_click_adjacent_gregorian_cell():
    cells = ifcal.generate_gregorian_grid(2026, 10, today=TODAY)
    s = Selection.initial(TODAY).click(cells[0])
    assert (s.year, s.month, s.selected) == (2026, 9, date(2026, 9, 27))

def test_selection_from_iso():
    assert Selection.from_iso("2024-02-29").selected == date(2024, 2, 29)
    with pytest.raises(InvalidDateInput):
        Selection.from_iso("2024-02-30")

@pytest.mark.parametrize("text", ["9999-12-31", "9999-12-01", "0001-01-01"])
def test_selection_from_iso_refuses_unshowable_month(text):
    with pytest.raises(InvalidDateInput) as exc:
        Selection.from_iso(text)
    assert exc.value.text == text

def test_selection_from_iso_at_range_edges():
    assert Selection.from_iso("9999-11-30").month == 11
    assert Selection.from_iso("0001-02-01").month == 2
