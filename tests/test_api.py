# tests/test_api.py

from datetime import datetime

import pytest

import fadate
from fadate import CalendarFields, DateValue
from fadate.api import set_registry
from fadate.bootstrap import build_registry
from fadate.core.errors import OutOfRangeError
from fadate.core.result import capture
from fadate.engines.specs import PERSIAN


@pytest.fixture
def fresh_registry():
    set_registry(build_registry())
    yield
    set_registry(build_registry())


def test_list_calendars():
    assert fadate.list_calendars() == ["gregorian", "persian"]


def test_calendar_info():
    info = fadate.calendar_info("persian")
    assert info["cycle"] == {"Q": 33, "ell": 8, "phase": 29}
    assert "label" in info
    with pytest.raises(KeyError):
        fadate.calendar_info("hebrew")


def test_convert_between_any_pair():
    assert fadate.convert(1400, 1, 1, source="persian", target="gregorian") == (2021, 3, 21)
    assert fadate.convert(1400, 1, 1, source="persian", target="persian") == (1400, 1, 1)


def test_fields_and_from_fields():
    v = fadate.from_fields("persian", 1400, 1, 1, 10, 30)
    assert fadate.fields(v, "gregorian") == CalendarFields("gregorian", 2021, 3, 21, 10, 30)
    assert fadate.fields(v).ymd == (1400, 1, 1)
    assert v.gregorian() == (2021, 3, 21)


def test_today_is_now():
    before = DateValue.now().jdn
    t = fadate.today("gregorian")
    after = DateValue.now().jdn
    assert fadate.get_calendar("gregorian").to_jdn(t.year, t.month, t.day) in (before, after)


def test_register_alias(fresh_registry):
    fadate.register_calendar("jalali", fadate.get_calendar("persian"))
    assert fadate.parse("1400/01/01", "jalali") == fadate.parse("1400/01/01")
    with pytest.raises(KeyError):
        fadate.register_calendar("jalali", fadate.get_calendar("persian"))
    fadate.register_calendar("jalali", fadate.get_calendar("gregorian"), overwrite=True)
    assert fadate.format_value(fadate.parse("1400/01/01"), calendar="jalali") == "2021/03/21"


def test_third_calendar_needs_no_navigation_changes(fresh_registry):
    # A 4-year cycle with one leap year, built from the same engine family
    spec = PERSIAN.tweak(Q=4, ell=1, phase=3)
    fadate.register_calendar("quad", fadate.make_engine(spec))
    assert fadate.is_leap_year(1, "quad")
    assert not fadate.is_leap_year(2, "quad")

    v = fadate.parse("0001/12/30", "quad")
    assert fadate.step(v, "year", +1, calendar="quad").text == "0002/12/29"
    assert fadate.step(v, "day", +1, calendar="quad").text == "0002/01/01"
    assert fadate.step(v, "month", +1, calendar="quad").text == "0001/01/30"


def test_date_value_ordering_and_equality():
    a = fadate.parse("1400/01/01 10:00")
    b = fadate.parse("2021/03/21 10:00", "gregorian")
    c = fadate.parse("1400/01/01 10:01")
    assert a == b
    assert a < c
    assert sorted([c, a, fadate.parse("1399/12/30")])[0] == fadate.parse("1399/12/30")


def test_date_value_clock():
    v = DateValue.from_datetime(datetime(2021, 3, 21, 0, 5))
    assert (v.hour12, v.meridiem) == (12, "am")
    v = v.with_time(12, 0)
    assert (v.hour12, v.meridiem) == (12, "pm")
    v = v.with_time(13, 30)
    assert (v.hour12, v.meridiem) == (1, "pm")
    assert v.to_datetime() == datetime(2021, 3, 21, 13, 30)


def test_date_value_range():
    with pytest.raises(OutOfRangeError):
        DateValue.from_gregorian(2021, 2, 30)
    with pytest.raises(OutOfRangeError):
        DateValue.from_gregorian(500, 1, 1)
    with pytest.raises(OutOfRangeError):
        DateValue.from_gregorian(2021, 1, 1, 24, 0)


def test_capture_classifies_errors():
    res = capture(fadate.parse, "1400/13/01")
    assert not res.ok
    assert res.kind == "OutOfRange"
    assert "13" in res.message
    with pytest.raises(OutOfRangeError):
        res.unwrap()

    res = capture(fadate.parse, "1400/01/01")
    assert res.ok and res.kind is None and res.message == ""
    assert res.unwrap() == fadate.parse("1400/01/01")


def test_capture_lets_misuse_propagate():
    with pytest.raises(ValueError):
        capture(fadate.parse_list, "1400/01/01", "/")
