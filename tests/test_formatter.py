# tests/test_formatter.py

import pytest

import fadate
from fadate import DateValue, EditorConfig

V = DateValue.from_gregorian(2021, 3, 21, 22, 5)


def test_short_date():
    assert fadate.format_value(V) == "1400/01/01"
    assert fadate.format_value(V, "short_date", "gregorian") == "2021/03/21"


def test_date_short_time():
    assert fadate.format_value(V, "date_short_time") == "1400/01/01 10:05 ب.ظ"
    midnight = DateValue.from_gregorian(2021, 3, 21, 0, 0)
    assert fadate.format_value(midnight, "date_short_time") == "1400/01/01 12:00 ق.ظ"


def test_full_date_time_is_24_hour():
    assert fadate.format_value(V, "full_date_time") == "1400/01/01 22:05"


def test_none_formats_as_empty_label():
    assert fadate.format_value(None) == EditorConfig().empty_label
    assert fadate.format_value(None, config=EditorConfig(empty_label="-")) == "-"


def test_marker_padding_keeps_layout_fixed_width():
    cfg = EditorConfig(am_marker="a.m.", pm_marker="PM")
    text = fadate.format_value(V, "date_short_time", "gregorian", config=cfg)
    assert text == "2021/03/21 10:05 PM  "
    assert fadate.parse(text, "gregorian", config=cfg) == V


@pytest.mark.parametrize("kind", ["short_date", "date_short_time", "full_date_time"])
@pytest.mark.parametrize("calendar", ["persian", "gregorian"])
def test_parse_inverts_format(kind, calendar):
    v = DateValue.from_gregorian(2025, 3, 20, 13, 40)
    if kind == "short_date":
        v = v.with_time(0, 0)
    text = fadate.format_value(v, kind, calendar)
    assert fadate.parse(text, calendar) == v


def test_format_list():
    values = fadate.parse_list("1400/01/01;1399/12/30")
    assert fadate.format_list(values) == "1400/01/01;1399/12/30"
    assert fadate.format_list(values, "|", calendar="gregorian") == "2021/03/21|2021/03/20"


def test_format_empty_list():
    assert fadate.format_list([]) == EditorConfig().empty_label


def test_unknown_format():
    with pytest.raises(KeyError):
        fadate.format_value(V, "long_date")
