# tests/test_engines.py

import calendar as pycal
import random
from datetime import date

import pytest

import fadate
from fadate.core.errors import OutOfRangeError
from fadate.engines.cycle_year import CycleYearParams
from fadate.engines.specs import PERSIAN

# Persian date -> Gregorian date, checked against published calendars
KNOWN = [
    ((1357, 11, 22), (1979, 2, 11)),
    ((1378, 10, 11), (2000, 1, 1)),
    ((1399, 12, 30), (2021, 3, 20)),
    ((1400, 1, 1), (2021, 3, 21)),
    ((1403, 12, 30), (2025, 3, 20)),
    ((1404, 1, 1), (2025, 3, 21)),
]


@pytest.mark.parametrize("persian,gregorian", KNOWN)
def test_known_dates(persian, gregorian):
    assert fadate.to_gregorian(*persian) == gregorian
    assert fadate.to_persian(*gregorian) == persian


def test_leap_remainders_of_33_year_cycle():
    eng = fadate.get_calendar("persian")
    assert eng.leap_remainders() == (1, 5, 9, 13, 17, 22, 26, 30)


@pytest.mark.parametrize("year,leap", [(1399, True), (1400, False), (1401, False), (1403, True), (1404, False), (1408, True)])
def test_persian_leap_years(year, leap):
    assert fadate.is_leap_year(year, "persian") is leap


def test_esfand_has_30_days_iff_leap():
    for y in range(1, 3001):
        expected = 30 if fadate.is_leap_year(y, "persian") else 29
        assert fadate.days_in_month(y, 12, "persian") == expected


def test_persian_month_lengths():
    assert [fadate.days_in_month(1400, m, "persian") for m in range(1, 13)] == [31] * 6 + [30] * 5 + [29]


def test_gregorian_leap_rule_matches_stdlib():
    for y in range(1, 10000):
        assert fadate.is_leap_year(y, "gregorian") == pycal.isleap(y)


def test_gregorian_jdn_matches_ordinal():
    random.seed(42)
    eng = fadate.get_calendar("gregorian")
    for _ in range(5000):
        d = date.fromordinal(random.randint(1, date(9999, 12, 31).toordinal()))
        jdn = eng.to_jdn(d.year, d.month, d.day)
        # date.toordinal() is 1 on 0001-01-01, whose JDN is 1721426
        assert jdn == d.toordinal() + 1721425
        assert eng.from_jdn(jdn) == (d.year, d.month, d.day)


def test_year_lengths_are_consistent():
    eng = fadate.get_calendar("persian")
    for y in range(1, 3001):
        assert eng.to_jdn(y + 1, 1, 1) - eng.to_jdn(y, 1, 1) == eng.days_in_year(y)


def test_round_trip_month_edges_1_to_3000():
    for y in range(1, 3001):
        for m in range(1, 13):
            for d in (1, fadate.days_in_month(y, m, "persian")):
                assert fadate.to_persian(*fadate.to_gregorian(y, m, d)) == (y, m, d)


def test_round_trip_every_day_1300_to_1500():
    eng = fadate.get_calendar("persian")
    jdn = eng.to_jdn(1300, 1, 1)
    for y in range(1300, 1501):
        for m in range(1, 13):
            for d in range(1, eng.days_in_month(y, m) + 1):
                assert eng.to_jdn(y, m, d) == jdn
                assert eng.from_jdn(jdn) == (y, m, d)
                jdn += 1


@pytest.mark.parametrize(
    "ymd",
    [(1400, 0, 1), (1400, 13, 1), (1400, 1, 0), (1400, 1, 32), (1400, 7, 31), (1401, 12, 30), (0, 1, 1)],
)
def test_persian_out_of_range(ymd):
    with pytest.raises(OutOfRangeError):
        fadate.to_gregorian(*ymd)


@pytest.mark.parametrize("ymd", [(2021, 2, 29), (2021, 4, 31), (2021, 13, 1), (10000, 1, 1)])
def test_gregorian_out_of_range(ymd):
    with pytest.raises(OutOfRangeError):
        fadate.to_persian(*ymd)


def test_before_persian_epoch_is_out_of_range():
    with pytest.raises(OutOfRangeError):
        fadate.to_persian(600, 1, 1)


def test_cycle_params_validation():
    with pytest.raises(ValueError):
        CycleYearParams(epoch_jdn=0, Q=8, ell=33, phase=0, month_lengths=(30,) * 12, leap_month=12, max_year=10)
    with pytest.raises(ValueError):
        CycleYearParams(epoch_jdn=0, Q=33, ell=8, phase=0, month_lengths=(30,) * 11, leap_month=12, max_year=10)
    with pytest.raises(ValueError):
        PERSIAN.tweak(leap_month=13)


def test_persian_range_ends_inside_gregorian_9999():
    eng = fadate.get_calendar("persian")
    assert eng.max_year == 9377
    assert fadate.to_gregorian(9377, 12, 30) == (9999, 3, 20)
    with pytest.raises(OutOfRangeError):
        eng.validate(9378, 1, 1)
    with pytest.raises(OutOfRangeError):
        fadate.to_persian(9999, 3, 21)
    with pytest.raises(OutOfRangeError):
        fadate.DateValue.from_gregorian(9999, 3, 21)
    assert fadate.fields(fadate.DateValue.from_gregorian(9999, 3, 20)).ymd == (9377, 12, 30)
