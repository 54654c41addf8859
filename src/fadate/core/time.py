from __future__ import annotations
from datetime import date

# Instants a DateValue may hold: both calendars must be able to name them.
# 1948320 is 0622-03-21, the first day of Persian year 1; 5373198 is
# 9999-03-20, the last day of Persian year 9377.
MIN_JDN = 1948320
MAX_JDN = 5373198
MINUTES_PER_DAY = 1440


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    return gregorian_to_jdn(d.year, d.month, d.day)


def gregorian_to_jdn(y: int, m: int, day: int) -> int:
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_gregorian(jdn: int) -> tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of gregorian_to_jdn."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def from_jdn(jdn: int) -> date:
    return date(*jdn_to_gregorian(jdn))
