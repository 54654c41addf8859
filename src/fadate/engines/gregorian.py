"""
fadate.engines.gregorian
------------------------
Proleptic Gregorian calendar on top of the JDN helpers in core.time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..core.errors import OutOfRangeError
from ..core.time import gregorian_to_jdn, jdn_to_gregorian

_MONTH_LENGTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True)
class GregorianParams:
    min_year: int = 1
    max_year: int = 9999


class GregorianEngine:
    def __init__(self, name: str, params: GregorianParams):
        self.name = name
        self.p = params
        self.min_year = params.min_year
        self.max_year = params.max_year

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": "gregorian",
            "years": (self.min_year, self.max_year),
        }

    def is_leap_year(self, year: int) -> bool:
        return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)

    def days_in_year(self, year: int) -> int:
        return 366 if self.is_leap_year(year) else 365

    def days_in_month(self, year: int, month: int) -> int:
        if not (1 <= month <= 12):
            raise OutOfRangeError(f"{self.name}: month {month} is outside 1..12")
        if month == 2 and self.is_leap_year(year):
            return 29
        return _MONTH_LENGTHS[month - 1]

    def validate(self, year: int, month: int, day: int) -> None:
        if not (self.min_year <= year <= self.max_year):
            raise OutOfRangeError(f"{self.name}: year {year} is outside {self.min_year}..{self.max_year}")
        last = self.days_in_month(year, month)
        if not (1 <= day <= last):
            raise OutOfRangeError(f"{self.name}: day {day} is outside 1..{last} for {year}/{month:02d}")

    def to_jdn(self, year: int, month: int, day: int) -> int:
        self.validate(year, month, day)
        return gregorian_to_jdn(year, month, day)

    def from_jdn(self, jdn: int) -> Tuple[int, int, int]:
        y, m, d = jdn_to_gregorian(jdn)
        if not (self.min_year <= y <= self.max_year):
            raise OutOfRangeError(f"{self.name}: JDN {jdn} falls in year {y}, outside {self.min_year}..{self.max_year}")
        return y, m, d
