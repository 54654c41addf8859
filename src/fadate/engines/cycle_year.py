"""
fadate.engines.cycle_year
-------------------------
Discrete arithmetic engine for solar calendars whose leap years follow a
fixed cycle: Q years per cycle, ell of them leap. The Persian (solar hijri)
calendar is the Q=33, ell=8 instance.

Leap rule: year y is leap iff (ell*y + phase) mod Q < ell, which spreads the
ell leap years as evenly as possible over the cycle. Counting leap years is
then a single floor division, so both directions are O(1) apart from a
bounded correction step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..core.errors import OutOfRangeError


@dataclass(frozen=True)
class CycleYearParams:
    epoch_jdn: int                  # JDN of day 1, month 1, year 1
    Q: int                          # years per cycle
    ell: int                        # leap years per cycle
    phase: int
    month_lengths: Tuple[int, ...]  # common year
    leap_month: int                 # month that gains the extra day
    max_year: int

    def __post_init__(self) -> None:
        if self.Q <= 0 or self.ell <= 0:
            raise ValueError("Q, ell must be positive")
        if not (self.ell < self.Q):
            raise ValueError("Require ell < Q")
        if not (0 <= self.phase < self.Q):
            raise ValueError("phase must be in 0..Q-1")
        if len(self.month_lengths) != 12:
            raise ValueError("month_lengths must list 12 months")
        if not (1 <= self.leap_month <= 12):
            raise ValueError("leap_month must be in 1..12")
        if self.max_year < 1:
            raise ValueError("max_year must be >= 1")

    @property
    def common_year_days(self) -> int:
        return sum(self.month_lengths)

    @property
    def cycle_days(self) -> int:
        return self.Q * self.common_year_days + self.ell


class CycleYearEngine:
    """
    Fully implements the CalendarEngine protocol for cycle-based solar years.
    """
    def __init__(self, name: str, params: CycleYearParams):
        self.name = name
        self.p = params
        self.min_year = 1
        self.max_year = params.max_year
        # Cumulative days before each month in a common year
        starts = [0]
        for n in params.month_lengths[:-1]:
            starts.append(starts[-1] + n)
        self._month_starts = tuple(starts)

    def info(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "kind": "cycle_year",
            "epoch_jdn": self.p.epoch_jdn,
            "cycle": {"Q": self.p.Q, "ell": self.p.ell, "phase": self.p.phase},
            "leap_remainders": self.leap_remainders(),
            "years": (self.min_year, self.max_year),
        }

    # ---------------------------------------------------------
    # Year arithmetic
    # ---------------------------------------------------------

    def is_leap_year(self, year: int) -> bool:
        p = self.p
        return (p.ell * year + p.phase) % p.Q < p.ell

    def leap_remainders(self) -> Tuple[int, ...]:
        """Positions (year mod Q) of the leap years within a cycle."""
        return tuple(r for r in range(self.p.Q) if self.is_leap_year(r))

    def leaps_before(self, year: int) -> int:
        """Number of leap years in 1..year-1."""
        p = self.p
        return (p.ell * (year - 1) + p.phase) // p.Q - p.phase // p.Q

    def new_year_jdn(self, year: int) -> int:
        return self.p.epoch_jdn + self.p.common_year_days * (year - 1) + self.leaps_before(year)

    def days_in_year(self, year: int) -> int:
        return self.p.common_year_days + (1 if self.is_leap_year(year) else 0)

    def days_in_month(self, year: int, month: int) -> int:
        if not (1 <= month <= 12):
            raise OutOfRangeError(f"{self.name}: month {month} is outside 1..12")
        n = self.p.month_lengths[month - 1]
        if month == self.p.leap_month and self.is_leap_year(year):
            n += 1
        return n

    # ---------------------------------------------------------
    # Conversion
    # ---------------------------------------------------------

    def validate(self, year: int, month: int, day: int) -> None:
        if not (self.min_year <= year <= self.max_year):
            raise OutOfRangeError(f"{self.name}: year {year} is outside {self.min_year}..{self.max_year}")
        last = self.days_in_month(year, month)
        if not (1 <= day <= last):
            raise OutOfRangeError(f"{self.name}: day {day} is outside 1..{last} for {year}/{month:02d}")

    def to_jdn(self, year: int, month: int, day: int) -> int:
        self.validate(year, month, day)
        return self.new_year_jdn(year) + self._month_starts[month - 1] + day - 1

    def from_jdn(self, jdn: int) -> Tuple[int, int, int]:
        p = self.p
        # Estimate from the mean year, then correct by at most a step each way
        year = (p.Q * (jdn - p.epoch_jdn)) // p.cycle_days + 1
        while self.new_year_jdn(year) > jdn:
            year -= 1
        while self.new_year_jdn(year + 1) <= jdn:
            year += 1
        if not (self.min_year <= year <= self.max_year):
            raise OutOfRangeError(f"{self.name}: JDN {jdn} falls in year {year}, outside {self.min_year}..{self.max_year}")

        doy = jdn - self.new_year_jdn(year)
        month = 12
        while self._month_starts[month - 1] > doy:
            month -= 1
        return year, month, doy - self._month_starts[month - 1] + 1
