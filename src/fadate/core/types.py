from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from typing import Literal, Optional, Tuple

from .errors import OutOfRangeError
from .time import MAX_JDN, MIN_JDN, MINUTES_PER_DAY, from_jdn, jdn_to_gregorian, to_jdn

FieldName = Literal["year", "month", "day", "hour", "minute", "meridiem"]
Meridiem = Literal["am", "pm"]


@dataclass(frozen=True, order=True)
class DateValue:
    """
    An absolute instant with minute precision.

    Stored as a Julian Day Number plus minutes since midnight, so equality and
    ordering are calendar independent. Calendar-local components come from a
    calendar engine (see ``fadate.api.fields``).
    """
    jdn: int
    minute_of_day: int = 0

    def __post_init__(self) -> None:
        if not (MIN_JDN <= self.jdn <= MAX_JDN):
            raise OutOfRangeError(f"JDN {self.jdn} is outside the supported range {MIN_JDN}..{MAX_JDN}")
        if not (0 <= self.minute_of_day < MINUTES_PER_DAY):
            raise OutOfRangeError(f"minute of day {self.minute_of_day} is outside 0..{MINUTES_PER_DAY - 1}")

    # ---------------------------------------------------------
    # Constructors
    # ---------------------------------------------------------

    @classmethod
    def from_gregorian(cls, year: int, month: int, day: int, hour: int = 0, minute: int = 0) -> "DateValue":
        try:
            d = date(year, month, day)
        except ValueError as e:
            raise OutOfRangeError(f"invalid Gregorian date {year}/{month}/{day}: {e}") from e
        return cls(to_jdn(d), _minute_of_day(hour, minute))

    @classmethod
    def from_date(cls, d: date) -> "DateValue":
        return cls(to_jdn(d))

    @classmethod
    def from_datetime(cls, dt: datetime) -> "DateValue":
        return cls(to_jdn(dt.date()), dt.hour * 60 + dt.minute)

    @classmethod
    def now(cls) -> "DateValue":
        return cls.from_datetime(datetime.now())

    # ---------------------------------------------------------
    # Time of day
    # ---------------------------------------------------------

    @property
    def hour(self) -> int:
        return self.minute_of_day // 60

    @property
    def minute(self) -> int:
        return self.minute_of_day % 60

    @property
    def hour12(self) -> int:
        """Hour on a 12-hour clock, 1..12."""
        return (self.hour % 12) or 12

    @property
    def meridiem(self) -> Meridiem:
        return "am" if self.hour < 12 else "pm"

    # ---------------------------------------------------------
    # Derived values
    # ---------------------------------------------------------

    def gregorian(self) -> Tuple[int, int, int]:
        return jdn_to_gregorian(self.jdn)

    def to_date(self) -> date:
        return from_jdn(self.jdn)

    def to_datetime(self) -> datetime:
        d = self.to_date()
        return datetime(d.year, d.month, d.day, self.hour, self.minute)

    def add_days(self, n: int) -> "DateValue":
        return DateValue(self.jdn + n, self.minute_of_day)

    def with_time(self, hour: int, minute: int) -> "DateValue":
        return DateValue(self.jdn, _minute_of_day(hour, minute))

    def with_jdn(self, jdn: int) -> "DateValue":
        return DateValue(jdn, self.minute_of_day)


def _minute_of_day(hour: int, minute: int) -> int:
    if not (0 <= hour <= 23):
        raise OutOfRangeError(f"hour {hour} is outside 0..23")
    if not (0 <= minute <= 59):
        raise OutOfRangeError(f"minute {minute} is outside 0..59")
    return hour * 60 + minute


def hour24(hour12: int, meridiem: Meridiem) -> int:
    """12-hour clock value (1..12) plus marker to 0..23."""
    if not (1 <= hour12 <= 12):
        raise OutOfRangeError(f"hour {hour12} is outside 1..12")
    return (hour12 % 12) + (12 if meridiem == "pm" else 0)


@dataclass(frozen=True)
class CalendarFields:
    """Components of a DateValue as seen by one calendar."""
    calendar: str
    year: int
    month: int
    day: int
    hour: int = 0
    minute: int = 0

    @property
    def ymd(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)


@dataclass(frozen=True)
class FieldSpan:
    field: FieldName
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True)
class StepResult:
    value: DateValue
    text: str
    selection: FieldSpan


@dataclass(frozen=True)
class SelectionRange:
    """Values picked in multi-select mode, in insertion order."""
    values: Tuple[DateValue, ...] = ()
    separator: str = ";"

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self):
        return iter(self.values)

    def add(self, *values: DateValue) -> "SelectionRange":
        return SelectionRange(self.values + tuple(values), self.separator)

    def first(self) -> Optional[DateValue]:
        return self.values[0] if self.values else None
