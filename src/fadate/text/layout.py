"""
fadate.text.layout
------------------
Fixed canonical layouts. Every calendar shares them:

    short_date        yyyy/MM/dd
    date_short_time   yyyy/MM/dd hh:mm tt     (12-hour clock, meridiem marker)
    full_date_time    yyyy/MM/dd HH:mm        (24-hour clock, not navigable)

A layout is only a span table; all behavior lives in the formatter, parser
and navigator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Literal, Tuple

from ..core.config import EditorConfig
from ..core.types import FieldName, FieldSpan

DATE_SEP = "/"
TIME_SEP = ":"

FormatName = Literal["short_date", "date_short_time", "full_date_time"]

_DATE_SPANS = (
    FieldSpan("year", 0, 4),
    FieldSpan("month", 5, 2),
    FieldSpan("day", 8, 2),
)
_TIME_SPANS = (
    FieldSpan("hour", 11, 2),
    FieldSpan("minute", 14, 2),
)
MERIDIEM_START = 17


@dataclass(frozen=True)
class FormatKind:
    name: str
    has_time: bool
    twelve_hour: bool
    navigable: bool

    @property
    def fields(self) -> Tuple[FieldName, ...]:
        out: Tuple[FieldName, ...] = ("year", "month", "day")
        if self.has_time:
            out += ("hour", "minute")
        if self.twelve_hour:
            out += ("meridiem",)
        return out

    def spans(self, config: EditorConfig) -> Tuple[FieldSpan, ...]:
        out = _DATE_SPANS
        if self.has_time:
            out += _TIME_SPANS
        if self.twelve_hour:
            out += (FieldSpan("meridiem", MERIDIEM_START, config.marker_width),)
        return out

    def span(self, field: FieldName, config: EditorConfig) -> FieldSpan:
        for s in self.spans(config):
            if s.field == field:
                return s
        raise ValueError(f"Format '{self.name}' has no {field} field")

    def width(self, config: EditorConfig) -> int:
        return self.spans(config)[-1].end

    def field_at(self, offset: int, config: EditorConfig) -> FieldName:
        """
        Field addressed by a cursor offset.

        The separator after a field belongs to that field (offset 4 is still
        the year); offsets past the end address the last field.
        """
        if not self.navigable:
            raise ValueError(f"Format '{self.name}' does not support field navigation")
        if offset < 0:
            raise ValueError(f"offset must be >= 0, got {offset}")
        spans = self.spans(config)
        for s, nxt in zip(spans, spans[1:]):
            if offset < nxt.start:
                return s.field
        return spans[-1].field


SHORT_DATE = FormatKind("short_date", has_time=False, twelve_hour=False, navigable=True)
DATE_SHORT_TIME = FormatKind("date_short_time", has_time=True, twelve_hour=True, navigable=True)
FULL_DATE_TIME = FormatKind("full_date_time", has_time=True, twelve_hour=False, navigable=False)

ALL_FORMATS: Dict[str, FormatKind] = {
    "short_date": SHORT_DATE,
    "date_short_time": DATE_SHORT_TIME,
    "full_date_time": FULL_DATE_TIME,
}


def get_format(kind: "FormatKind | FormatName | str | None") -> FormatKind:
    if kind is None:
        return SHORT_DATE
    if isinstance(kind, FormatKind):
        return kind
    if kind not in ALL_FORMATS:
        raise KeyError(f"Unknown format '{kind}'. Available: {sorted(ALL_FORMATS)}")
    return ALL_FORMATS[kind]

