"""
fadate.text.parser
------------------
Text -> DateValue under one calendar engine.

Accepted shape (component widths are free, so partially typed text such as
``1400/1/5`` parses):

    Y/M/D
    Y/M/D H:MM            24-hour clock
    Y/M/D H:MM <marker>   12-hour clock, marker is the am or pm string

Persian and Arabic-Indic digits are read as ASCII digits.
"""

from __future__ import annotations

import re
from typing import List, Optional

from ..core.config import DEFAULT_CONFIG, EditorConfig, check_separator
from ..core.engine import CalendarEngine
from ..core.errors import OutOfRangeError, ParseError
from ..core.types import DateValue, hour24

_TO_ASCII_DIGITS = str.maketrans("۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩", "01234567890123456789")

_DATE_RE = re.compile(r"(\d+)/(\d+)/(\d+)", re.ASCII)
_TIME_RE = re.compile(r"(\d{1,2}):(\d{1,2})(?:\s*(\S.*))?", re.ASCII)
_WS_RE = re.compile(r"\s+")


def to_ascii_digits(text: str) -> str:
    return text.translate(_TO_ASCII_DIGITS)


def squeeze_whitespace(text: str) -> str:
    """Collapse every whitespace run (tabs, no-break spaces) to one space."""
    return _WS_RE.sub(" ", text)


def is_empty_label(text: str, config: EditorConfig = DEFAULT_CONFIG) -> bool:
    return text.strip() == config.empty_label.strip()


def parse(
    text: str,
    engine: CalendarEngine,
    *,
    config: EditorConfig = DEFAULT_CONFIG,
    required: bool = False,
) -> Optional[DateValue]:
    """
    Parse one date.

    Returns None for the empty label, and for blank text unless ``required``.
    Raises ParseError for malformed structure, OutOfRangeError for numbers the
    calendar rejects.
    """
    if is_empty_label(text, config):
        return None
    s = to_ascii_digits(text).strip()
    if not s:
        if required:
            raise ParseError("a date is required", text=text)
        return None

    date_part, _, time_part = squeeze_whitespace(s).partition(" ")
    m = _DATE_RE.fullmatch(date_part)
    if m is None:
        raise ParseError(_describe_date_error(date_part), text=text)
    year, month, day = (int(g) for g in m.groups())
    jdn = engine.to_jdn(year, month, day)

    minute_of_day = 0
    time_part = time_part.strip()
    if time_part:
        minute_of_day = _parse_time(time_part, text, config)
    return DateValue(jdn, minute_of_day)


def _describe_date_error(date_part: str) -> str:
    parts = date_part.split("/")
    if len(parts) != 3:
        return f"expected year/month/day, got {len(parts)} segment(s) in {date_part!r}"
    return f"non-numeric date component in {date_part!r}"


def _parse_time(time_part: str, text: str, config: EditorConfig) -> int:
    m = _TIME_RE.fullmatch(time_part)
    if m is None:
        raise ParseError(f"expected hour:minute, got {time_part!r}", text=text)
    hour, minute = int(m.group(1)), int(m.group(2))
    marker = m.group(3)
    if marker is not None:
        marker = marker.strip()
        if marker == config.am_marker.strip():
            hour = hour24(hour, "am")
        elif marker == config.pm_marker.strip():
            hour = hour24(hour, "pm")
        else:
            raise ParseError(f"unknown meridiem marker {marker!r}", text=text)
    elif not (0 <= hour <= 23):
        raise OutOfRangeError(f"hour {hour} is outside 0..23")
    if not (0 <= minute <= 59):
        raise OutOfRangeError(f"minute {minute} is outside 0..59")
    return hour * 60 + minute


def parse_list(
    text: str,
    separator: str,
    engine: CalendarEngine,
    *,
    config: EditorConfig = DEFAULT_CONFIG,
) -> List[DateValue]:
    """
    Parse a separator-joined list of dates, all or nothing.

    Blank text or the empty label is the empty list. Every segment is
    required; the first bad one aborts the call with its index attached.
    """
    check_separator(separator, config.reserved)
    if not text.strip() or is_empty_label(text, config):
        return []

    out: List[DateValue] = []
    for i, segment in enumerate(text.split(separator)):
        try:
            value = parse(segment, engine, config=config, required=True)
        except ParseError as e:
            raise ParseError(f"segment {i} ({segment!r}): {e.message}", segment=i, text=segment) from e
        except OutOfRangeError as e:
            raise OutOfRangeError(f"segment {i} ({segment!r}): {e.message}") from e
        if value is None:
            raise ParseError(f"segment {i} ({segment!r}): the empty label cannot appear in a list", segment=i, text=segment)
        out.append(value)
    return out
