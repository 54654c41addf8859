"""
fadate.text.normalizer
----------------------
Focus-loss auto-correction of hand-typed dates, e.g. ``97/1/1`` ->
``1397/01/01``. Only the date part is repaired; a trailing time part is kept
as typed and checked by the parser.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..core.config import DEFAULT_CONFIG, EditorConfig
from ..core.engine import CalendarEngine
from ..core.errors import FADateError, UnrecoverableError
from ..core.result import EditResult
from ..core.types import DateValue
from .formatter import format_value
from .layout import DATE_SEP, SHORT_DATE, FormatKind
from .parser import parse, squeeze_whitespace, to_ascii_digits

logger = logging.getLogger(__name__)


def _repair_year(seg: str, today_year: int, fixes: List[str]) -> str:
    if len(seg) == 2:
        fixes.append("century")
        return f"{today_year:04d}"[:2] + seg
    if len(seg) != 4:
        fixes.append("year")
        return f"{today_year:04d}"
    return seg


def _repair_width(seg: str, name: str, fixes: List[str]) -> str:
    if len(seg) == 1:
        fixes.append(f"{name}-pad")
        return "0" + seg
    if len(seg) > 2:
        fixes.append(f"{name}-width")
        return "01"
    return seg


def normalize(
    text: str,
    engine: CalendarEngine,
    *,
    today: Optional[DateValue] = None,
    config: EditorConfig = DEFAULT_CONFIG,
) -> str:
    """
    Repair typed text into the canonical zero-padded layout.

    Raises UnrecoverableError when nothing usable is left or the repaired
    text still does not parse in this calendar.
    """
    s = squeeze_whitespace(to_ascii_digits(text)).strip()
    if not s:
        raise UnrecoverableError("nothing to repair")

    date_part, _, time_part = s.partition(" ")
    segs = date_part.split(DATE_SEP)
    if len(segs) != 3 or not all(seg.isdecimal() for seg in segs):
        raise UnrecoverableError(f"cannot read year/month/day from {text!r}")

    today = today or DateValue.now()
    today_year = engine.from_jdn(today.jdn)[0]

    fixes: List[str] = []
    year = _repair_year(segs[0], today_year, fixes)
    month = _repair_width(segs[1], "month", fixes)
    day = _repair_width(segs[2], "day", fixes)
    if not (1 <= int(month) <= 12):
        fixes.append("month-range")
        month = "12"
    if not (1 <= int(day) <= 31):
        fixes.append("day-range")
        day = "01"

    out = DATE_SEP.join((year, month, day))
    if time_part:
        out = f"{out} {time_part}"
    if fixes:
        logger.debug("normalize %r -> %r (%s)", text, out, ", ".join(fixes))

    try:
        parse(out, engine, config=config, required=True)
    except FADateError as e:
        raise UnrecoverableError(f"{out!r} is still not a valid {engine.name} date: {e.message}") from e
    return out


def normalize_or_today(
    text: str,
    engine: CalendarEngine,
    *,
    today: Optional[DateValue] = None,
    kind: FormatKind = SHORT_DATE,
    config: EditorConfig = DEFAULT_CONFIG,
) -> EditResult[str]:
    """normalize(), falling back to today's canonical text on failure."""
    today = today or DateValue.now()
    try:
        return EditResult(value=normalize(text, engine, today=today, config=config))
    except UnrecoverableError as e:
        fallback = format_value(today, kind, engine, config=config)
        logger.debug("normalize %r failed (%s); falling back to %r", text, e.message, fallback)
        return EditResult(value=fallback, error=e)
