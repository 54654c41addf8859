from __future__ import annotations

from typing import Iterable, Optional

from ..core.config import DEFAULT_CONFIG, EditorConfig, check_separator
from ..core.engine import CalendarEngine
from ..core.types import DateValue
from .layout import DATE_SEP, TIME_SEP, FormatKind


def format_value(
    value: Optional[DateValue],
    kind: FormatKind,
    engine: CalendarEngine,
    *,
    config: EditorConfig = DEFAULT_CONFIG,
) -> str:
    """Canonical zero-padded text; None renders as the empty label."""
    if value is None:
        return config.empty_label
    y, m, d = engine.from_jdn(value.jdn)
    text = f"{y:04d}{DATE_SEP}{m:02d}{DATE_SEP}{d:02d}"
    if not kind.has_time:
        return text
    if kind.twelve_hour:
        marker = config.marker(value.meridiem).ljust(config.marker_width)
        return f"{text} {value.hour12:02d}{TIME_SEP}{value.minute:02d} {marker}"
    return f"{text} {value.hour:02d}{TIME_SEP}{value.minute:02d}"


def format_list(
    values: Iterable[DateValue],
    separator: str,
    kind: FormatKind,
    engine: CalendarEngine,
    *,
    config: EditorConfig = DEFAULT_CONFIG,
) -> str:
    check_separator(separator, config.reserved)
    parts = [format_value(v, kind, engine, config=config) for v in values]
    if not parts:
        return config.empty_label
    return separator.join(parts)
