"""
fadate.text.navigator
---------------------
Field stepping on the canonical layout (scroll wheel / arrow keys).

``step`` is pure: it returns the new value, its canonical text and the span
to select, and the host applies them. Only the engine's month lengths and
JDN conversions are used, so any registered calendar steps the same way.
"""

from __future__ import annotations

from ..core.config import DEFAULT_CONFIG, EditorConfig
from ..core.engine import CalendarEngine
from ..core.errors import OutOfRangeError
from ..core.types import DateValue, FieldName, StepResult
from .formatter import format_value
from .layout import FormatKind

MINUTE_STEP = 5


def _clamped_jdn(engine: CalendarEngine, year: int, month: int, day: int) -> int:
    return engine.to_jdn(year, month, min(day, engine.days_in_month(year, month)))


def step_value(value: DateValue, field: FieldName, delta: int, engine: CalendarEngine) -> DateValue:
    """
    Apply ``delta`` units of ``field`` to value.

    Raises OutOfRangeError when the result leaves the calendar's years;
    ``step`` turns that into a no-op.
    """
    if field == "day":
        return value.add_days(delta)

    if field in ("year", "month"):
        y, m, d = engine.from_jdn(value.jdn)
        if field == "year":
            y += delta
        else:
            # Wraps within the year: 12 + 1 -> 1, 1 - 1 -> 12
            m = (m - 1 + delta) % 12 + 1
        if not (engine.min_year <= y <= engine.max_year):
            raise OutOfRangeError(f"{engine.name}: year {y} is outside {engine.min_year}..{engine.max_year}")
        return value.with_jdn(_clamped_jdn(engine, y, m, d))

    if field == "hour":
        # 12-hour wrap, the meridiem is left alone
        h12 = (value.hour12 - 1 + delta) % 12 + 1
        return value.with_time((h12 % 12) + (12 if value.meridiem == "pm" else 0), value.minute)

    if field == "minute":
        snapped = value.minute - value.minute % MINUTE_STEP
        return value.with_time(value.hour, (snapped + delta * MINUTE_STEP) % 60)

    if field == "meridiem":
        return value.with_time((value.hour + 12) % 24, value.minute)

    raise ValueError(f"Unknown field '{field}'")


def step(
    value: DateValue,
    field: FieldName,
    delta: int,
    *,
    kind: FormatKind,
    engine: CalendarEngine,
    config: EditorConfig = DEFAULT_CONFIG,
) -> StepResult:
    if field not in kind.fields:
        raise ValueError(f"Format '{kind.name}' has no {field} field")
    try:
        new_value = step_value(value, field, delta, engine)
    except OutOfRangeError:
        # Saturate at the ends of the supported range
        new_value = value
    return StepResult(
        value=new_value,
        text=format_value(new_value, kind, engine, config=config),
        selection=kind.span(field, config),
    )


class Navigator:
    """Binds layout, calendar and display strings for one editor."""

    def __init__(self, kind: FormatKind, engine: CalendarEngine, config: EditorConfig = DEFAULT_CONFIG):
        if not kind.navigable:
            raise ValueError(f"Format '{kind.name}' does not support field navigation")
        self.kind = kind
        self.engine = engine
        self.config = config

    def field_at(self, offset: int) -> FieldName:
        return self.kind.field_at(offset, self.config)

    def step(self, value: DateValue, field: FieldName, delta: int) -> StepResult:
        return step(value, field, delta, kind=self.kind, engine=self.engine, config=self.config)

    def step_at(self, value: DateValue, offset: int, delta: int) -> StepResult:
        return self.step(value, self.field_at(offset), delta)
