from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from .core.config import DEFAULT_CONFIG, EditorConfig
from .core.engine import CalendarEngine, EngineRegistry
from .core.result import EditResult
from .core.types import CalendarFields, DateValue, FieldName, StepResult
from .engines.factory import make_engine as _make_engine
from .engines.specs import ALL_SPECS, CalendarSpec
from .text import formatter as _formatter
from .text import navigator as _navigator
from .text import normalizer as _normalizer
from .text import parser as _parser
from .text.layout import FormatKind, get_format

CalendarT = Union[str, CalendarEngine]
FormatT = Union[str, FormatKind]

_registry: Optional[EngineRegistry] = None

def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def get_calendar(calendar: CalendarT) -> CalendarEngine:
    if isinstance(calendar, str):
        return _reg().get(calendar)
    return calendar

def list_calendars() -> List[str]:
    return _reg().list()

def calendar_info(calendar: str) -> Dict[str, Any]:
    info = get_calendar(calendar).info()
    spec = ALL_SPECS.get(calendar)
    if spec is not None:
        info = {**info, **spec.meta}
    return info

def make_engine(spec: CalendarSpec) -> CalendarEngine:
    return _make_engine(spec)

def register_calendar(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)

# ============================================================
# Conversion
# ============================================================

def convert(y: int, m: int, d: int, *, source: CalendarT, target: CalendarT) -> Tuple[int, int, int]:
    """Convert a date between any two registered calendars through its JDN."""
    return get_calendar(target).from_jdn(get_calendar(source).to_jdn(y, m, d))

def to_gregorian(y: int, m: int, d: int) -> Tuple[int, int, int]:
    """Persian (y, m, d) -> Gregorian (y, m, d)."""
    return convert(y, m, d, source="persian", target="gregorian")

def to_persian(y: int, m: int, d: int) -> Tuple[int, int, int]:
    """Gregorian (y, m, d) -> Persian (y, m, d)."""
    return convert(y, m, d, source="gregorian", target="persian")

def is_leap_year(year: int, calendar: CalendarT = "persian") -> bool:
    return get_calendar(calendar).is_leap_year(year)

def days_in_month(year: int, month: int, calendar: CalendarT = "persian") -> int:
    return get_calendar(calendar).days_in_month(year, month)

def from_fields(calendar: CalendarT, y: int, m: int, d: int, hour: int = 0, minute: int = 0) -> DateValue:
    return DateValue(get_calendar(calendar).to_jdn(y, m, d)).with_time(hour, minute)

def fields(value: DateValue, calendar: CalendarT = "persian") -> CalendarFields:
    eng = get_calendar(calendar)
    y, m, d = eng.from_jdn(value.jdn)
    return CalendarFields(eng.name, y, m, d, value.hour, value.minute)

def today(calendar: CalendarT = "persian") -> CalendarFields:
    return fields(DateValue.now(), calendar)

# ============================================================
# Text
# ============================================================

def format_value(
    value: Optional[DateValue],
    kind: FormatT = "short_date",
    calendar: CalendarT = "persian",
    *,
    config: EditorConfig = DEFAULT_CONFIG,
) -> str:
    return _formatter.format_value(value, get_format(kind), get_calendar(calendar), config=config)

def format_list(
    values: Iterable[DateValue],
    separator: str = ";",
    kind: FormatT = "short_date",
    calendar: CalendarT = "persian",
    *,
    config: EditorConfig = DEFAULT_CONFIG,
) -> str:
    return _formatter.format_list(values, separator, get_format(kind), get_calendar(calendar), config=config)

def parse(
    text: str,
    calendar: CalendarT = "persian",
    *,
    config: EditorConfig = DEFAULT_CONFIG,
    required: bool = False,
) -> Optional[DateValue]:
    return _parser.parse(text, get_calendar(calendar), config=config, required=required)

def parse_list(
    text: str,
    separator: str = ";",
    calendar: CalendarT = "persian",
    *,
    config: EditorConfig = DEFAULT_CONFIG,
) -> List[DateValue]:
    return _parser.parse_list(text, separator, get_calendar(calendar), config=config)

def field_at(offset: int, kind: FormatT = "short_date", *, config: EditorConfig = DEFAULT_CONFIG) -> FieldName:
    return get_format(kind).field_at(offset, config)

def step(
    value: DateValue,
    field: FieldName,
    delta: int,
    *,
    kind: FormatT = "short_date",
    calendar: CalendarT = "persian",
    config: EditorConfig = DEFAULT_CONFIG,
) -> StepResult:
    return _navigator.step(value, field, delta, kind=get_format(kind), engine=get_calendar(calendar), config=config)

def normalize(
    text: str,
    calendar: CalendarT = "persian",
    *,
    today: Optional[DateValue] = None,
    config: EditorConfig = DEFAULT_CONFIG,
) -> str:
    return _normalizer.normalize(text, get_calendar(calendar), today=today, config=config)

def normalize_or_today(
    text: str,
    calendar: CalendarT = "persian",
    *,
    today: Optional[DateValue] = None,
    kind: FormatT = "short_date",
    config: EditorConfig = DEFAULT_CONFIG,
) -> EditResult[str]:
    return _normalizer.normalize_or_today(
        text, get_calendar(calendar), today=today, kind=get_format(kind), config=config
    )
