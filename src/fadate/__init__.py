"""fadate public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    calendar_info,
    get_calendar,
    make_engine,
    register_calendar,
    convert,
    to_gregorian,
    to_persian,
    is_leap_year,
    days_in_month,
    from_fields,
    fields,
    today,
    format_value,
    format_list,
    parse,
    parse_list,
    field_at,
    step,
    normalize,
    normalize_or_today,
)
from .core.config import EditorConfig
from .core.errors import FADateError, OutOfRangeError, ParseError, RejectedError, UnrecoverableError
from .core.result import EditResult
from .core.types import CalendarFields, DateValue, FieldSpan, SelectionRange, StepResult
from .session import EditorSession

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_calendar",
    "make_engine",
    "register_calendar",
    "convert",
    "to_gregorian",
    "to_persian",
    "is_leap_year",
    "days_in_month",
    "from_fields",
    "fields",
    "today",
    "format_value",
    "format_list",
    "parse",
    "parse_list",
    "field_at",
    "step",
    "normalize",
    "normalize_or_today",
    "EditorConfig",
    "FADateError",
    "OutOfRangeError",
    "ParseError",
    "RejectedError",
    "UnrecoverableError",
    "EditResult",
    "CalendarFields",
    "DateValue",
    "FieldSpan",
    "SelectionRange",
    "StepResult",
    "EditorSession",
]
