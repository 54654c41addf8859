"""
fadate.session
--------------
The value/cursor state of one date editor. A host widget owns exactly one
EditorSession per control and calls into it from its event handlers:

    text changed   -> validate(text)
    focus lost     -> commit(text)
    wheel / arrows -> step(delta, offset=cursor)

Nothing here raises on user input; every outcome is an EditResult and the
host decides what to display.

Every change of the stored value goes through ``on_changing(old, new)``
when the host supplies one. Returning None accepts the change; returning a
string vetoes it, and the string (or a default) becomes the error message.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Union

from .api import get_calendar
from .core.config import DEFAULT_CONFIG, EditorConfig
from .core.errors import RejectedError
from .core.result import EditResult, capture
from .core.types import DateValue, FieldName, SelectionRange, StepResult
from .text.formatter import format_list, format_value
from .text.layout import FormatKind, get_format
from .text.navigator import Navigator
from .text.normalizer import normalize_or_today
from .text.parser import is_empty_label, parse, parse_list

logger = logging.getLogger(__name__)

Parsed = Union[Optional[DateValue], List[DateValue]]
ChangeHook = Callable[[Parsed, Parsed], Optional[str]]

VETO_MESSAGE = "the change was cancelled"


class EditorSession:
    def __init__(
        self,
        calendar: str = "persian",
        kind: "str | FormatKind" = "short_date",
        config: EditorConfig = DEFAULT_CONFIG,
        *,
        multi_select: bool = False,
        read_only: bool = False,
        on_changing: Optional[ChangeHook] = None,
    ):
        self.config = config
        self.kind = get_format(kind)
        self.multi_select = multi_select
        self.read_only = read_only
        self.on_changing = on_changing
        self.value: Optional[DateValue] = None
        self.selection = SelectionRange(separator=config.separator)
        self.cursor = 0
        self.pending_text: Optional[str] = None
        self.set_calendar(calendar)

    # ---------------------------------------------------------
    # Configuration
    # ---------------------------------------------------------

    def set_calendar(self, calendar: str) -> None:
        """Switch calendars; text typed under the old one is dropped."""
        self.engine = get_calendar(calendar)
        self.calendar = calendar
        self.pending_text = None

    @property
    def is_null(self) -> bool:
        if self.multi_select:
            return len(self.selection) == 0
        return self.value is None

    def _current(self) -> Parsed:
        if self.multi_select:
            return list(self.selection.values)
        return self.value

    def _store(self, new: Parsed) -> EditResult[Parsed]:
        """Store ``new`` unless the change hook vetoes it."""
        old = self._current()
        if self.on_changing is not None and new != old:
            veto = self.on_changing(old, new)
            if veto is not None:
                logger.debug("change %r -> %r vetoed: %r", old, new, veto)
                return EditResult(error=RejectedError(veto or VETO_MESSAGE))
        if self.multi_select:
            self.selection = SelectionRange(tuple(new or ()), self.config.separator)
        else:
            self.value = new
        return EditResult(value=new)

    def set_value(self, value: Optional[DateValue]) -> EditResult[Parsed]:
        return self._store(value)

    def set_selection(self, values: List[DateValue]) -> EditResult[Parsed]:
        return self._store(list(values))

    def clear(self) -> None:
        self.value = None
        self.selection = SelectionRange(separator=self.config.separator)
        self.pending_text = None

    # ---------------------------------------------------------
    # Text
    # ---------------------------------------------------------

    def text(self) -> str:
        if self.multi_select:
            return format_list(self.selection, self.config.separator, self.kind, self.engine, config=self.config)
        return format_value(self.value, self.kind, self.engine, config=self.config)

    def _parse(self, text: str) -> Parsed:
        if self.multi_select:
            return parse_list(text, self.config.separator, self.engine, config=self.config)
        return parse(text, self.engine, config=self.config)

    def validate(self, text: str) -> EditResult[Parsed]:
        """Live validation of the current text; no state change."""
        self.pending_text = text
        return capture(self._parse, text)

    def commit(self, text: str, *, today: Optional[DateValue] = None) -> EditResult[Parsed]:
        """
        Focus-loss flow: repair typed text, parse it and store the result.

        Repair only runs for single values on navigable layouts. When repair
        fails the current date is used and the failure is still reported.
        A read-only session refuses the commit and keeps its value.
        """
        if self.read_only:
            return EditResult(error=RejectedError("the editor is read-only"))

        repair_error = None
        if self._repairable(text):
            repaired = normalize_or_today(text, self.engine, today=today, kind=self.kind, config=self.config)
            if not repaired.ok:
                logger.debug("commit %r: repair failed, using %r", text, repaired.value)
                repair_error = repaired.error
            text = repaired.value

        result = capture(self._parse, text)
        if not result.ok:
            return result
        stored = self._store(result.value)
        if not stored.ok:
            return stored
        self.pending_text = None
        if repair_error is not None:
            return EditResult(value=result.value, error=repair_error)
        return result

    def _repairable(self, text: str) -> bool:
        return (
            not self.multi_select
            and self.kind.navigable
            and bool(text.strip())
            and not is_empty_label(text, self.config)
        )

    # ---------------------------------------------------------
    # Navigation
    # ---------------------------------------------------------

    def field_at(self, offset: int) -> FieldName:
        return Navigator(self.kind, self.engine, self.config).field_at(offset)

    def step(self, delta: int, offset: Optional[int] = None) -> EditResult[StepResult]:
        """Step the field under the cursor (or ``offset``) and keep it selected."""
        if self.read_only:
            return EditResult(error=RejectedError("the editor is read-only"))
        if not self.kind.navigable:
            return EditResult(error=RejectedError(f"format '{self.kind.name}' has no steppable fields"))
        if self.multi_select or self.value is None:
            return EditResult(error=RejectedError("there is no single value to step"))
        if offset is not None:
            self.cursor = offset
        nav = Navigator(self.kind, self.engine, self.config)
        res = nav.step_at(self.value, self.cursor, delta)
        stored = self._store(res.value)
        if not stored.ok:
            return EditResult(error=stored.error)
        self.cursor = res.selection.start
        self.pending_text = None
        return EditResult(value=res)
