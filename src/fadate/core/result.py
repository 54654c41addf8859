from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Generic, Optional, TypeVar

from .errors import FADateError

T = TypeVar("T")


@dataclass(frozen=True)
class EditResult(Generic[T]):
    """
    Tagged outcome handed to the host widget.

    Either ``error`` is None and ``value`` holds the result (which may itself be
    None, e.g. the empty label), or ``error`` carries the classified failure.
    A failed result may still carry a ``value`` the host can fall back to.
    """
    value: Optional[T] = None
    error: Optional[FADateError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> Optional[str]:
        return None if self.error is None else self.error.kind

    @property
    def message(self) -> str:
        return "" if self.error is None else self.error.message

    def unwrap(self) -> Optional[T]:
        if self.error is not None:
            raise self.error
        return self.value


def capture(fn: Callable[..., T], *args: Any, **kwargs: Any) -> EditResult[T]:
    """Run fn; engine errors become a failed result, anything else propagates."""
    try:
        return EditResult(value=fn(*args, **kwargs))
    except FADateError as e:
        return EditResult(error=e)
