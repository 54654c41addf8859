from __future__ import annotations

from typing import Optional


class FADateError(Exception):
    """Base error."""

    kind = "Error"

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


class OutOfRangeError(FADateError):
    """Raised when numeric date components are invalid in the active calendar."""

    kind = "OutOfRange"


class ParseError(FADateError):
    """Raised when text does not have the structure of a date."""

    kind = "ParseError"

    def __init__(self, message: str, *, segment: Optional[int] = None, text: Optional[str] = None):
        super().__init__(message)
        self.segment = segment
        self.text = text


class UnrecoverableError(FADateError):
    """Raised when typed text cannot be repaired into a canonical date."""

    kind = "Unrecoverable"


class RejectedError(FADateError):
    """Raised when a session refuses an edit: nothing to step, read-only, or vetoed by the host."""

    kind = "Rejected"
