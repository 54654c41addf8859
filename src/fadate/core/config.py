from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Any

from .types import Meridiem

AM_MARKER_FA = "ق.ظ"
PM_MARKER_FA = "ب.ظ"
EMPTY_LABEL = "[Empty Value]"
DEFAULT_SEPARATOR = ";"


def check_separator(sep: str, reserved: str = "") -> str:
    """``reserved`` holds further characters the separator must avoid, e.g. the meridiem markers."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    if sep.isdigit() or sep.isspace() or sep in "/:":
        raise ValueError(f"separator {sep!r} collides with the date layout")
    if sep in reserved:
        raise ValueError(f"separator {sep!r} appears in a meridiem marker")
    return sep


@dataclass(frozen=True)
class EditorConfig:
    """Display strings the engine needs from the host (no global lookup)."""
    empty_label: str = EMPTY_LABEL
    separator: str = DEFAULT_SEPARATOR
    am_marker: str = AM_MARKER_FA
    pm_marker: str = PM_MARKER_FA

    def __post_init__(self) -> None:
        for marker in (self.am_marker, self.pm_marker):
            if not marker.strip():
                raise ValueError("meridiem markers must be non-empty")
            if any(ch.isdigit() or ch == ":" for ch in marker):
                raise ValueError(f"meridiem marker {marker!r} must not contain digits or ':'")
        if self.am_marker == self.pm_marker:
            raise ValueError("am and pm markers must differ")
        check_separator(self.separator, self.reserved)

    @property
    def reserved(self) -> str:
        return self.am_marker + self.pm_marker

    @property
    def marker_width(self) -> int:
        return max(len(self.am_marker), len(self.pm_marker))

    def marker(self, meridiem: Meridiem) -> str:
        return self.am_marker if meridiem == "am" else self.pm_marker

    def tweak(self, **changes: Any) -> "EditorConfig":
        return replace(self, **changes)


DEFAULT_CONFIG = EditorConfig()
