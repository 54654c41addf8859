from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Tuple


class CalendarEngine(Protocol):
    name: str
    min_year: int
    max_year: int

    def info(self) -> Dict[str, Any]: ...
    def is_leap_year(self, year: int) -> bool: ...
    def days_in_month(self, year: int, month: int) -> int: ...
    def days_in_year(self, year: int) -> int: ...
    def validate(self, year: int, month: int, day: int) -> None: ...
    def to_jdn(self, year: int, month: int, day: int) -> int: ...
    def from_jdn(self, jdn: int) -> Tuple[int, int, int]: ...


@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        if name not in self._engines:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._engines)}")
        return self._engines[name]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._engines[name] = engine
