"""
fadate.engines.factory
----------------------
Transforms pure data specifications into live, executable engine objects.
"""

from __future__ import annotations
from fadate.core.engine import CalendarEngine
from fadate.engines.cycle_year import CycleYearEngine, CycleYearParams
from fadate.engines.gregorian import GregorianEngine, GregorianParams
from fadate.engines.specs import CalendarSpec


def make_engine(spec: CalendarSpec) -> CalendarEngine:
    """The universal entry point."""
    if isinstance(spec.params, CycleYearParams):
        return CycleYearEngine(spec.name, spec.params)
    if isinstance(spec.params, GregorianParams):
        return GregorianEngine(spec.name, spec.params)
    raise TypeError(f"Unknown calendar params type: {type(spec.params)}")
