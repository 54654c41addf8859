from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Literal, Union

from .cycle_year import CycleYearParams
from .gregorian import GregorianParams


# ============================================================
# PERSIAN (SOLAR HIJRI) CONSTANTS
# ============================================================

# 33-year arithmetic cycle with 8 leap years: y mod 33 in {1,5,9,13,17,22,26,30}
Q_PERSIAN = 33
ELL_PERSIAN = 8
PHASE_PERSIAN = 29

# 1 Farvardin 1 AP; puts 1 Farvardin 1400 on 2021-03-21
EPOCH_JDN_PERSIAN = 1948320

# Farvardin..Shahrivar 31, Mehr..Bahman 30, Esfand 29 (30 in leap years)
MONTHS_PERSIAN = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)

# Last whole Persian year before Gregorian 10000; 9377/12/30 is 9999-03-20
MAX_YEAR_PERSIAN = 9377


@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a calendar engine."""
    kind: Literal["gregorian", "cycle_year"]
    name: str
    params: Union[GregorianParams, CycleYearParams]
    meta: Dict[str, Any]

    def tweak(self, **changes: Any) -> "CalendarSpec":
        return replace(self, params=replace(self.params, **changes))


PERSIAN = CalendarSpec(
    kind="cycle_year",
    name="persian",
    params=CycleYearParams(
        epoch_jdn=EPOCH_JDN_PERSIAN,
        Q=Q_PERSIAN,
        ell=ELL_PERSIAN,
        phase=PHASE_PERSIAN,
        month_lengths=MONTHS_PERSIAN,
        leap_month=12,
        max_year=MAX_YEAR_PERSIAN,
    ),
    meta={"label": "Solar Hijri (33-year arithmetic cycle)"},
)

GREGORIAN = CalendarSpec(
    kind="gregorian",
    name="gregorian",
    params=GregorianParams(),
    meta={"label": "Proleptic Gregorian"},
)

ALL_SPECS: Dict[str, CalendarSpec] = {
    "gregorian": GREGORIAN,
    "persian": PERSIAN,
}
