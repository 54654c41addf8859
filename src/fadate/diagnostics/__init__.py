"""Diagnostics package.

- round_trip, pretty_month: always available, light-weight checks
- leap_years: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["pretty_month", "round_trip", "leap_years"]
