"""Diagnostics package.

- pretty_year, pascha_table, round_trip: text output, no extra dependencies
- pascha_scatter: optional (requires the diagnostics extras: numpy, matplotlib)
"""

__all__ = ["pretty_year", "pascha_table", "round_trip", "pascha_scatter"]
