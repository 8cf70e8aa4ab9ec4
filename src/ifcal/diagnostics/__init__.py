"""Diagnostics package.

- pretty_month, year_table, round_trip: always available, text output only
- offset_plot: requires the diagnostics extra (numpy, matplotlib)
"""

__all__ = ["pretty_month", "year_table", "round_trip", "offset_plot"]
