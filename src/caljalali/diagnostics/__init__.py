"""Diagnostics package.

- text tables: always available (round_trip, new_years_table, leap_years, pretty_month)
- plots: optional, require the diagnostics extras (nowruz_scatter)
"""

__all__ = ["pretty_month", "new_years_table", "round_trip", "leap_years", "nowruz_scatter"]
