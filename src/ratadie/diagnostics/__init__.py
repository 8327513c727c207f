"""Diagnostics package.

- pretty_month, round_trip: always available (standard library only)
- week_years: needs the `diagnostics` extras (numpy, matplotlib for --out)
"""

__all__ = ["pretty_month", "round_trip", "week_years"]
