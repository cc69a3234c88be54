"""Diagnostics package.

- pretty_month: header labels and day grid for one month
- round_trip: BS -> AD -> BS consistency of an oracle
"""

__all__ = ["pretty_month", "round_trip"]
