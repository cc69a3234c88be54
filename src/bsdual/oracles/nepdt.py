"""
bsdual.oracles.nepdt
--------------------
CalendarOracle backed by the `nepali_datetime` lookup tables.

The library works with 1-based months; this adapter speaks the 0-based months
used throughout bsdual and maps out-of-table dates to UnsupportedEra.
"""

from __future__ import annotations

import datetime
from typing import Any, Dict, Tuple

import nepali_datetime

from bsdual.core.errors import UnsupportedEra
from bsdual.core.oracle import convert
from bsdual.core.types import DualDate

# Longest and shortest BS months in the tables
_BS_MONTH_LENGTHS = (32, 31, 30, 29)


class NepaliDatetimeOracle:
    def __init__(self, min_year: int = nepali_datetime.MINYEAR, max_year: int = nepali_datetime.MAXYEAR):
        self.min_year = min_year
        self.max_year = max_year
        self._first_ad = nepali_datetime.date(min_year, 1, 1).to_datetime_date()
        self._last_ad = nepali_datetime.date(max_year, 12, self.days_in_bs_month(max_year, 11)).to_datetime_date()

    def info(self) -> Dict[str, Any]:
        return {"name": "nepali_datetime", "bs_years": (self.min_year, self.max_year)}

    def _ad_date(self, year: int, month: int, day: int) -> datetime.date:
        if not datetime.MINYEAR <= year <= datetime.MAXYEAR:
            raise UnsupportedEra(f"AD year {year} outside {datetime.MINYEAR}..{datetime.MAXYEAR}")
        return datetime.date(year, month + 1, day)

    def _bs_date(self, year: int, month: int, day: int) -> "nepali_datetime.date":
        if not self.min_year <= year <= self.max_year:
            raise UnsupportedEra(f"BS year {year} outside supported range {self.min_year}..{self.max_year}")
        return nepali_datetime.date(year, month + 1, day)

    def bs_to_ad(self, year: int, month: int, day: int) -> Tuple[int, int, int]:
        d = self._bs_date(year, month, day).to_datetime_date()
        return (d.year, d.month - 1, d.day)

    def ad_to_bs(self, year: int, month: int, day: int) -> Tuple[int, int, int]:
        ad = self._ad_date(year, month, day)
        if not self._first_ad <= ad <= self._last_ad:
            raise UnsupportedEra(f"AD date {ad.isoformat()} outside supported range {self._first_ad}..{self._last_ad}")
        bs = nepali_datetime.date.from_datetime_date(ad)
        return (bs.year, bs.month - 1, bs.day)

    def days_in_bs_month(self, year: int, month: int) -> int:
        self._bs_date(year, month, 1)
        for n in _BS_MONTH_LENGTHS:
            try:
                nepali_datetime.date(year, month + 1, n)
            except ValueError:
                continue
            return n
        raise UnsupportedEra(f"No month length for BS {year}-{month + 1:02d}")

    def weekday_of_first(self, year: int, month: int, calendar: str) -> int:
        """0 = Sunday."""
        if calendar == "bs":
            first = self._bs_date(year, month, 1).to_datetime_date()
        else:
            first = self._ad_date(year, month, 1)
        return (first.weekday() + 1) % 7

    def now(self) -> DualDate:
        today = datetime.date.today()
        return convert(self, "ad", today.year, today.month - 1, today.day)
