from __future__ import annotations
import re
from typing import Tuple

from .errors import InvalidDateString

_AD_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

_YMD_RE = re.compile(r"^\s*([0-9]{1,4})[-/]([0-9]{1,2})[-/]([0-9]{1,2})\s*$")


def is_gregorian_leap(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_ad_month(year: int, month: int) -> int:
    """Gregorian month length; month is 0-based."""
    if month == 1 and is_gregorian_leap(year):
        return 29
    return _AD_MONTH_DAYS[month]


def normalize_month(year: int, month: int) -> Tuple[int, int]:
    """Carry an out-of-range 0-based month into the year (floor semantics, so
    negative months borrow correctly)."""
    return year + month // 12, month % 12


def parse_ymd(value: str) -> Tuple[int, int, int]:
    """Parse ASCII 'YYYY-MM-DD' (or '/'-separated) into (year, 0-based month, day).

    Only the shape and the month range are checked here; the day limit depends
    on the calendar and is checked by the caller.
    """
    m = _YMD_RE.match(value) if isinstance(value, str) else None
    if m is None:
        raise InvalidDateString(f"Expected YYYY-MM-DD, got {value!r}")
    y, mo, d = (int(g) for g in m.groups())
    if not 1 <= mo <= 12:
        raise InvalidDateString(f"Month {mo} out of range in {value!r}")
    if d < 1:
        raise InvalidDateString(f"Day {d} out of range in {value!r}")
    return y, mo - 1, d
