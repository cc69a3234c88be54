"""
bsdual.ranges
-------------
Labels the other calendar's months/years that overlap one anchor month.

Both endpoints are found by converting the anchor calendar's own first and
last day through the oracle; the other calendar is never stepped on its own.
"""

from __future__ import annotations

from typing import Tuple

from .core.oracle import CalendarOracle, convert, days_in_month
from .core.types import DualDate, HeaderLabels, MonthCursor, other_calendar
from .formatting import MONTH_NAMES, SHORT_MONTH_NAMES, month_year_title
from .numerals import to_localized_digits


def month_endpoints(year: int, month: int, calendar: str, oracle: CalendarOracle) -> Tuple[DualDate, DualDate]:
    last = days_in_month(oracle, calendar, year, month)
    return convert(oracle, calendar, year, month, 1), convert(oracle, calendar, year, month, last)


def _join(first: str, last: str, sep: str) -> str:
    return first if first == last else f"{first}{sep}{last}"


def month_name_range(year: int, month: int, calendar: str, oracle: CalendarOracle) -> str:
    """'Dec/Jan' for a BS anchor, 'पौष/माघ' for an AD anchor."""
    other = other_calendar(calendar)
    first, last = month_endpoints(year, month, calendar, oracle)
    names = SHORT_MONTH_NAMES["en"] if other == "ad" else MONTH_NAMES["np"]
    return _join(names[first.fields(other)[1]], names[last.fields(other)[1]], "/")


def year_range(year: int, month: int, calendar: str, oracle: CalendarOracle) -> str:
    other = other_calendar(calendar)
    first, last = month_endpoints(year, month, calendar, oracle)

    def label(y: int) -> str:
        return str(y) if other == "ad" else to_localized_digits(y)

    return _join(label(first.fields(other)[0]), label(last.fields(other)[0]), "-")


def secondary_range(year: int, month: int, calendar: str, oracle: CalendarOracle) -> str:
    return f"{month_name_range(year, month, calendar, oracle)} {year_range(year, month, calendar, oracle)}"


def header_labels(cursor: MonthCursor, oracle: CalendarOracle) -> HeaderLabels:
    y, m = cursor.anchor.month_of(cursor.primary)
    return HeaderLabels(
        primary=month_year_title(y, m, cursor.language),
        secondary_range=secondary_range(y, m, cursor.primary, oracle),
    )
