"""
bsdual.cursor
-------------
Month navigation over an immutable MonthCursor.

The selected day is always fixed in the primary calendar and converted
through the oracle. The anchor keeps one month pointer per calendar and
steps both by the same delta, so a sequence of moves that sums to zero
lands back on the starting months.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

from .core.errors import DayOutOfRange, InvalidDateString
from .core.oracle import CalendarOracle, convert, days_in_month
from .core.time import normalize_month, parse_ymd
from .core.types import MonthAnchor, MonthCursor, primary_calendar
from .numerals import to_ascii_digits

logger = logging.getLogger(__name__)


def init_cursor(
    value: Optional[str],
    language: str,
    oracle: CalendarOracle,
    *,
    oracle_name: str,
) -> MonthCursor:
    calendar = primary_calendar(language)

    if value is None:
        today = oracle.now()
        return MonthCursor(anchor=MonthAnchor.of(today), language=language, oracle=oracle_name)

    y, m, d = parse_ymd(to_ascii_digits(value) if isinstance(value, str) else value)
    limit = days_in_month(oracle, calendar, y, m)
    if d > limit:
        raise InvalidDateString(f"Day {d} out of range 1..{limit} in {value!r}")

    selected = convert(oracle, calendar, y, m, d)
    logger.debug("init %s cursor at %s -> %s", language, value, selected)
    return MonthCursor(
        anchor=MonthAnchor.of(selected),
        language=language,
        oracle=oracle_name,
        selected=selected,
    )


def advance(cursor: MonthCursor, delta: int, oracle: CalendarOracle) -> MonthCursor:
    a = cursor.anchor
    bs_year, bs_month = normalize_month(a.bs_year, a.bs_month + delta)
    ad_year, ad_month = normalize_month(a.ad_year, a.ad_month + delta)
    anchor = MonthAnchor(bs_year, bs_month, ad_year, ad_month)

    calendar = cursor.primary
    y, m = anchor.month_of(calendar)
    day = cursor.selected.day_of(calendar) if cursor.selected is not None else 1
    day = min(day, days_in_month(oracle, calendar, y, m))

    selected = convert(oracle, calendar, y, m, day)
    logger.debug("advance %+d: %s -> %s, selected %s", delta, a, anchor, selected)
    return replace(cursor, anchor=anchor, selected=selected)


def select_day(cursor: MonthCursor, day: int, oracle: CalendarOracle) -> MonthCursor:
    calendar = cursor.primary
    y, m = cursor.anchor.month_of(calendar)
    limit = days_in_month(oracle, calendar, y, m)
    if not 1 <= day <= limit:
        raise DayOutOfRange(day, limit)
    return replace(cursor, selected=convert(oracle, calendar, y, m, day))
