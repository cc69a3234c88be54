from __future__ import annotations

from typing import Dict, Tuple

from .core.oracle import CalendarOracle, convert, days_in_month
from .core.types import GridCell, MonthCursor, MonthGrid, other_calendar
from .numerals import localize

# Sunday first, matching weekday_of_first
DAY_NAMES: Dict[str, Tuple[str, ...]] = {
    "en": ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT"),
    "np": ("आईत", "सोम", "मंगल", "बुध", "बिही", "शुक्र", "शनि"),
}


def month_grid(cursor: MonthCursor, oracle: CalendarOracle) -> MonthGrid:
    """Day cells of the displayed primary month, each paired with the other
    calendar's day number in the other script."""
    calendar = cursor.primary
    secondary_lang = "en" if cursor.language == "np" else "np"
    y, m = cursor.anchor.month_of(calendar)
    selected = cursor.selected.fields(calendar) if cursor.selected is not None else None

    cells = []
    for day in range(1, days_in_month(oracle, calendar, y, m) + 1):
        d = convert(oracle, calendar, y, m, day)
        cells.append(GridCell(
            day=day,
            label=localize(day, cursor.language),
            secondary_label=localize(d.day_of(other_calendar(calendar)), secondary_lang),
            date=d,
            selected=(y, m, day) == selected,
        ))

    return MonthGrid(
        year=y,
        month=m,
        calendar=calendar,
        leading_blanks=oracle.weekday_of_first(y, m, calendar),
        day_names=DAY_NAMES[cursor.language],
        cells=tuple(cells),
    )
