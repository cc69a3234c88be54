from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Literal, Optional, Tuple

Calendar = Literal["bs", "ad"]
Language = Literal["np", "en"]

PRIMARY_CALENDAR: Dict[str, str] = {"np": "bs", "en": "ad"}

def primary_calendar(language: str) -> str:
    if language not in PRIMARY_CALENDAR:
        raise ValueError(f"Unknown language '{language}'. Available: {sorted(PRIMARY_CALENDAR)}")
    return PRIMARY_CALENDAR[language]

def other_calendar(calendar: str) -> str:
    return "ad" if calendar == "bs" else "bs"

@dataclass(frozen=True)
class DualDate:
    """One calendar day in both systems. Months are 0-based."""
    bs_year: int
    bs_month: int
    bs_day: int
    ad_year: int
    ad_month: int
    ad_day: int

    def bs(self) -> Tuple[int, int, int]:
        return (self.bs_year, self.bs_month, self.bs_day)

    def ad(self) -> Tuple[int, int, int]:
        return (self.ad_year, self.ad_month, self.ad_day)

    def fields(self, calendar: str) -> Tuple[int, int, int]:
        return self.bs() if calendar == "bs" else self.ad()

    def day_of(self, calendar: str) -> int:
        return self.fields(calendar)[2]

@dataclass(frozen=True)
class MonthAnchor:
    """The displayed month in both systems (day fixed at 1).

    The halves are advanced independently, so unlike DualDate they need not
    name the same day.
    """
    bs_year: int
    bs_month: int
    ad_year: int
    ad_month: int

    @classmethod
    def of(cls, d: DualDate) -> "MonthAnchor":
        return cls(d.bs_year, d.bs_month, d.ad_year, d.ad_month)

    def month_of(self, calendar: str) -> Tuple[int, int]:
        if calendar == "bs":
            return (self.bs_year, self.bs_month)
        return (self.ad_year, self.ad_month)

@dataclass(frozen=True)
class MonthCursor:
    anchor: MonthAnchor
    language: Language
    oracle: str
    selected: Optional[DualDate] = None

    @property
    def primary(self) -> str:
        return primary_calendar(self.language)

@dataclass(frozen=True)
class Selection:
    cursor: MonthCursor
    selected: DualDate
    formatted: Dict[str, str]

@dataclass(frozen=True)
class HeaderLabels:
    primary: str
    secondary_range: str

@dataclass(frozen=True)
class GridCell:
    day: int
    label: str
    secondary_label: str
    date: DualDate
    selected: bool = False

@dataclass(frozen=True)
class MonthGrid:
    year: int
    month: int
    calendar: Calendar
    leading_blanks: int
    day_names: Tuple[str, ...]
    cells: Tuple[GridCell, ...]
