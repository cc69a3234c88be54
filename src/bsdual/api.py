from __future__ import annotations

from typing import Any, Dict, List, Optional

from . import cursor as _cursor
from .core.oracle import CalendarOracle, OracleRegistry
from .core.oracle import convert as _convert, days_in_month as _days_in_month
from .core.types import DualDate, HeaderLabels, MonthCursor, MonthGrid, Selection
from .formatting import DEFAULT_TEMPLATE, format_date
from .grid import month_grid as _month_grid
from .ranges import header_labels as _header_labels

DEFAULT_ORACLE = "nepali_datetime"
_registry: Optional[OracleRegistry] = None

def set_registry(reg: OracleRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> OracleRegistry:
    if _registry is None:
        raise RuntimeError("Oracle registry not initialized")
    return _registry

def list_oracles() -> List[str]:
    return _reg().list()

def oracle_info(oracle: str = DEFAULT_ORACLE) -> Dict[str, Any]:
    return _reg().get(oracle).info()

def register_oracle(name: str, oracle: CalendarOracle, *, overwrite: bool = False) -> None:
    _reg().register(name, oracle, overwrite=overwrite)

# ============================================================
# Conversion helpers
# ============================================================

def convert(year: int, month: int, day: int, *, calendar: str, oracle: str = DEFAULT_ORACLE) -> DualDate:
    """Pair a concrete day given in `calendar` ("bs" or "ad", 0-based month) with its equivalent."""
    return _convert(_reg().get(oracle), calendar, year, month, day)

def days_in_month(year: int, month: int, *, calendar: str, oracle: str = DEFAULT_ORACLE) -> int:
    return _days_in_month(_reg().get(oracle), calendar, year, month)

def today(*, oracle: str = DEFAULT_ORACLE) -> DualDate:
    return _reg().get(oracle).now()

# ============================================================
# Cursor API
# ============================================================

def init_cursor(value: Optional[str] = None, *, language: str = "np", oracle: str = DEFAULT_ORACLE) -> MonthCursor:
    return _cursor.init_cursor(value, language, _reg().get(oracle), oracle_name=oracle)

def advance(cursor: MonthCursor, delta: int) -> MonthCursor:
    return _cursor.advance(cursor, delta, _reg().get(cursor.oracle))

def select_day(cursor: MonthCursor, day: int, *, template: str = DEFAULT_TEMPLATE) -> Selection:
    new = _cursor.select_day(cursor, day, _reg().get(cursor.oracle))
    selected = new.selected
    return Selection(
        cursor=new,
        selected=selected,
        formatted={
            "english": format_date(selected, "en", template),
            "nepali": format_date(selected, "np", template),
        },
    )

def header_labels(cursor: MonthCursor) -> HeaderLabels:
    return _header_labels(cursor, _reg().get(cursor.oracle))

def month_grid(cursor: MonthCursor) -> MonthGrid:
    return _month_grid(cursor, _reg().get(cursor.oracle))

def selected_text(cursor: MonthCursor, template: str = DEFAULT_TEMPLATE) -> str:
    """What the input field shows: the selection in the cursor language, or ''."""
    if cursor.selected is None:
        return ""
    return format_date(cursor.selected, cursor.language, template)
