"""bsdual public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    DEFAULT_ORACLE,
    init_cursor,
    advance,
    select_day,
    header_labels,
    month_grid,
    selected_text,
    convert,
    days_in_month,
    today,
    list_oracles,
    oracle_info,
    register_oracle,
)
from .core.errors import (
    BsdualError,
    DayOutOfRange,
    InvalidDateString,
    OracleUnavailableError,
    UnsupportedEra,
    UnsupportedTemplate,
)
from .core.types import DualDate, HeaderLabels, MonthAnchor, MonthCursor, MonthGrid, Selection
from .formatting import DEFAULT_TEMPLATE, TEMPLATES, format_date, ordinal_suffix
from .numerals import to_localized_digits

__all__ = [
    "DEFAULT_ORACLE",
    "DEFAULT_TEMPLATE",
    "TEMPLATES",
    "init_cursor",
    "advance",
    "select_day",
    "header_labels",
    "month_grid",
    "selected_text",
    "format_date",
    "ordinal_suffix",
    "to_localized_digits",
    "convert",
    "days_in_month",
    "today",
    "list_oracles",
    "oracle_info",
    "register_oracle",
    "DualDate",
    "MonthAnchor",
    "MonthCursor",
    "MonthGrid",
    "HeaderLabels",
    "Selection",
    "BsdualError",
    "DayOutOfRange",
    "InvalidDateString",
    "OracleUnavailableError",
    "UnsupportedEra",
    "UnsupportedTemplate",
]
