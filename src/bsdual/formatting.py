"""
bsdual.formatting
-----------------
Renders a DualDate into one of ten fixed layouts.

English output reads the AD half with ASCII numerals; Nepali output reads the
BS half, zero-pads each numeric field in ASCII and then transcodes it, so the
two digit sets never mix. Ordinal suffixes stay ASCII in both languages.
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple

from .core.errors import UnsupportedTemplate
from .core.types import DualDate
from .numerals import localize

logger = logging.getLogger(__name__)

MONTH_NAMES: Dict[str, Tuple[str, ...]] = {
    "en": (
        "January", "February", "March", "April", "May", "June",
        "July", "August", "September", "October", "November", "December",
    ),
    "np": (
        "बैशाख", "जेठ", "असार", "सावन", "भदौ", "असोज",
        "कार्तिक", "मंसिर", "पौष", "माघ", "फागुन", "चैत",
    ),
}

# Nepali names have no abbreviated form
SHORT_MONTH_NAMES: Dict[str, Tuple[str, ...]] = {
    "en": tuple(name[:3] for name in MONTH_NAMES["en"]),
    "np": MONTH_NAMES["np"],
}

DEFAULT_TEMPLATE = "YYYY-MM-DD"

_LAYOUTS: Dict[str, str] = {
    "YYYY/MM/DD": "{year}/{month}/{day}",
    "DD/MM/YYYY": "{day}/{month}/{year}",
    "MM/DD/YYYY": "{month}/{day}/{year}",
    "YYYY-MM-DD": "{year}-{month}-{day}",
    "MM-DD-YYYY": "{month}-{day}-{year}",
    "DD-MM-YYYY": "{day}-{month}-{year}",
    "MMM DD, YYYY": "{short_name} {day}, {year}",
    "DD MMM YYYY": "{day} {short_name} {year}",
    "MMMM DD, YYYY": "{month_name} {day}, {year}",
    "DDth MMMM, YYYY": "{ordinal_day} {month_name}, {year}",
}

TEMPLATES: Tuple[str, ...] = tuple(_LAYOUTS)


def ordinal_suffix(day: int) -> str:
    if day % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def resolve_template(template: str, *, strict: bool = False) -> str:
    if template in _LAYOUTS:
        return template
    if strict:
        raise UnsupportedTemplate(f"Unknown template {template!r}. Available: {list(TEMPLATES)}")
    logger.debug("unknown template %r, using %s", template, DEFAULT_TEMPLATE)
    return DEFAULT_TEMPLATE


def format_date(date: DualDate, language: str, template: str = DEFAULT_TEMPLATE) -> str:
    layout = _LAYOUTS[resolve_template(template)]
    if language == "np":
        year, month, day = date.bs()
        ordinal_day = localize(day, "np", width=2) + ordinal_suffix(day)
    elif language == "en":
        year, month, day = date.ad()
        ordinal_day = f"{day}{ordinal_suffix(day)}"
    else:
        raise ValueError(f"Unknown language '{language}'")

    return layout.format(
        year=localize(year, language),
        month=localize(month + 1, language, width=2),
        day=localize(day, language, width=2),
        month_name=MONTH_NAMES[language][month],
        short_name=SHORT_MONTH_NAMES[language][month],
        ordinal_day=ordinal_day,
    )


def month_year_title(year: int, month: int, language: str) -> str:
    """'पौष २०८१' / 'January 2025'."""
    return f"{MONTH_NAMES[language][month]} {localize(year, language)}"
