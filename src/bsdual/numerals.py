"""ASCII <-> Devanagari digit transcoding."""
from __future__ import annotations
from typing import Union

DEVANAGARI_DIGITS = "०१२३४५६७८९"

_TO_LOCAL = str.maketrans("0123456789", DEVANAGARI_DIGITS)
_TO_ASCII = str.maketrans(DEVANAGARI_DIGITS, "0123456789")


def to_localized_digits(value: Union[int, str], *, width: int = 0) -> str:
    """Map ASCII digits to Devanagari glyphs, left zero-padding to `width` first.

    Non-digit characters pass through unchanged.
    """
    s = str(value)
    if width:
        s = s.rjust(width, "0")
    return s.translate(_TO_LOCAL)


def to_ascii_digits(text: str) -> str:
    return text.translate(_TO_ASCII)


def localize(value: Union[int, str], language: str, *, width: int = 0) -> str:
    if language == "np":
        return to_localized_digits(value, width=width)
    s = str(value)
    return s.rjust(width, "0") if width else s
