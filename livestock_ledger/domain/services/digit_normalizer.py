"""Convert Persian and Arabic-Indic digits to Latin digits."""
from __future__ import annotations

from typing import Optional

from livestock_ledger.constants import ARABIC_INDIC_DIGITS, PERSIAN_DIGITS

_LATIN_DIGITS = "0123456789"

_DIGIT_TABLE = str.maketrans(
    PERSIAN_DIGITS + ARABIC_INDIC_DIGITS,
    _LATIN_DIGITS + _LATIN_DIGITS,
)


def to_latin_digits(text: Optional[str]) -> str:
    """Replace every Persian/Arabic-Indic digit with its Latin equivalent.

    Other characters pass through, so the output has the same length as the input.
    """
    if not text:
        return ""
    return text.translate(_DIGIT_TABLE)
