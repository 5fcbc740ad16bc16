"""Tolerant parsing of hand-entered livestock counts.

Ledger values are handwritten, then typed or OCR'd, so they arrive with mixed
digit systems, thousands separators and stray annotations ("12 cows", "۱,۲۰۰").
Parsing happens in two tiers: a basic clean that only drops whitespace and
separators, then an aggressive clean that keeps digits, dots and minus signs.
A string with no recoverable number still fails.
"""
from __future__ import annotations

import math
import re
from typing import Optional, Union

from livestock_ledger.constants import THOUSANDS_SEPARATORS

from ..exceptions import NumericParseError
from .digit_normalizer import to_latin_digits

Number = Union[int, float]

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_BASIC_STRIP_PATTERN = re.compile("[" + "".join(re.escape(sep) for sep in THOUSANDS_SEPARATORS) + r"\s]")
_AGGRESSIVE_STRIP_PATTERN = re.compile(r"[^0-9.\-]")


def is_decimal_number(text: str) -> bool:
    """True when ``text`` is entirely a finite decimal number (Latin digits)."""
    return _to_number(text) is not None


def basic_clean(raw: Optional[str]) -> str:
    """Normalize digits and drop whitespace and thousands separators."""
    return _BASIC_STRIP_PATTERN.sub("", to_latin_digits(raw or ""))


def aggressive_clean(text: str) -> str:
    """Keep only Latin digits, dots and minus signs."""
    return _AGGRESSIVE_STRIP_PATTERN.sub("", text)


def parse_tolerant_number(raw: Optional[str], field_name: str = "value") -> Number:
    """Parse a hand-entered count.

    Returns ``0`` for empty input (no count entered), an ``int`` for integral
    values and a ``float`` otherwise.

    Raises:
        NumericParseError: when the value is a decimal too large to represent,
            or when neither the basic nor the aggressive clean yields a number.
    """
    cleaned = basic_clean(raw)
    if cleaned == "":
        return 0

    value = _to_number(cleaned)
    if value is not None:
        return value
    # well-formed decimal outside float range: never salvaged
    if _DECIMAL_PATTERN.fullmatch(cleaned):
        raise NumericParseError(field_name, raw_value=raw or "")

    salvaged = aggressive_clean(cleaned)
    if salvaged:
        value = _to_number(salvaged)
        if value is not None:
            return value

    raise NumericParseError(field_name, raw_value=raw or "")


def _to_number(text: str) -> Optional[Number]:
    if not _DECIMAL_PATTERN.fullmatch(text):
        return None
    if _INTEGER_PATTERN.fullmatch(text):
        return int(text)
    value = float(text)
    if not math.isfinite(value):
        return None
    if value.is_integer():
        return int(value)
    return value
