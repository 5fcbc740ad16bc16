"""Heuristic first guess of a column's field type.

The guess only seeds the FieldMapping the operator edits; nothing downstream
relies on it being right.
"""
from __future__ import annotations

from typing import Optional

from ..entities.field_mapping import FieldMapping
from ..entities.raw_row import RawRow
from ..value_objects.field_type import FieldType
from .digit_normalizer import to_latin_digits
from .numeric_parser import is_decimal_number


def classify_value(value: Optional[str]) -> FieldType:
    """Guess a field type from one cell.

    Text longer than two characters reads as a person's name, a number as a
    livestock count (placeholder category), anything else stays unmapped.
    """
    text = to_latin_digits(value).strip()
    # a blank cell is not a zero count; it stays unmapped
    if not text:
        return FieldType.UNMAPPED
    if is_decimal_number(text):
        return FieldType.default_livestock()
    if len(text) > 2:
        return FieldType.PERSON_NAME
    return FieldType.UNMAPPED


def propose_mapping(row: RawRow) -> FieldMapping:
    return FieldMapping.for_row(row, guess=classify_value)
