"""Tabular text (CSV) import/export."""

from .csv_codec import parse_tabular_text, serialize_tabular_text, split_line

__all__ = ["parse_tabular_text", "serialize_tabular_text", "split_line"]
