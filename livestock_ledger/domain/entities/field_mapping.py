"""
FieldMapping Entity - operator-adjustable column to field type assignment

Created when a row is opened for reconciliation, seeded from the field
classifier (or all unmapped), overridden freely, and discarded afterwards.
"""
from __future__ import annotations

from typing import Callable, Dict, Iterator, List, Mapping, Optional, Tuple

from ..value_objects.field_type import FieldType
from .raw_row import RawRow


class FieldMapping:
    """Mutable mapping of column name to :class:`FieldType`."""

    def __init__(self, assignments: Optional[Mapping[str, "FieldType | str"]] = None) -> None:
        self._assignments: Dict[str, FieldType] = {}
        for column, field_type in (assignments or {}).items():
            self._assignments[column] = FieldType.parse(field_type)

    @classmethod
    def for_row(
        cls,
        row: RawRow,
        guess: Optional[Callable[[str], FieldType]] = None,
    ) -> "FieldMapping":
        """One entry per column; ``guess`` seeds each entry from the cell text."""
        return cls({
            column: guess(value) if guess else FieldType.UNMAPPED
            for column, value in row.values.items()
        })

    def assign(self, column: str, field_type: "FieldType | str") -> None:
        self._assignments[column] = FieldType.parse(field_type)

    def type_for(self, column: str) -> FieldType:
        return self._assignments.get(column, FieldType.UNMAPPED)

    def columns(self) -> Tuple[str, ...]:
        return tuple(self._assignments.keys())

    def active_columns(self, row: RawRow) -> List[str]:
        """Columns of ``row`` (in row order) mapped to something other than unmapped."""
        return [column for column in row.columns if self.type_for(column).is_active]

    def unknown_columns(self, row: RawRow) -> List[str]:
        known = set(row.columns)
        return [column for column in self._assignments if column not in known]

    def copy(self) -> "FieldMapping":
        return FieldMapping(dict(self._assignments))

    def to_dict(self) -> Dict[str, str]:
        return {column: field_type.value for column, field_type in self._assignments.items()}

    def __iter__(self) -> Iterator[str]:
        return iter(self._assignments)

    def __len__(self) -> int:
        return len(self._assignments)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FieldMapping):
            return NotImplemented
        return self._assignments == other._assignments

    def __repr__(self) -> str:
        return f"FieldMapping({self.to_dict()!r})"
