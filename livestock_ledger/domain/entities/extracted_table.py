"""
ExtractedTable Entity - columns plus rows produced by extraction or import

Domain Rules:
- Columns are ordered and unique
- Every row carries a value (possibly empty) for every column
- Row ids are unique within the table
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence, Tuple

from .raw_row import RawRow


@dataclass(frozen=True)
class ExtractedTable:
    columns: Tuple[str, ...]
    rows: Tuple[RawRow, ...] = field(default_factory=tuple)

    def __post_init__(self):
        object.__setattr__(self, "columns", tuple(str(column) for column in self.columns))
        object.__setattr__(self, "rows", tuple(self.rows))
        if len(set(self.columns)) != len(self.columns):
            raise ValueError("Column names must be unique")
        seen = set()
        for row in self.rows:
            if row.id in seen:
                raise ValueError(f"Duplicate row id: {row.id}")
            seen.add(row.id)

    @classmethod
    def from_grid(
        cls,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        id_prefix: str = "row",
    ) -> "ExtractedTable":
        """Build a table from positional rows, assigning synthetic row ids."""
        stamp = int(time.time() * 1000)
        raw_rows = [
            RawRow.from_positional(columns, values, row_id=f"{id_prefix}-{stamp}-{index}")
            for index, values in enumerate(rows)
        ]
        return cls(columns=tuple(columns), rows=tuple(raw_rows))

    def is_empty(self) -> bool:
        return not self.rows

    def to_grid(self) -> List[List[str]]:
        return [[row.get(column) for column in self.columns] for row in self.rows]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "columns": list(self.columns),
            "rows": [row.to_dict() for row in self.rows],
        }

    def __repr__(self) -> str:
        return f"ExtractedTable(columns={len(self.columns)}, rows={len(self.rows)})"
