"""
RawRow Entity - one row of extracted ledger data

A RawRow maps column names to the cell text produced by extraction or CSV
import. It is immutable once created and is embedded verbatim in every
canonical payload for audit.

Domain Rules:
- Column order is the order of the originating table
- Every value is a string; missing cells are empty strings
- The id is synthetic and unique within its table
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple
from uuid import uuid4


@dataclass(frozen=True)
class RawRow:
    id: str
    values: Mapping[str, str]

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id:
            raise ValueError("Row id must be a non-empty string")
        cleaned: Dict[str, str] = {}
        for column, value in dict(self.values).items():
            cleaned[str(column)] = "" if value is None else str(value)
        object.__setattr__(self, "values", MappingProxyType(cleaned))

    @classmethod
    def from_positional(
        cls,
        columns: Sequence[str],
        values: Sequence[Any],
        row_id: Optional[str] = None,
    ) -> "RawRow":
        """Map positional cell values onto column names.

        Missing trailing cells and ``None`` become ``""``; surplus cells are dropped.
        """
        mapped: Dict[str, str] = {}
        for index, column in enumerate(columns):
            value = values[index] if index < len(values) else None
            mapped[column] = "" if value is None else str(value)
        return cls(id=row_id or f"row-{uuid4().hex}", values=mapped)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], columns: Optional[Iterable[str]] = None) -> "RawRow":
        """Hydrate from the audit form ``{"id": ..., <column>: <value>}``."""
        row_id = str(data.get("id") or f"row-{uuid4().hex}")
        if columns is None:
            columns = [key for key in data.keys() if key != "id"]
        return cls(id=row_id, values={column: data.get(column, "") for column in columns})

    @property
    def columns(self) -> Tuple[str, ...]:
        return tuple(self.values.keys())

    def get(self, column: str, default: str = "") -> str:
        return self.values.get(column, default)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id}
        data.update(self.values)
        return data

    def __hash__(self) -> int:
        return hash((self.id, tuple(self.values.items())))

    def __repr__(self) -> str:
        return f"RawRow(id={self.id!r}, columns={len(self.values)})"
