"""Caller-owned editing state for one row.

Holds the draft mapping, edited cell text and the selected registry identity
while an operator works on a row, and enforces the rule that typing into a
name column discards an earlier explicit selection. Each concurrent editor
needs its own session; the registry may be shared.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ..entities.canonical_payload import CanonicalPayload
from ..entities.field_mapping import FieldMapping
from ..entities.name_registry import NameRegistry
from ..entities.raw_row import RawRow
from ..exceptions import DomainValidationError
from ..value_objects.field_type import FieldType
from ..value_objects.registry_entry import RegistryEntry
from .field_classifier import propose_mapping
from .name_matcher import suggest
from .reconciliation_engine import RowReconciler


class RowEditSession:
    def __init__(
        self,
        row: RawRow,
        registry: NameRegistry,
        *,
        mapping: Optional[FieldMapping] = None,
        classify: bool = True,
    ) -> None:
        self._row = row
        self._registry = registry
        if mapping is not None:
            self._mapping = mapping.copy()
        elif classify:
            self._mapping = propose_mapping(row)
        else:
            self._mapping = FieldMapping.for_row(row)
        self._values: Dict[str, str] = dict(row.values)
        self._selected_identity: Optional[int] = None

    @property
    def row(self) -> RawRow:
        return self._row

    @property
    def mapping(self) -> FieldMapping:
        return self._mapping

    @property
    def values(self) -> Dict[str, str]:
        return dict(self._values)

    @property
    def selected_identity(self) -> Optional[int]:
        return self._selected_identity

    def change_mapping(self, column: str, field_type: "FieldType | str") -> None:
        self._require_column(column)
        self._mapping.assign(column, field_type)

    def edit_value(self, column: str, text: str) -> None:
        """Free-text edit; clears the selection when the column is a name column."""
        self._require_column(column)
        self._values[column] = text
        if self._mapping.type_for(column) is FieldType.PERSON_NAME:
            self._selected_identity = None

    def select_suggestion(self, column: str, entry: RegistryEntry) -> None:
        """Pick a registry entry: the cell text becomes its display name."""
        self._require_column(column)
        self._values[column] = entry.name
        self._selected_identity = entry.id

    def clear_selection(self) -> None:
        self._selected_identity = None

    def suggestions(self, column: str, limit: int = 5) -> List[Tuple[RegistryEntry, int]]:
        self._require_column(column)
        return suggest(self._values[column], self._registry, limit=limit)

    def reconcile(self, transaction_date: str, reconciler: Optional[RowReconciler] = None) -> CanonicalPayload:
        reconciler = reconciler or RowReconciler()
        return reconciler.reconcile(
            self._row,
            self._mapping,
            transaction_date,
            self._selected_identity,
            self._registry,
            values=self._values,
        )

    def _require_column(self, column: str) -> None:
        if column not in self._values:
            raise DomainValidationError(f"Unknown column: {column}")
