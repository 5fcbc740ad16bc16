"""ReconcileRow Command - validates one edited row into a canonical payload.

The command carries everything the operator controls (mapping, edited text,
date, explicit name selection); the handler supplies the shared registry and
the duplicate-mapping policy. No external call is made.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional

from livestock_ledger.domain.entities.canonical_payload import CanonicalPayload
from livestock_ledger.domain.entities.field_mapping import FieldMapping
from livestock_ledger.domain.entities.raw_row import RawRow
from livestock_ledger.domain.repositories.name_registry_repository import NameRegistryRepository
from livestock_ledger.domain.services.reconciliation_engine import RowReconciler
from livestock_ledger.domain.value_objects.field_type import FieldType


@dataclass(frozen=True)
class ReconcileRowCommand:
    row: RawRow
    mapping: Mapping[str, "FieldType | str"]
    transaction_date: str
    selected_identity: Optional[int] = None
    values: Mapping[str, str] = field(default_factory=dict)


class ReconcileRowHandler:
    """Handles ReconcileRow commands."""

    def __init__(self, registry_repository: NameRegistryRepository, reconciler: Optional[RowReconciler] = None):
        self._registry = registry_repository
        self._reconciler = reconciler or RowReconciler()

    def handle(self, command: ReconcileRowCommand) -> CanonicalPayload:
        """Raises the reconciliation errors of :class:`RowReconciler` unchanged."""
        return self._reconciler.reconcile(
            command.row,
            FieldMapping(command.mapping),
            command.transaction_date,
            command.selected_identity,
            self._registry.load(),
            values=command.values,
        )
