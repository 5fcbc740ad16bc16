"""Row reconciliation domain service.

Turns one raw ledger row, the operator's field mapping, edited cell text, the
transaction date and an optional explicit name selection into a validated
CanonicalPayload. All state is passed in; nothing is retained between calls,
so one reconciler can serve concurrent requests against a shared registry.
"""
from __future__ import annotations

import logging
from typing import Dict, List, Mapping, Optional

from ..entities.canonical_payload import CanonicalPayload
from ..entities.field_mapping import FieldMapping
from ..entities.name_registry import NameRegistry
from ..entities.raw_row import RawRow
from ..exceptions import (
    DomainValidationError,
    DuplicateFieldMappingError,
    InvalidDateError,
    InvalidNumericFieldError,
    NoActiveMappingError,
    NumericParseError,
)
from ..value_objects.duplicate_policy import DuplicateMappingPolicy
from ..value_objects.field_type import FieldType
from ..value_objects.resolved_value import ResolvedValue
from .digit_normalizer import to_latin_digits
from .numeric_parser import is_decimal_number, parse_tolerant_number

logger = logging.getLogger(__name__)


def normalize_transaction_date(raw: Optional[str]) -> str:
    """Latin-digit, trimmed transaction date.

    Raises:
        InvalidDateError: if the date is empty or not entirely numeric.
    """
    if raw is None or not str(raw).strip():
        raise InvalidDateError("Date is required.")
    cleaned = to_latin_digits(str(raw)).strip()
    if not is_decimal_number(cleaned):
        raise InvalidDateError()
    return cleaned


class RowReconciler:
    """Builds canonical payloads from raw rows."""

    def __init__(self, policy: DuplicateMappingPolicy = DuplicateMappingPolicy.LAST_WRITE_WINS) -> None:
        self._policy = policy

    @property
    def policy(self) -> DuplicateMappingPolicy:
        return self._policy

    def reconcile(
        self,
        row: RawRow,
        mapping: FieldMapping,
        transaction_date: Optional[str],
        selected_identity: Optional[int],
        registry: NameRegistry,
        values: Optional[Mapping[str, str]] = None,
    ) -> CanonicalPayload:
        """Validate and transform one row.

        Args:
            row: Original extracted row; embedded in the payload unchanged.
            mapping: Field type per column; columns without an entry are unmapped.
            transaction_date: Date as typed (Persian digits allowed).
            selected_identity: Registry id the operator picked from suggestions.
            registry: Name registry used for the exact-match fallback.
            values: Current (possibly edited) cell text; defaults to the row's values.

        Returns:
            CanonicalPayload

        Raises:
            InvalidDateError, DuplicateFieldMappingError, InvalidNumericFieldError,
            NoActiveMappingError, DomainValidationError
        """
        date = normalize_transaction_date(transaction_date)

        unknown = mapping.unknown_columns(row)
        if unknown:
            raise DomainValidationError(f"Mapping refers to unknown columns: {', '.join(unknown)}")

        current = dict(row.values)
        if values:
            for column, text in values.items():
                if column not in current:
                    raise DomainValidationError(f"Edited value for unknown column: {column}")
                current[column] = "" if text is None else str(text)

        if self._policy is DuplicateMappingPolicy.STRICT:
            self._reject_duplicates(row, mapping)

        mapped: Dict[FieldType, ResolvedValue] = {}
        for column in row.columns:
            field_type = mapping.type_for(column)
            if not field_type.is_active:
                continue

            if field_type is FieldType.PERSON_NAME:
                resolved = self._resolve_identity(current[column], selected_identity, registry)
            else:
                resolved = self._resolve_count(column, current[column])

            if field_type in mapped:
                logger.warning(
                    "Column %s overwrites earlier value for %s", column, field_type.value,
                    extra={"row_id": row.id},
                )
            mapped[field_type] = resolved

        if not mapped:
            raise NoActiveMappingError()

        payload = CanonicalPayload(date=date, mapped_data=mapped, raw_row=row)
        logger.debug(
            "Reconciled row %s into %d field(s)", row.id, len(mapped),
            extra={"row_id": row.id, "unresolved_identity": payload.has_unresolved_identity},
        )
        return payload

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _resolve_identity(
        text: str,
        selected_identity: Optional[int],
        registry: NameRegistry,
    ) -> ResolvedValue:
        if selected_identity is not None:
            if not registry.contains_id(selected_identity):
                logger.warning("Selected identity %s is not in the name registry", selected_identity)
            return ResolvedValue.identity(selected_identity)

        match = registry.find_exact(text)
        return ResolvedValue.identity(match.id if match else None)

    @staticmethod
    def _resolve_count(column: str, text: str) -> ResolvedValue:
        try:
            amount = parse_tolerant_number(text, field_name=column)
        except NumericParseError as exc:
            raise InvalidNumericFieldError(column) from exc
        if amount < 0:
            raise InvalidNumericFieldError(column, f"Value for '{column}' must not be negative.")
        return ResolvedValue.count(amount)

    @staticmethod
    def _reject_duplicates(row: RawRow, mapping: FieldMapping) -> None:
        columns_by_type: Dict[FieldType, List[str]] = {}
        for column in mapping.active_columns(row):
            columns_by_type.setdefault(mapping.type_for(column), []).append(column)
        for field_type, columns in columns_by_type.items():
            if len(columns) > 1:
                raise DuplicateFieldMappingError(field_type.value, columns)
