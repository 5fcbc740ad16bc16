"""
CanonicalPayload Entity - validated output of row reconciliation

Domain Rules:
- Date is non-empty and numeric (Latin digits)
- At least one field type is present and UNMAPPED never is
- PERSON_NAME holds an identity (an integer registry id or None)
- Livestock categories hold non-negative counts
- The original RawRow is carried verbatim for audit
- Never mutated after construction
"""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping

from ..exceptions import DomainValidationError
from ..services.numeric_parser import is_decimal_number
from ..value_objects.field_type import FieldType
from ..value_objects.resolved_value import ResolvedValue, ValueKind
from .raw_row import RawRow


@dataclass(frozen=True)
class CanonicalPayload:
    date: str
    mapped_data: Mapping[FieldType, ResolvedValue]
    raw_row: RawRow

    def __post_init__(self):
        self._validate()
        object.__setattr__(self, "mapped_data", MappingProxyType(dict(self.mapped_data)))

    def _validate(self) -> None:
        if not isinstance(self.date, str) or not self.date or not is_decimal_number(self.date):
            raise DomainValidationError("Payload date must be a non-empty numeric string")
        if not self.mapped_data:
            raise DomainValidationError("Payload must contain at least one mapped field")
        if not isinstance(self.raw_row, RawRow):
            raise DomainValidationError("Payload must embed the original RawRow")

        for field_type, resolved in self.mapped_data.items():
            if not isinstance(field_type, FieldType) or field_type is FieldType.UNMAPPED:
                raise DomainValidationError(f"Invalid payload key: {field_type!r}")
            if not isinstance(resolved, ResolvedValue):
                raise DomainValidationError(f"Value for '{field_type.value}' must be a ResolvedValue")
            expected = ValueKind.IDENTITY if field_type is FieldType.PERSON_NAME else ValueKind.COUNT
            if resolved.kind is not expected:
                raise DomainValidationError(
                    f"'{field_type.value}' expects a {expected.value} value, got {resolved.kind.value}"
                )

    def value_for(self, field_type: FieldType) -> Any:
        resolved = self.mapped_data.get(field_type)
        return resolved.to_json() if resolved is not None else None

    @property
    def has_unresolved_identity(self) -> bool:
        resolved = self.mapped_data.get(FieldType.PERSON_NAME)
        return resolved is not None and resolved.is_unresolved

    def to_dict(self) -> Dict[str, Any]:
        """Wire document sent to the ledger service."""
        return {
            "date": self.date,
            "mappedData": {
                field_type.value: self.value_for(field_type)
                for field_type in self.mapped_data
            },
            "rawRowData": self.raw_row.to_dict(),
        }

    def __hash__(self) -> int:
        return hash((self.date, tuple(self.mapped_data.items()), self.raw_row))
