"""
Schemas for field mapping, name suggestions, reconciliation and submission
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

from livestock_ledger.domain.entities.canonical_payload import CanonicalPayload
from livestock_ledger.domain.entities.raw_row import RawRow
from livestock_ledger.domain.value_objects.field_type import FieldType


class RowInputSchema(BaseModel):
    """A row in audit form (``{"id": ..., <column>: <value>}``).

    ``columns`` fixes the column order; by default the row's key order is used.
    """

    row: Dict[str, Any]
    columns: Optional[List[str]] = None

    def to_raw_row(self) -> RawRow:
        return RawRow.from_dict(self.row, columns=self.columns)


class ProposeMappingResponseSchema(BaseModel):
    mapping: Dict[str, str]
    fieldTypes: List[str] = Field(default_factory=lambda: [member.value for member in FieldType])


class ReconcileRequestSchema(RowInputSchema):
    mapping: Dict[str, str] = Field(default_factory=dict)
    values: Dict[str, str] = Field(default_factory=dict)
    date: Optional[str] = None
    selectedIdentity: Optional[int] = None

    @field_validator("mapping")
    @classmethod
    def _known_field_types(cls, value: Dict[str, str]) -> Dict[str, str]:
        return {column: FieldType.parse(field_type).value for column, field_type in value.items()}


class CanonicalPayloadSchema(BaseModel):
    date: str
    mappedData: Dict[str, Optional[Union[int, float]]]
    rawRowData: Dict[str, Any]


class SubmissionResponseSchema(BaseModel):
    rowId: str
    message: str
    statusCode: int
    dryRun: bool = False
    payload: CanonicalPayloadSchema


class NameSuggestionSchema(BaseModel):
    id: int
    name: str
    distance: int


class NameSuggestionListSchema(BaseModel):
    query: str
    suggestions: List[NameSuggestionSchema] = Field(default_factory=list)


def payload_to_schema(payload: CanonicalPayload) -> CanonicalPayloadSchema:
    return CanonicalPayloadSchema(**payload.to_dict())
