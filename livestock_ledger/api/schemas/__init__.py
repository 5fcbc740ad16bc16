"""
API Schemas - organized by domain
"""
from .table_schemas import ExtractedTableSchema, schema_to_table, table_to_schema
from .reconciliation_schemas import (
    CanonicalPayloadSchema,
    NameSuggestionListSchema,
    NameSuggestionSchema,
    ProposeMappingResponseSchema,
    ReconcileRequestSchema,
    RowInputSchema,
    SubmissionResponseSchema,
    payload_to_schema,
)

__all__ = [
    # Table schemas
    "ExtractedTableSchema",
    "schema_to_table",
    "table_to_schema",
    # Reconciliation schemas
    "RowInputSchema",
    "ProposeMappingResponseSchema",
    "ReconcileRequestSchema",
    "CanonicalPayloadSchema",
    "SubmissionResponseSchema",
    "NameSuggestionSchema",
    "NameSuggestionListSchema",
    "payload_to_schema",
]
