"""
Schemas for extracted/imported tables
"""
from __future__ import annotations

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from livestock_ledger.domain.entities.extracted_table import ExtractedTable
from livestock_ledger.domain.entities.raw_row import RawRow


class ExtractedTableSchema(BaseModel):
    columns: List[str] = Field(default_factory=list)
    rows: List[Dict[str, Any]] = Field(default_factory=list)


def table_to_schema(table: ExtractedTable) -> ExtractedTableSchema:
    return ExtractedTableSchema(**table.to_dict())


def schema_to_table(schema: ExtractedTableSchema) -> ExtractedTable:
    rows = [RawRow.from_dict(row, columns=schema.columns) for row in schema.rows]
    return ExtractedTable(columns=tuple(schema.columns), rows=tuple(rows))
