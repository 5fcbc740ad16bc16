"""ExportTable Query - render a table as a downloadable CSV document."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Optional

from livestock_ledger.application.dto.reconciliation_dto import ExportedTableDTO
from livestock_ledger.domain.entities.extracted_table import ExtractedTable
from livestock_ledger.infrastructure.tabular.csv_codec import serialize_tabular_text


@dataclass(frozen=True)
class ExportTableQuery:
    table: ExtractedTable


class ExportTableHandler:
    """Handles ExportTable queries."""

    def __init__(self, today: Optional[Callable[[], date]] = None):
        self._today = today or date.today

    def handle(self, query: ExportTableQuery) -> ExportedTableDTO:
        return ExportedTableDTO(
            filename=f"extracted_data_{self._today().isoformat()}.csv",
            content=serialize_tabular_text(query.table),
        )
