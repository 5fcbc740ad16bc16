"""ImportTable Command - load a previously exported CSV file."""
from __future__ import annotations

from dataclasses import dataclass

from livestock_ledger.domain.entities.extracted_table import ExtractedTable
from livestock_ledger.domain.exceptions import MalformedTabularTextError
from livestock_ledger.infrastructure.tabular.csv_codec import parse_tabular_text


@dataclass(frozen=True)
class ImportTableCommand:
    content: bytes
    filename: str = ""


class ImportTableHandler:
    """Handles ImportTable commands."""

    def handle(self, command: ImportTableCommand) -> ExtractedTable:
        try:
            text = command.content.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedTabularTextError("Failed to parse CSV file: not UTF-8 text") from exc
        return parse_tabular_text(text)
