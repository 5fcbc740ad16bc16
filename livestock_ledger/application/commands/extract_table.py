"""ExtractTable Command - send a ledger photo to the extraction service."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from livestock_ledger.domain.entities.extracted_table import ExtractedTable
from livestock_ledger.domain.exceptions import DomainValidationError
from livestock_ledger.infrastructure.vision.azure_table_extraction_client import ImageInput


class TableExtractor(Protocol):
    def extract_table(self, image: ImageInput) -> ExtractedTable: ...


@dataclass(frozen=True)
class ExtractTableCommand:
    data: bytes
    media_type: str


class ExtractTableHandler:
    """Handles ExtractTable commands."""

    def __init__(self, extractor: TableExtractor):
        self._extractor = extractor

    def handle(self, command: ExtractTableCommand) -> ExtractedTable:
        """
        Raises:
            DomainValidationError: empty upload or a non-image media type
            ExtractionError: the extraction service failed
        """
        try:
            image = ImageInput(data=command.data, media_type=command.media_type)
        except ValueError as exc:
            raise DomainValidationError(str(exc)) from exc
        return self._extractor.extract_table(image)
