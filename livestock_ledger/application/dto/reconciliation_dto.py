"""Data transfer objects for reconciliation, registry and table responses."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class NameSuggestionDTO:
    """A registry entry offered for a free-text name, with its edit distance."""

    id: int
    name: str
    distance: int


@dataclass(frozen=True)
class SubmissionResultDTO:
    """Outcome of a successful submission to the ledger service."""

    row_id: str
    payload: Dict[str, Any]
    status_code: int
    message: str
    dry_run: bool = False


@dataclass(frozen=True)
class ExportedTableDTO:
    filename: str
    content: str
    media_type: str = "text/csv; charset=utf-8"


__all__ = ["NameSuggestionDTO", "SubmissionResultDTO", "ExportedTableDTO"]
