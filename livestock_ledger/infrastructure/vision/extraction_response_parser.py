"""Parse vision model responses into extracted tables."""
from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from livestock_ledger.domain.entities.extracted_table import ExtractedTable
from livestock_ledger.domain.exceptions import ExtractionError

EXTRACTION_ID_PREFIX = "row"


class ExtractionResponseParser:
    """Converts raw ``{"columns": [...], "rows": [[...]]}`` payloads into tables."""

    def parse_table(self, payload: Dict[str, Any], *, id_prefix: str = EXTRACTION_ID_PREFIX) -> ExtractedTable:
        if not isinstance(payload, dict):
            raise ExtractionError("Extraction response is not a JSON object")

        rows = self._normalize_rows(payload.get("rows"))
        columns = self._normalize_columns(payload.get("columns"))

        if not columns and rows:
            width = max(len(row) for row in rows)
            columns = [f"col{index + 1}" for index in range(width)]

        try:
            return ExtractedTable.from_grid(columns, rows, id_prefix=id_prefix)
        except ValueError as exc:
            raise ExtractionError(f"Extraction response is malformed: {exc}") from exc

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _normalize_columns(self, payload: Any) -> List[str]:
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise ExtractionError("Extraction response 'columns' must be a list")

        normalized: List[str] = []
        for column in payload:
            if isinstance(column, dict):
                header = _safe_str(column.get("header") or column.get("name") or column.get("key"))
            else:
                header = _safe_str(column)
            header = header.strip() or f"col{len(normalized) + 1}"
            # Headers key the row mapping, so repeated headers get a positional suffix.
            if header in normalized:
                header = f"{header}_{len(normalized) + 1}"
            normalized.append(header)
        return normalized

    def _normalize_rows(self, payload: Any) -> List[List[str]]:
        if payload is None:
            return []
        if not isinstance(payload, list):
            raise ExtractionError("Extraction response 'rows' must be a list")

        rows: List[List[str]] = []
        for row in payload:
            if isinstance(row, list):
                rows.append([_cell_text(cell) for cell in row])
            elif row is None:
                continue
            else:
                rows.append([_cell_text(row)])
        return rows


def extract_json_payload(content: Optional[str]) -> Optional[dict]:
    """Locate a JSON object in a model reply (bare, fenced, or wrapped in prose)."""
    text = (content or "").strip()
    if not text:
        return None

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    # Handle fenced code blocks
    if text.startswith("```") and text.endswith("```"):
        body = "\n".join(text.splitlines()[1:-1]).strip()
        if body:
            try:
                return json.loads(body)
            except json.JSONDecodeError:
                pass

    # Fallback: attempt to locate first JSON object within the text
    start_index = text.find("{")
    end_index = text.rfind("}")
    if start_index != -1 and end_index != -1 and end_index > start_index:
        snippet = text[start_index : end_index + 1]
        try:
            return json.loads(snippet)
        except json.JSONDecodeError:
            return None

    return None


def _cell_text(cell: Any) -> str:
    if isinstance(cell, dict):
        value = cell.get("value")
        if value is None:
            value = cell.get("text") or cell.get("content")
        return _safe_str(value)
    return _safe_str(cell)


def _safe_str(value: Any) -> str:
    if value is None:
        return ""
    return str(value)
