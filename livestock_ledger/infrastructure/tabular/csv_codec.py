"""Tabular text codec for importing and exporting extracted tables.

Format: UTF-8, optional leading byte-order mark, comma-delimited, fields
optionally wrapped in double quotes with ``""`` as an escaped quote, first
line is the header. Lines may end in ``\\n`` or ``\\r\\n``; blank lines are
ignored. A quoted field cannot span lines: an unterminated quote swallows the
rest of its line, delimiters included.
"""
from __future__ import annotations

import logging
import re
import time
from typing import List

from livestock_ledger.constants import BYTE_ORDER_MARK
from livestock_ledger.domain.entities.extracted_table import ExtractedTable
from livestock_ledger.domain.entities.raw_row import RawRow
from livestock_ledger.domain.exceptions import MalformedTabularTextError

logger = logging.getLogger(__name__)

DELIMITER = ","
QUOTE = '"'
IMPORT_ID_PREFIX = "row-import"

_LINE_BREAK = re.compile(r"\r?\n")


def split_line(line: str) -> List[str]:
    """Split one line into fields, honouring double-quoted sections."""
    fields: List[str] = []
    current: List[str] = []
    in_quote = False
    index = 0
    while index < len(line):
        char = line[index]
        if char == QUOTE:
            if in_quote and index + 1 < len(line) and line[index + 1] == QUOTE:
                current.append(QUOTE)
                index += 1
            else:
                in_quote = not in_quote
        elif char == DELIMITER and not in_quote:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        index += 1
    fields.append("".join(current))
    return fields


def parse_tabular_text(text: str) -> ExtractedTable:
    """Parse CSV text into columns and rows.

    Raises:
        MalformedTabularTextError: no header line, or duplicate column names.
    """
    lines = [line for line in _LINE_BREAK.split(text or "") if line.strip() != ""]
    if not lines:
        raise MalformedTabularTextError("Tabular text contains no header line")

    header = lines[0]
    if header.startswith(BYTE_ORDER_MARK):
        header = header[len(BYTE_ORDER_MARK):]

    columns = split_line(header)
    if len(set(columns)) != len(columns):
        raise MalformedTabularTextError("Tabular text has duplicate column names")

    stamp = int(time.time() * 1000)
    rows = [
        RawRow.from_positional(columns, split_line(line), row_id=f"{IMPORT_ID_PREFIX}-{stamp}-{index}")
        for index, line in enumerate(lines[1:])
    ]
    logger.debug("Parsed tabular text: %d columns, %d rows", len(columns), len(rows))
    return ExtractedTable(columns=tuple(columns), rows=tuple(rows))


def quote_field(value: str) -> str:
    return QUOTE + value.replace(QUOTE, QUOTE * 2) + QUOTE


def serialize_tabular_text(table: ExtractedTable) -> str:
    """Render a table as CSV text with a leading byte-order mark.

    Every field, header included, is quoted.
    """
    lines = [DELIMITER.join(quote_field(column) for column in table.columns)]
    for row in table.rows:
        lines.append(DELIMITER.join(quote_field(row.get(column)) for column in table.columns))
    return BYTE_ORDER_MARK + "\n".join(lines)
