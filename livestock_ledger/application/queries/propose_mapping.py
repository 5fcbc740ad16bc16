"""ProposeMapping Query - initial field types for a row's columns."""
from dataclasses import dataclass
from typing import Dict

from livestock_ledger.domain.entities.field_mapping import FieldMapping
from livestock_ledger.domain.entities.raw_row import RawRow
from livestock_ledger.domain.services.field_classifier import propose_mapping


@dataclass(frozen=True)
class ProposeMappingQuery:
    row: RawRow
    classify: bool = True


class ProposeMappingHandler:
    """Handles ProposeMapping queries."""

    def handle(self, query: ProposeMappingQuery) -> Dict[str, str]:
        if query.classify:
            mapping = propose_mapping(query.row)
        else:
            mapping = FieldMapping.for_row(query.row)
        return mapping.to_dict()
