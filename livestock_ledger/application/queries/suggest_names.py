"""
SuggestNames Query - registry entries closest to a free-text name.

Powers the "did you mean" list shown next to a name column; ranking is by
edit distance with registry order breaking ties.
"""
from dataclasses import dataclass
from typing import List, Optional

from livestock_ledger.application.dto.reconciliation_dto import NameSuggestionDTO
from livestock_ledger.domain.repositories.name_registry_repository import NameRegistryRepository
from livestock_ledger.domain.services.name_matcher import score_registry, suggest


@dataclass(frozen=True)
class SuggestNamesQuery:
    query: str = ""
    limit: Optional[int] = 5


class SuggestNamesHandler:
    """Handles SuggestNames queries."""

    def __init__(self, registry_repository: NameRegistryRepository):
        self._registry = registry_repository

    def handle(self, query: SuggestNamesQuery) -> List[NameSuggestionDTO]:
        """
        Args:
            query: text to match; ``limit=None`` returns the full ranking

        Returns:
            Suggestions ordered best first
        """
        registry = self._registry.load()
        if query.limit is None:
            scored = score_registry(query.query, registry)
        else:
            scored = suggest(query.query, registry, limit=query.limit)
        return [
            NameSuggestionDTO(id=entry.id, name=entry.name, distance=distance)
            for entry, distance in scored
        ]
