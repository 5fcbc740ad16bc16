"""Approximate name matching against the name registry.

Edit distance is classic Levenshtein (insert/delete/substitute, cost 1 each,
no transpositions), computed over the raw strings: case and diacritics are
significant.
"""
from __future__ import annotations

from typing import Iterable, List, Tuple

from rapidfuzz.distance import Levenshtein

from ..value_objects.registry_entry import RegistryEntry


def edit_distance(a: str, b: str) -> int:
    """Minimum number of single-character edits turning ``a`` into ``b``."""
    return Levenshtein.distance(a, b)


def score_registry(query: str, registry: Iterable[RegistryEntry]) -> List[Tuple[RegistryEntry, int]]:
    """Pair every entry with its distance to the trimmed query, best first.

    Ties keep registry order. An empty query yields registry order with
    distance ``0`` for every entry.
    """
    needle = (query or "").strip()
    entries = list(registry)
    if not needle:
        return [(entry, 0) for entry in entries]
    scored = [(entry, edit_distance(needle, entry.name)) for entry in entries]
    # sorted() is stable, so equal distances stay in registry order
    return sorted(scored, key=lambda pair: pair[1])


def suggest(
    query: str,
    registry: Iterable[RegistryEntry],
    limit: int = 5,
) -> List[Tuple[RegistryEntry, int]]:
    """Top ``limit`` candidates offered to the operator for a free-text name."""
    if limit <= 0:
        return []
    return score_registry(query, registry)[:limit]
