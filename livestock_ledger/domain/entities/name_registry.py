"""
NameRegistry Entity - authoritative list of known people

Immutable for a session and safe to share between concurrent reconciliations.
The registry id, not the display name, is the canonical identity.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, Optional, Tuple

from ..value_objects.registry_entry import RegistryEntry


class NameRegistry:
    """Ordered, read-only sequence of :class:`RegistryEntry`."""

    def __init__(self, entries: Iterable[RegistryEntry]) -> None:
        self._entries: Tuple[RegistryEntry, ...] = tuple(entries)
        self._by_id: Dict[int, RegistryEntry] = {}
        for entry in self._entries:
            if entry.id in self._by_id:
                raise ValueError(f"Duplicate registry id: {entry.id}")
            self._by_id[entry.id] = entry

    @classmethod
    def from_pairs(cls, pairs: Iterable[Tuple[int, str]]) -> "NameRegistry":
        return cls(RegistryEntry(id=entry_id, name=name) for entry_id, name in pairs)

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "NameRegistry":
        return cls(RegistryEntry.from_dict(record) for record in records)

    @property
    def entries(self) -> Tuple[RegistryEntry, ...]:
        return self._entries

    def find_by_id(self, entry_id: int) -> Optional[RegistryEntry]:
        return self._by_id.get(entry_id)

    def contains_id(self, entry_id: int) -> bool:
        return entry_id in self._by_id

    def find_exact(self, text: str) -> Optional[RegistryEntry]:
        """First entry whose display name equals ``text`` once both are trimmed."""
        needle = (text or "").strip()
        if not needle:
            return None
        for entry in self._entries:
            if entry.name.strip() == needle:
                return entry
        return None

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"NameRegistry(entries={len(self._entries)})"
