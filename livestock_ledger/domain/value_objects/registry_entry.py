"""Name registry entry value object."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class RegistryEntry:
    """A known person. ``id`` is the canonical identity; ``name`` is for display."""

    id: int
    name: str

    def __post_init__(self):
        if isinstance(self.id, bool) or not isinstance(self.id, int):
            raise TypeError("Registry id must be an integer")
        if not isinstance(self.name, str):
            raise TypeError("Registry name must be a string")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RegistryEntry":
        return cls(id=int(data["id"]), name=str(data["name"]))
