"""Name registry repository interface (Abstract Base Class)."""

from abc import ABC, abstractmethod

from livestock_ledger.domain.entities.name_registry import NameRegistry


class NameRegistryRepository(ABC):
    """Abstract source of the authoritative name registry."""

    @abstractmethod
    def load(self) -> NameRegistry:
        """Return the registry for the current session."""
