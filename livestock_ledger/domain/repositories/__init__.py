"""Domain repository interfaces."""

from .name_registry_repository import NameRegistryRepository

__all__ = ["NameRegistryRepository"]
