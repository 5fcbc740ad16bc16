"""Persistence adapters."""

from .file_name_registry_repository import FileNameRegistryRepository

__all__ = ["FileNameRegistryRepository"]
