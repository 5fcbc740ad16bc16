"""File-based implementation of NameRegistryRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, List, Optional

from livestock_ledger.constants import DEFAULT_NAME_REGISTRY
from livestock_ledger.domain.entities.name_registry import NameRegistry
from livestock_ledger.domain.exceptions import RepositoryError
from livestock_ledger.domain.repositories.name_registry_repository import NameRegistryRepository

logger = logging.getLogger(__name__)


class FileNameRegistryRepository(NameRegistryRepository):
    """Load the registry from a JSON file, or the built-in list when no path is set.

    Accepted layouts: ``[{"id": 101, "name": "..."}]`` or ``{"names": [...]}``.
    """

    def __init__(self, path: Optional[str | Path] = None) -> None:
        self.path = Path(path) if path else None
        self._cached: Optional[NameRegistry] = None

    def load(self) -> NameRegistry:
        """Return the registry, reading the file only on first use."""
        if self._cached is None:
            self._cached = self._read()
        return self._cached

    def _read(self) -> NameRegistry:
        if self.path is None:
            logger.info("No registry file configured; using built-in name registry")
            return NameRegistry.from_pairs(DEFAULT_NAME_REGISTRY)

        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise RepositoryError(f"Name registry file not found: {self.path}", exc)
        except (OSError, json.JSONDecodeError) as exc:
            raise RepositoryError(f"Failed to read name registry {self.path}", exc)

        records = self._records(raw)
        try:
            registry = NameRegistry.from_records(records)
        except (KeyError, TypeError, ValueError) as exc:
            raise RepositoryError(f"Invalid name registry entry in {self.path}: {exc}", exc)

        logger.info("Loaded %d registry names from %s", len(registry), self.path)
        return registry

    def _records(self, raw: Any) -> List[dict]:
        if isinstance(raw, dict):
            raw = raw.get("names")
        if not isinstance(raw, list):
            raise RepositoryError(f"Name registry {self.path} must be a list of {{id, name}} objects")
        return [item for item in raw if isinstance(item, dict)]
