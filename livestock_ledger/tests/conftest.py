"""Pytest configuration for livestock_ledger tests.

Ensures the project root is on sys.path so ``livestock_ledger.*`` imports
resolve during test collection, and provides shared registry fixtures.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add repository root to sys.path for module resolution.
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from livestock_ledger.constants import DEFAULT_NAME_REGISTRY  # noqa: E402
from livestock_ledger.domain.entities.name_registry import NameRegistry  # noqa: E402
from livestock_ledger.domain.entities.raw_row import RawRow  # noqa: E402


@pytest.fixture
def registry() -> NameRegistry:
    """The built-in registry (ids 101-115)."""
    return NameRegistry.from_pairs(DEFAULT_NAME_REGISTRY)


@pytest.fixture
def small_registry() -> NameRegistry:
    return NameRegistry.from_pairs([
        (1, "Ali"),
        (2, "Alireza"),
        (3, "Sara"),
    ])


@pytest.fixture
def ledger_row() -> RawRow:
    """A typical extracted row: a count column and an owner name column."""
    return RawRow(id="row-1", values={"breed": "15", "owner": "علی رضا محمدی"})


class StubRegistryRepository:
    """In-memory NameRegistryRepository used by handler and API tests."""

    def __init__(self, registry: NameRegistry) -> None:
        self._registry = registry
        self.load_calls = 0

    def load(self) -> NameRegistry:
        self.load_calls += 1
        return self._registry


@pytest.fixture
def registry_repository(registry: NameRegistry) -> StubRegistryRepository:
    return StubRegistryRepository(registry)
