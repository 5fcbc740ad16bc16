"""
Unit tests for ResolvedValue and RegistryEntry value objects
"""
import math

import pytest

from livestock_ledger.domain.value_objects.registry_entry import RegistryEntry
from livestock_ledger.domain.value_objects.resolved_value import ResolvedValue, ValueKind


class TestIdentityValues:
    def test_identity_with_id(self):
        value = ResolvedValue.identity(101)
        assert value.kind is ValueKind.IDENTITY
        assert value.is_identity
        assert not value.is_unresolved
        assert value.to_json() == 101

    def test_unresolved_identity(self):
        value = ResolvedValue.identity(None)
        assert value.is_unresolved
        assert value.to_json() is None

    @pytest.mark.parametrize("bad", [True, 1.5, "101"])
    def test_identity_rejects_non_integers(self, bad):
        with pytest.raises(ValueError):
            ResolvedValue.identity(bad)


class TestCountValues:
    @pytest.mark.parametrize("amount", [0, 15, 2.5])
    def test_valid_counts(self, amount):
        value = ResolvedValue.count(amount)
        assert value.kind is ValueKind.COUNT
        assert not value.is_unresolved
        assert value.to_json() == amount

    @pytest.mark.parametrize("bad", [None, -1, math.inf, math.nan, False])
    def test_invalid_counts(self, bad):
        with pytest.raises(ValueError):
            ResolvedValue.count(bad)

    def test_is_immutable(self):
        value = ResolvedValue.count(3)
        with pytest.raises(AttributeError):
            value.value = 4  # type: ignore[misc]


class TestRegistryEntry:
    def test_from_dict_coerces_id(self):
        entry = RegistryEntry.from_dict({"id": "104", "name": "احمد کریمی"})
        assert entry == RegistryEntry(id=104, name="احمد کریمی")

    def test_rejects_bool_id(self):
        with pytest.raises(TypeError):
            RegistryEntry(id=True, name="x")

    def test_rejects_non_string_name(self):
        with pytest.raises(TypeError):
            RegistryEntry(id=1, name=None)  # type: ignore[arg-type]
