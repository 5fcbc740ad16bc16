"""
Domain Value Objects

Immutable value objects that encapsulate domain concepts with validation.
"""
from .field_type import FieldType
from .resolved_value import ResolvedValue, ValueKind
from .registry_entry import RegistryEntry
from .duplicate_policy import DuplicateMappingPolicy

__all__ = [
    'FieldType',
    'ResolvedValue',
    'ValueKind',
    'RegistryEntry',
    'DuplicateMappingPolicy',
]
