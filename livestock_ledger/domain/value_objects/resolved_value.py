"""
ResolvedValue value object

Tagged value stored per field type in a canonical payload: either a registry
identity (nullable integer) or a livestock count (finite, non-negative number).
Immutable and self-validating.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

Number = Union[int, float]


class ValueKind(str, Enum):
    IDENTITY = "identity"
    COUNT = "count"


@dataclass(frozen=True)
class ResolvedValue:
    kind: ValueKind
    value: Optional[Number]

    def __post_init__(self):
        if self.kind is ValueKind.IDENTITY:
            if self.value is not None and (isinstance(self.value, bool) or not isinstance(self.value, int)):
                raise ValueError("Identity values must be integers or None")
            return

        if self.value is None or isinstance(self.value, bool) or not isinstance(self.value, (int, float)):
            raise ValueError("Count values must be numbers")
        if not math.isfinite(self.value):
            raise ValueError("Count values must be finite")
        if self.value < 0:
            raise ValueError("Count values must be non-negative")

    @classmethod
    def identity(cls, registry_id: Optional[int]) -> ResolvedValue:
        return cls(ValueKind.IDENTITY, registry_id)

    @classmethod
    def count(cls, amount: Number) -> ResolvedValue:
        return cls(ValueKind.COUNT, amount)

    @property
    def is_identity(self) -> bool:
        return self.kind is ValueKind.IDENTITY

    @property
    def is_unresolved(self) -> bool:
        """True for an identity that no registry entry could be matched to."""
        return self.is_identity and self.value is None

    def to_json(self) -> Optional[Number]:
        return self.value
