"""Policy for several columns mapped to the same field type."""
from __future__ import annotations

from enum import Enum


class DuplicateMappingPolicy(str, Enum):
    """``LAST_WRITE_WINS`` keeps the right-most column; ``STRICT`` rejects the row."""

    LAST_WRITE_WINS = "last_write_wins"
    STRICT = "strict"

    @classmethod
    def from_setting(cls, raw: str | None) -> "DuplicateMappingPolicy":
        if not raw:
            return cls.LAST_WRITE_WINS
        normalized = raw.strip().lower().replace("-", "_")
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown duplicate mapping policy: {raw!r}") from None
