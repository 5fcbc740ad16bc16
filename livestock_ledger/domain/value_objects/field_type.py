"""Semantic field types a ledger column can be mapped to."""
from __future__ import annotations

from enum import Enum
from typing import Tuple


class FieldType(str, Enum):
    """Closed set of column meanings.

    ``UNMAPPED`` and ``PERSON_NAME`` are structural; every other member is a
    livestock count category. New categories are added as further members.
    """

    UNMAPPED = "unmapped"
    PERSON_NAME = "name"
    COW = "cow"
    SHEEP = "sheep"
    GOAT = "goat"

    @property
    def is_livestock(self) -> bool:
        return self not in (FieldType.UNMAPPED, FieldType.PERSON_NAME)

    @property
    def is_active(self) -> bool:
        return self is not FieldType.UNMAPPED

    @classmethod
    def livestock(cls) -> Tuple["FieldType", ...]:
        return tuple(member for member in cls if member.is_livestock)

    @classmethod
    def default_livestock(cls) -> "FieldType":
        """Placeholder category for numeric columns until the operator corrects it."""
        return cls.SHEEP

    @classmethod
    def parse(cls, raw: "str | FieldType | None") -> "FieldType":
        """Accept enum members, values (``"sheep"``) or names (``"SHEEP"``).

        ``None``, ``""`` and the legacy ``"None"`` marker mean unmapped.
        """
        if isinstance(raw, FieldType):
            return raw
        if raw is None:
            return cls.UNMAPPED
        text = str(raw).strip()
        if not text or text.lower() in {"none", "ignore"}:
            return cls.UNMAPPED
        try:
            return cls(text.lower())
        except ValueError:
            try:
                return cls[text.upper()]
            except KeyError:
                raise ValueError(f"Unknown field type: {raw!r}") from None
