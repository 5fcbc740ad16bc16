"""Domain entities package"""

from .raw_row import RawRow
from .extracted_table import ExtractedTable
from .field_mapping import FieldMapping
from .name_registry import NameRegistry
from .canonical_payload import CanonicalPayload

__all__ = ["RawRow", "ExtractedTable", "FieldMapping", "NameRegistry", "CanonicalPayload"]
