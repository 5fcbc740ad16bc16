"""API v1 routers package."""

from . import extraction, reconciliation, registry, tables

__all__ = [
    "extraction",
    "reconciliation",
    "registry",
    "tables",
]
