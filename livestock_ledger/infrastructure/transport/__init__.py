"""Ledger service transport adapters."""

from .ledger_client import LedgerTransportClient, TransportAcknowledgement

__all__ = ["LedgerTransportClient", "TransportAcknowledgement"]
