"""SubmitRow Command - reconcile a row, then send it to the ledger service.

Validation runs first and blocks the network call entirely; a transport
failure is reported as-is and may be retried by submitting again.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Protocol

from livestock_ledger.application.dto.reconciliation_dto import SubmissionResultDTO
from livestock_ledger.domain.entities.canonical_payload import CanonicalPayload

from .reconcile_row import ReconcileRowCommand, ReconcileRowHandler

logger = logging.getLogger(__name__)


class PayloadTransport(Protocol):
    def send(self, payload: CanonicalPayload): ...


@dataclass(frozen=True)
class SubmitRowCommand(ReconcileRowCommand):
    """Same inputs as reconciliation; the handler also delivers the payload."""


class SubmitRowHandler:
    """Handles SubmitRow commands."""

    def __init__(self, reconcile_handler: ReconcileRowHandler, transport: PayloadTransport):
        self._reconcile = reconcile_handler
        self._transport = transport

    def handle(self, command: SubmitRowCommand) -> SubmissionResultDTO:
        payload = self._reconcile.handle(command)
        if payload.has_unresolved_identity:
            logger.info("Submitting row %s without a resolved registry id", payload.raw_row.id)

        ack = self._transport.send(payload)
        return SubmissionResultDTO(
            row_id=payload.raw_row.id,
            payload=payload.to_dict(),
            status_code=ack.status_code,
            message=ack.message,
            dry_run=ack.dry_run,
        )
