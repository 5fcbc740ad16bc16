"""Field mapping, reconciliation and submission endpoints for v1 API."""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from livestock_ledger.api.schemas import (
    CanonicalPayloadSchema,
    ProposeMappingResponseSchema,
    ReconcileRequestSchema,
    RowInputSchema,
    SubmissionResponseSchema,
    payload_to_schema,
)
from livestock_ledger.api.v1.dependencies import (
    get_propose_mapping_handler,
    get_reconcile_row_handler,
    get_submit_row_handler,
)
from livestock_ledger.application.commands.reconcile_row import (
    ReconcileRowCommand,
    ReconcileRowHandler,
)
from livestock_ledger.application.commands.submit_row import SubmitRowCommand, SubmitRowHandler
from livestock_ledger.application.queries.propose_mapping import (
    ProposeMappingHandler,
    ProposeMappingQuery,
)
from livestock_ledger.config import get_settings
from livestock_ledger.domain.exceptions import (
    DomainValidationError,
    ReconciliationError,
    RepositoryError,
    TransportError,
)

router = APIRouter(tags=["reconciliation"])


@router.post("/mappings/propose", response_model=ProposeMappingResponseSchema)
def propose_mapping(
    body: RowInputSchema,
    handler: ProposeMappingHandler = Depends(get_propose_mapping_handler),
) -> ProposeMappingResponseSchema:
    mapping = handler.handle(ProposeMappingQuery(row=_raw_row(body)))
    return ProposeMappingResponseSchema(mapping=mapping)


@router.post("/reconciliations", response_model=CanonicalPayloadSchema)
def reconcile_row(
    body: ReconcileRequestSchema,
    handler: ReconcileRowHandler = Depends(get_reconcile_row_handler),
) -> CanonicalPayloadSchema:
    command = ReconcileRowCommand(**_command_kwargs(body))
    try:
        payload = handler.handle(command)
    except ReconciliationError as exc:
        raise HTTPException(status_code=422, detail=exc.to_dict()) from exc
    except DomainValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except RepositoryError as exc:
        raise HTTPException(status_code=500, detail="Failed to load name registry") from exc

    return payload_to_schema(payload)


@router.post("/submissions", response_model=SubmissionResponseSchema)
def submit_row(
    body: ReconcileRequestSchema,
    handler: SubmitRowHandler = Depends(get_submit_row_handler),
) -> SubmissionResponseSchema:
    command = SubmitRowCommand(**_command_kwargs(body))
    try:
        result = handler.handle(command)
    except ReconciliationError as exc:
        raise HTTPException(status_code=422, detail=exc.to_dict()) from exc
    except DomainValidationError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except TransportError as exc:
        raise HTTPException(status_code=502, detail=exc.message) from exc
    except RepositoryError as exc:
        raise HTTPException(status_code=500, detail="Failed to load name registry") from exc

    return SubmissionResponseSchema(
        rowId=result.row_id,
        message=result.message,
        statusCode=result.status_code,
        dryRun=result.dry_run,
        payload=CanonicalPayloadSchema(**result.payload),
    )


def _raw_row(body: RowInputSchema):
    try:
        return body.to_raw_row()
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


def _command_kwargs(body: ReconcileRequestSchema) -> dict:
    return {
        "row": _raw_row(body),
        "mapping": body.mapping,
        "transaction_date": body.date if body.date is not None else get_settings().default_transaction_date,
        "selected_identity": body.selectedIdentity,
        "values": body.values,
    }
