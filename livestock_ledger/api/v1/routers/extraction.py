"""Image extraction endpoints for v1 API."""
from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool

from livestock_ledger.api.schemas import ExtractedTableSchema, table_to_schema
from livestock_ledger.api.v1.dependencies import get_extract_table_handler
from livestock_ledger.application.commands.extract_table import (
    ExtractTableCommand,
    ExtractTableHandler,
)
from livestock_ledger.domain.exceptions import DomainValidationError, ExtractionError

router = APIRouter(tags=["extraction"])


@router.post("/extractions", response_model=ExtractedTableSchema)
async def extract_table(
    file: UploadFile = File(...),
    handler: ExtractTableHandler = Depends(get_extract_table_handler),
) -> ExtractedTableSchema:
    media_type = (file.content_type or "").lower()
    if not media_type.startswith("image/"):
        raise HTTPException(status_code=415, detail="Only image uploads are supported")

    data = await file.read()
    try:
        table = await run_in_threadpool(
            handler.handle, ExtractTableCommand(data=data, media_type=media_type)
        )
    except DomainValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except ExtractionError as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    return table_to_schema(table)
