"""CSV import/export endpoints for v1 API."""
from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import Response

from livestock_ledger.api.schemas import ExtractedTableSchema, schema_to_table, table_to_schema
from livestock_ledger.api.v1.dependencies import get_export_table_handler, get_import_table_handler
from livestock_ledger.application.commands.import_table import ImportTableCommand, ImportTableHandler
from livestock_ledger.application.queries.export_table import ExportTableHandler, ExportTableQuery
from livestock_ledger.domain.exceptions import MalformedTabularTextError

router = APIRouter(prefix="/tables", tags=["tables"])


@router.post("/import", response_model=ExtractedTableSchema)
async def import_table(
    file: UploadFile = File(...),
    handler: ImportTableHandler = Depends(get_import_table_handler),
) -> ExtractedTableSchema:
    content = await file.read()
    try:
        table = handler.handle(ImportTableCommand(content=content, filename=file.filename or ""))
    except MalformedTabularTextError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return table_to_schema(table)


@router.post("/export")
def export_table(
    body: ExtractedTableSchema,
    handler: ExportTableHandler = Depends(get_export_table_handler),
) -> Response:
    try:
        table = schema_to_table(body)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    exported = handler.handle(ExportTableQuery(table=table))
    return Response(
        content=exported.content.encode("utf-8"),
        media_type=exported.media_type,
        headers={"Content-Disposition": f'attachment; filename="{exported.filename}"'},
    )
