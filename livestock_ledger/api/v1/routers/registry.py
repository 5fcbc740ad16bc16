"""Name registry endpoints for v1 API."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from livestock_ledger.api.schemas import NameSuggestionListSchema, NameSuggestionSchema
from livestock_ledger.api.v1.dependencies import get_suggest_names_handler
from livestock_ledger.application.queries.suggest_names import SuggestNamesHandler, SuggestNamesQuery
from livestock_ledger.config import get_settings
from livestock_ledger.domain.exceptions import RepositoryError

router = APIRouter(prefix="/registry", tags=["registry"])


@router.get("/names", response_model=NameSuggestionListSchema)
def suggest_names(
    query: str = "",
    limit: Optional[int] = Query(default=None, ge=0),
    handler: SuggestNamesHandler = Depends(get_suggest_names_handler),
) -> NameSuggestionListSchema:
    if limit is None:
        limit = get_settings().name_suggestion_limit
    try:
        suggestions = handler.handle(SuggestNamesQuery(query=query, limit=limit))
    except RepositoryError as exc:
        raise HTTPException(status_code=500, detail="Failed to load name registry") from exc

    return NameSuggestionListSchema(
        query=query,
        suggestions=[
            NameSuggestionSchema(id=item.id, name=item.name, distance=item.distance)
            for item in suggestions
        ],
    )
