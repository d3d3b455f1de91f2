# vocab_http_api/routers/words.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from vocab_http_api.ports import IWordStore
from vocab_http_api.routers.dependencies import (
    get_ingestion_service,
    get_reconciliation_service,
    get_word_store,
)
from vocab_http_api.schemas.common import ErrorResponse
from vocab_http_api.schemas.words import (
    ReconcileRequest,
    ReconcileResponse,
    SubmitRequest,
    SubmitResponse,
    WordRead,
)
from vocab_http_api.services import IngestionService, ReconciliationService

router = APIRouter(
    tags=["words"],
    responses={
        400: {"model": ErrorResponse, "description": "Malformed request payload"},
        503: {"model": ErrorResponse, "description": "Word store unavailable"},
    },
)


@router.post(
    "/submit",
    response_model=SubmitResponse,
    summary="Collect words from text",
    description=(
        "Split the text on whitespace, store every word not yet known for the "
        "source language, and return all of the text's words grouped by "
        "whether they already have a translation."
    ),
)
def submit_text(
    *,
    payload: SubmitRequest,
    service: IngestionService = Depends(get_ingestion_service),
) -> SubmitResponse:
    result = service.submit(
        payload.text,
        payload.source_language_id,
        payload.learning_language_id,
    )
    return SubmitResponse(
        translated=[WordRead.model_validate(w) for w in result.translated],
        untranslated=[WordRead.model_validate(w) for w in result.untranslated],
    )


@router.post(
    "/filledwords",
    response_model=ReconcileResponse,
    summary="Save translations and deletions",
    description=(
        "Delete the listed words, then apply translation edits. Items are "
        "applied one by one; unknown ids are reported but never fail the batch."
    ),
)
def reconcile_words(
    *,
    payload: ReconcileRequest,
    service: ReconciliationService = Depends(get_reconciliation_service),
) -> ReconcileResponse:
    result = service.reconcile(
        updates=[edit.to_domain() for edit in payload.updates],
        deletions=[ref.to_domain() for ref in payload.deletions],
    )
    return ReconcileResponse(
        message=result.message,
        deleted=result.deleted,
        skipped_deletions=result.skipped_deletions,
        updated=result.updated,
        failed_updates=result.failed_updates,
    )


@router.get(
    "/words",
    response_model=List[WordRead],
    summary="List words",
    description="Return every stored word, ordered by id.",
)
def list_words(
    *,
    store: IWordStore = Depends(get_word_store),
) -> List[WordRead]:
    return [WordRead.model_validate(w) for w in store.list_all()]
