# vocab_http_api/routers/languages.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends

from vocab_http_api.ports import ILanguageStore
from vocab_http_api.routers.dependencies import get_language_store
from vocab_http_api.schemas.languages import LanguageRead

router = APIRouter(prefix="/languages", tags=["languages"])


@router.get(
    "",
    response_model=List[LanguageRead],
    summary="List languages",
    description="Return the language catalog used by the frontend selectors.",
)
def list_languages(
    *,
    store: ILanguageStore = Depends(get_language_store),
) -> List[LanguageRead]:
    return [LanguageRead.model_validate(lang) for lang in store.list_all()]
