# vocab_http_api/schemas/languages.py

from __future__ import annotations

from pydantic import Field

from .common import APIModel


class LanguageRead(APIModel):
    """
    Language catalog entry, used by the frontend language selectors.
    """

    id: int
    name: str = Field(..., description="Display name, e.g. 'Spanish'.")
    flag: str = Field(..., description="Display glyph, usually a flag emoji.")


__all__ = ["LanguageRead"]
