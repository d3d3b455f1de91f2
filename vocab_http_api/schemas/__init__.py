"""
Top-level export module for HTTP API schemas.
"""

from .common import APIModel, ErrorResponse, LanguageID
from .languages import LanguageRead
from .words import (
    ReconcileRequest,
    ReconcileResponse,
    SubmitRequest,
    SubmitResponse,
    WordEditIn,
    WordRead,
    WordRefIn,
)

__all__ = [
    # Common
    "APIModel", "ErrorResponse", "LanguageID",

    # Languages
    "LanguageRead",

    # Words
    "WordRead", "SubmitRequest", "SubmitResponse",
    "WordEditIn", "WordRefIn", "ReconcileRequest", "ReconcileResponse",
]
