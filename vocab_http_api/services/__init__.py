"""
vocab_http_api.services
-----------------------

Service layer for the vocabulary collector API.

Routers should import service classes from this package instead of
depending directly on repositories:

    from vocab_http_api.services import IngestionService, ReconciliationService
"""

from .ingestion_service import IngestionService
from .reconciliation_service import ReconciliationService
from .tokenizer import tokenize, unique_tokens

__all__ = [
    "IngestionService",
    "ReconciliationService",
    "tokenize",
    "unique_tokens",
]
