"""
vocab_http_api
--------------

HTTP API for the vocabulary collector.

The service collects words from submitted text per source language and
stores the translations users fill in for them.

- ``vocab_http_api.main:app``: the ASGI application for uvicorn.
- ``vocab_http_api.main:create_app``: application factory.
"""

from importlib import metadata as _metadata

# ---------------------------------------------------------------------------
# Package metadata
# ---------------------------------------------------------------------------

try:
    __version__: str = _metadata.version("vocabulary-collector")
except _metadata.PackageNotFoundError:  # When running from source tree
    __version__ = "0.0.0"


__all__ = ["__version__"]
