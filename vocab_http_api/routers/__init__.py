"""
HTTP routers for the vocabulary collector API.
"""

from . import languages, words

__all__ = ["languages", "words"]
