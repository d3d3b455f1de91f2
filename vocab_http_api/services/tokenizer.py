# vocab_http_api/services/tokenizer.py

"""
Whitespace tokenization of submitted text.

A token is exactly the substring between runs of whitespace: no case
folding, punctuation stripping or stemming is applied.
"""

from __future__ import annotations

from typing import List, Set


def unique_tokens(text: str) -> List[str]:
    """
    Distinct tokens of ``text`` in order of first appearance.

    >>> unique_tokens("hola mundo hola")
    ['hola', 'mundo']
    """
    # first occurrence wins
    return list(dict.fromkeys(text.split()))


def tokenize(text: str) -> Set[str]:
    """
    Distinct tokens of ``text``; empty or blank input yields an empty set.
    """
    return set(text.split())


__all__ = ["tokenize", "unique_tokens"]
