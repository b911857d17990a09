# twitmin/resolution/__init__.py

"""
resolution.
===========

Does: Tweet resolution pipeline (normalize, tokenize, combine phrases, look up
      shorter alternatives, rank them, count the platform length).
Exports: resolve_tweet, normalized_length, the token types and the dictionary API.
Used by: The CLI demo and external renderers choosing a final rewrite.
"""

from __future__ import annotations

from .alternatives import (
    AlternativeDictionary,
    get_default_dictionary,
    load_dictionary,
)
from .orchestrator import normalized_length, resolve_tweet
from .types import (
    Filler,
    InvariantViolation,
    ResolutionResult,
    Special,
    Token,
    Word,
)

__all__ = [
    "resolve_tweet",
    "normalized_length",
    "AlternativeDictionary",
    "load_dictionary",
    "get_default_dictionary",
    "Token",
    "Word",
    "Filler",
    "Special",
    "ResolutionResult",
    "InvariantViolation",
]
