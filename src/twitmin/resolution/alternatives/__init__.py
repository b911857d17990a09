"""
alternatives
============

Does: Expose the substitution dictionary and the lookup / ranking stages.
Returns: Re-exports of stable symbols from `dictionary` and `resolve`.
Used by: resolve_tweet, the CLI and tests.
Example:
    d = load_dictionary(); toks = rank_options(find_alternatives(toks, d))
"""

from __future__ import annotations

# ── Public API re-exports ─────────────────────────────────────────────────────
from .dictionary import (
    DEFAULT_DICTIONARY,
    AlternativeDictionary,
    get_default_dictionary,
    load_dictionary,
)
from .resolve import (
    adjust_case,
    find_alternatives,
    rank_options,
)

__all__ = [
    "AlternativeDictionary",
    "DEFAULT_DICTIONARY",
    "load_dictionary",
    "get_default_dictionary",
    "adjust_case",
    "find_alternatives",
    "rank_options",
]

__docformat__ = "google"
