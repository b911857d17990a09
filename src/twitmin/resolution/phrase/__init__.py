"""
phrase.
=======

Does: Multi-word dictionary key detection over the token stream.
Exports: combine_phrases, combine_phrase
"""

from __future__ import annotations

from .combine import combine_phrase, combine_phrases

__all__ = ["combine_phrases", "combine_phrase"]
