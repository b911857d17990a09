# twitmin/resolution/token/__init__.py
"""
token.
=====

Does: Provide text conditioning and the character-level tweet tokenizer.
Exports: prepare_text, rewrite_text, normalize_text, praise_linux,
         collapse_filler_whitespace, tokenize, Tokenizer, TokenizeResult, make_filler
Used by: resolve_tweet and tests.
"""

from __future__ import annotations

from .normalize import (
    collapse_filler_whitespace,
    normalize_text,
    praise_linux,
    prepare_text,
    rewrite_text,
)
from .tokenizer import (
    TokenizeResult,
    Tokenizer,
    make_filler,
    tokenize,
)

__all__ = [
    # normalize
    "prepare_text",
    "rewrite_text",
    "normalize_text",
    "praise_linux",
    "collapse_filler_whitespace",
    # tokenizer
    "tokenize",
    "Tokenizer",
    "TokenizeResult",
    "make_filler",
]
