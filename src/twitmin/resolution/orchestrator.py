# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Run the whole resolution pipeline for one tweet:
      normalize → tokenize → combine phrases → find alternatives → rank
      options → normalized length.
Returns:
  - resolve_tweet(text, dictionary) -> ResolutionResult
  - normalized_length(text) -> int
Used by: The CLI and any renderer that picks the final shortened tweet.
"""

import logging

from twitmin.resolution.alternatives import (
    AlternativeDictionary,
    find_alternatives,
    rank_options,
)
from twitmin.resolution.phrase import combine_phrases
from twitmin.resolution.token import (
    collapse_filler_whitespace,
    prepare_text,
    rewrite_text,
    tokenize,
)
from twitmin.resolution.types import InvariantViolation, ResolutionResult

logger = logging.getLogger(__name__)

__all__ = [
    "resolve_tweet",
    "normalized_length",
]


def _check_lossless(scanned: str, result: ResolutionResult) -> None:
    """Token texts must rebuild the scanned text (filler whitespace normalized)."""
    expected = collapse_filler_whitespace(scanned)
    if result.text != expected:
        raise InvariantViolation(
            f"Token stream does not reproduce its input: {result.text!r} != {expected!r}"
        )


def resolve_tweet(text: str, dictionary: AlternativeDictionary) -> ResolutionResult:
    """
    Does: Tokenize `text`, merge dictionary phrases, attach case-matched
          alternatives to words (shortest first), and compute the length the
          platform would count (links weigh URL_WEIGHT).
    Returns: A fresh, immutable ResolutionResult.
    """
    original = prepare_text(text)
    scanned = rewrite_text(original)

    tokenized = tokenize(scanned)
    tokens = combine_phrases(tokenized.tokens, dictionary)
    tokens = find_alternatives(tokens, dictionary)
    tokens = rank_options(tokens)

    result = ResolutionResult(
        tokens=tuple(tokens),
        normalized_length=len(original) - tokenized.length_adjustment,
        original=original,
        length_adjustment=tokenized.length_adjustment,
    )
    _check_lossless(scanned, result)

    logger.debug(
        "Resolved %d chars → %d tokens, normalized length %d",
        len(original),
        len(result.tokens),
        result.normalized_length,
    )
    return result


def normalized_length(text: str) -> int:
    """Does: Platform character count of `text` without any dictionary work."""
    original = prepare_text(text)
    return len(original) - tokenize(rewrite_text(original)).length_adjustment
