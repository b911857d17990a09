# twitmin/resolution/alternatives/resolve.py

"""
resolve.py.

Does: Attach dictionary alternatives to Word tokens (case-matched to the
      original) and rank every Word's options shortest first.
Returns: adjust_case(), find_alternatives(), rank_options().
Used by: resolve_tweet after phrase combination.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import replace

from twitmin.resolution.alternatives.dictionary import AlternativeDictionary
from twitmin.resolution.types import Filler, Special, Token, Word

__all__ = [
    "adjust_case",
    "find_alternatives",
    "rank_options",
]

log = logging.getLogger(__name__)


def _capitalize(s: str) -> str:
    # unlike str.capitalize(), the tail keeps its case
    return s[:1].upper() + s[1:]


def adjust_case(original: str, candidates: Iterable[str]) -> list[str]:
    """
    Does: Match candidates' case to `original`:
          - all caps ("LOL")            → every candidate fully uppercased
          - capitalized ("Lol", "I")    → first letter of every candidate uppercased
          - anything else               → candidates unchanged
    Returns: New list of candidates.
    """
    if original == original.upper():
        return [c.upper() for c in candidates]

    first, second = original[:1], original[1:2]
    if first == first.upper() and second == second.lower():
        return [_capitalize(c) for c in candidates]

    return list(candidates)


def find_alternatives(
    tokens: Sequence[Token],
    dictionary: AlternativeDictionary,
) -> list[Token]:
    """
    Does: For each Word, look up its lowercased text and append the
          case-adjusted candidates after the existing options.
    Returns: New token list (non-Word tokens are passed through).
    """
    out: list[Token] = []
    for t in tokens:
        if isinstance(t, Word):
            alts = dictionary.lookup(t.text)
            if alts:
                t = replace(t, options=t.options + tuple(adjust_case(t.text, alts)))
        elif not isinstance(t, (Filler, Special)):
            raise TypeError(f"Not a token: {t!r}")
        out.append(t)
    return out


def rank_options(tokens: Sequence[Token]) -> list[Token]:
    """
    Does: Sort each Word's options by length, shortest first; equal lengths
          keep their relative order.
    Returns: New token list.
    """
    out: list[Token] = []
    for t in tokens:
        if isinstance(t, Word):
            ranked = tuple(sorted(t.options, key=len))
            if ranked != t.options:
                t = replace(t, options=ranked)
        elif not isinstance(t, (Filler, Special)):
            raise TypeError(f"Not a token: {t!r}")
        out.append(t)
    return out
