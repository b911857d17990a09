# twitmin/resolution/phrase/combine.py

"""
combine.py.

Does: Merge runs of Word tokens that spell a multi-word dictionary key
      ("by the way") into a single Word, keeping the original text.
Returns: combine_phrases(), combine_phrase().
Used by: resolve_tweet, between tokenization and alternative lookup.

Matching rules:
- words compare case-insensitively against the lowercase phrase words;
- consecutive words must be separated by exactly one Filler that is pure
  whitespace;
- one left-to-right pass per phrase, in dictionary order; on a failed
  attempt the start token is kept and scanning resumes right after it.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from twitmin.resolution.alternatives.dictionary import AlternativeDictionary
from twitmin.resolution.types import Filler, Token, Word
from twitmin.resolution.utils.log import debug

__all__ = [
    "combine_phrase",
    "combine_phrases",
]

log = logging.getLogger(__name__)


def _is_separator(t: Token) -> bool:
    return isinstance(t, Filler) and t.text.strip() == ""


def _match_at(tokens: Sequence[Token], start: int, words: Sequence[str]) -> int | None:
    """
    Does: Try to match `words` at tokens[start:].
    Returns: End index (exclusive) of the matched span, or None.
    """
    n = len(tokens)
    i = start
    for k, word in enumerate(words):
        if k:
            if i >= n or not _is_separator(tokens[i]):
                return None
            i += 1
        if i >= n:
            return None
        t = tokens[i]
        if not isinstance(t, Word) or t.text.lower() != word:
            return None
        i += 1
    return i


def combine_phrase(tokens: Sequence[Token], words: Sequence[str]) -> list[Token]:
    """
    Does: One pass for a single phrase (given as its lowercase words).
    Returns: New token list; merged spans become Word(verbatim concatenation).
    """
    out: list[Token] = []
    i = 0
    n = len(tokens)
    while i < n:
        end = _match_at(tokens, i, words) if isinstance(tokens[i], Word) else None
        if end is None:
            out.append(tokens[i])
            i += 1
            continue
        merged = Word("".join(t.text for t in tokens[i:end]))
        debug(f"merged {merged} for phrase {' '.join(words)!r}", topic="phrase")
        out.append(merged)
        i = end
    return out


def _word_set(tokens: Sequence[Token]) -> set[str]:
    return {t.text.lower() for t in tokens if isinstance(t, Word)}


def combine_phrases(
    tokens: Sequence[Token],
    dictionary: AlternativeDictionary,
) -> list[Token]:
    """
    Does: Run combine_phrase for every phrase key of `dictionary`, each pass
          on the previous pass's output. Passes whose words do not all occur
          among the current Word tokens cannot match and are skipped.
    Returns: New token list.
    """
    current = list(tokens)
    present = _word_set(current)
    merges = 0
    for _phrase, words in dictionary.phrases:
        if not all(w in present for w in words):
            continue
        combined = combine_phrase(current, words)
        if len(combined) != len(current):
            merges += 1
            current = combined
            present = _word_set(current)
    if merges:
        log.debug("Phrase pass merged %d phrase keys", merges)
    return current
