# twitmin/resolution/alternatives/dictionary.py

"""
dictionary.py.

Does: Hold the static substitution table (lowercase word or phrase → shorter
      renderings) as an immutable value, and load it from <data>/*.json.
Returns: AlternativeDictionary, load_dictionary(), get_default_dictionary().
Used by: Phrase combiner, alternative resolver, CLI.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any

from twitmin.resolution.utils.load_config import load_config

__all__ = [
    "AlternativeDictionary",
    "load_dictionary",
    "get_default_dictionary",
    "DEFAULT_DICTIONARY",
]

log = logging.getLogger(__name__)

DEFAULT_DICTIONARY = "alternatives"


def _coerce_candidates(key: str, value: Any) -> tuple[str, ...]:
    """Does: Accept one string or a list of strings. Returns: non-empty tuple."""
    if isinstance(value, str):
        return (value,)
    if isinstance(value, (list, tuple)):
        bad = [v for v in value if not isinstance(v, str)]
        if bad:
            raise TypeError(f"{key!r}: candidates must be strings, got {type(bad[0]).__name__}")
        if not value:
            raise ValueError(f"{key!r}: empty candidate list")
        return tuple(value)
    raise TypeError(f"{key!r}: expected str or list of str, got {type(value).__name__}")


class AlternativeDictionary(Mapping[str, tuple[str, ...]]):
    """
    Read-only lowercase key → candidates table.

    Keys are lowercased on construction; keys containing a space are phrases.
    Insertion order is kept (phrase passes run in that order).
    """

    __slots__ = ("_entries", "_phrases")

    def __init__(self, entries: Mapping[str, Any] | None = None):
        table: dict[str, tuple[str, ...]] = {}
        for raw_key, value in (entries or {}).items():
            if not isinstance(raw_key, str):
                raise TypeError(f"Dictionary keys must be strings, got {type(raw_key).__name__}")
            key = raw_key.strip().lower()
            if not key:
                raise ValueError("Dictionary keys must not be empty")
            candidates = _coerce_candidates(raw_key, value)
            if key in table:
                log.debug("Duplicate dictionary key %r after lowercasing; merging", key)
                candidates = table[key] + candidates
            table[key] = candidates

        self._entries: Mapping[str, tuple[str, ...]] = MappingProxyType(table)
        self._phrases: tuple[tuple[str, tuple[str, ...]], ...] = tuple(
            (k, tuple(k.split(" "))) for k in table if " " in k
        )

    # ── Mapping protocol ──────────────────────────────────────
    def __getitem__(self, key: str) -> tuple[str, ...]:
        return self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AlternativeDictionary({len(self)} entries, {len(self._phrases)} phrases)"

    # ── Lookups ───────────────────────────────────────────────
    @property
    def phrases(self) -> tuple[tuple[str, tuple[str, ...]], ...]:
        """(phrase key, its words) for every multi-word key, in insertion order."""
        return self._phrases

    def lookup(self, text: str) -> tuple[str, ...]:
        """Does: Case-insensitive lookup. Returns: candidates, or () when unknown."""
        return self._entries.get(text.lower(), ())


def load_dictionary(
    name: str | os.PathLike[str] = DEFAULT_DICTIONARY,
    *,
    base_dir: Path | None = None,
    allow_comments: bool = False,
) -> AlternativeDictionary:
    """
    Does: Load <data>/<name>.json ({"key": "alt" | ["alt", ...]}) into an
          AlternativeDictionary.
    Raises: ConfigFileNotFound / ConfigTypeError / ConfigParseError from load_config.
    """
    dictionary = load_config(
        name,
        mode="validated_dict",
        base_dir=base_dir,
        validator=AlternativeDictionary,
        allow_comments=allow_comments,
    )
    log.info("Loaded %r", dictionary)
    return dictionary


@lru_cache(maxsize=1)
def get_default_dictionary() -> AlternativeDictionary:
    """Does: Load the process-wide dictionary once (TWITMIN_DICTIONARY overrides the name)."""
    return load_dictionary(os.getenv("TWITMIN_DICTIONARY", DEFAULT_DICTIONARY))
