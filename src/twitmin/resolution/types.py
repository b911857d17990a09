# twitmin/resolution/types.py
from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Literal, Union

from twitmin.resolution.constants import URL_WEIGHT

"""
types.py.

Does: Define the closed token variants (Word | Filler | Special), the
      per-input ResolutionResult and the invariant error raised on bugs.
Used by: Every pipeline stage and the CLI.
"""

__all__ = [
    "SpecialKind",
    "SPECIAL_KINDS",
    "Word",
    "Filler",
    "Special",
    "Token",
    "ResolutionResult",
    "InvariantViolation",
    "special_weight",
]

SpecialKind = Literal["hashtag", "handle", "url", "email"]
SPECIAL_KINDS: frozenset[str] = frozenset({"hashtag", "handle", "url", "email"})


class InvariantViolation(RuntimeError):
    """Raise when the pipeline breaks one of its own guarantees (a bug, not bad input)."""


def special_weight(text: str, kind: SpecialKind) -> int:
    """Does: Characters a special token counts for; links are always URL_WEIGHT."""
    if kind == "url":
        return URL_WEIGHT
    return len(text)


@dataclass(frozen=True)
class Word:
    """A word or merged phrase; `options` are its alternative renderings."""

    text: str
    options: tuple[str, ...] = ()
    kind: Literal["word"] = field(default="word", init=False)

    def __post_init__(self) -> None:
        if not self.options:
            object.__setattr__(self, "options", (self.text,))

    def __str__(self) -> str:
        return f"Word[{json.dumps(self.text, ensure_ascii=False)}]"


@dataclass(frozen=True)
class Filler:
    """Whitespace / punctuation kept as is (may hold emoji or other symbols)."""

    text: str
    kind: Literal["fill"] = field(default="fill", init=False)

    def __str__(self) -> str:
        return f"Filler[{json.dumps(self.text, ensure_ascii=False)}]"


@dataclass(frozen=True)
class Special:
    """A #hashtag, @handle, link or e-mail; the text must stay exactly as is."""

    text: str
    special_kind: SpecialKind
    kind: Literal["special"] = field(default="special", init=False)

    def __post_init__(self) -> None:
        if self.special_kind not in SPECIAL_KINDS:
            raise ValueError(f"Unknown special kind {self.special_kind!r}")

    @property
    def weight(self) -> int:
        return special_weight(self.text, self.special_kind)

    @property
    def length_adjustment(self) -> int:
        """Literal length minus weight (what the platform saves or adds)."""
        return len(self.text) - self.weight

    def __str__(self) -> str:
        return f"Special<{self.special_kind}>[{json.dumps(self.text, ensure_ascii=False)}]"


Token = Union[Word, Filler, Special]


def _token_to_dict(t: Token) -> dict[str, Any]:
    if isinstance(t, Word):
        return {"type": t.kind, "text": t.text, "options": list(t.options)}
    if isinstance(t, Filler):
        return {"type": t.kind, "text": t.text}
    if isinstance(t, Special):
        return {"type": t.kind, "kind": t.special_kind, "text": t.text, "weight": t.weight}
    raise TypeError(f"Not a token: {t!r}")


@dataclass(frozen=True)
class ResolutionResult:
    """Finished token stream for one input, plus its platform length."""

    tokens: tuple[Token, ...]
    normalized_length: int
    original: str
    length_adjustment: int = 0

    @property
    def text(self) -> str:
        """Concatenated token text (the scanned input, filler-whitespace normalized)."""
        return "".join(t.text for t in self.tokens)

    @property
    def words(self) -> tuple[Word, ...]:
        return tuple(t for t in self.tokens if isinstance(t, Word))

    @property
    def specials(self) -> tuple[Special, ...]:
        return tuple(t for t in self.tokens if isinstance(t, Special))

    def to_dict(self) -> dict[str, Any]:
        """Does: JSON-ready view (tokens with options/weights, lengths, original text)."""
        return {
            "original": self.original,
            "normalized_length": self.normalized_length,
            "tokens": [_token_to_dict(t) for t in self.tokens],
        }
