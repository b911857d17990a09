# twitmin/resolution/token/tokenizer.py

"""
tokenizer.py.

Does: Scan normalized tweet text one character at a time with a small state
      machine (idle / hashtag / handle / email / url / junk) and emit typed
      tokens: Word, Filler and Special.
Returns: tokenize(text) -> TokenizeResult(tokens, length_adjustment).
Used by: resolve_tweet (first stage after normalization).
"""

from __future__ import annotations

import logging
from typing import Literal, NamedTuple

from twitmin.resolution.constants import (
    APOSTROPHE,
    EMAIL_EXTRA_CHARS,
    HANDLE_EXTRA_CHARS,
    URL_EXTRA_CHARS,
    URL_SCHEMES,
    WORD_EXTRA_CHARS,
)
from twitmin.resolution.token.normalize import collapse_filler_whitespace
from twitmin.resolution.types import Filler, InvariantViolation, Special, Token, Word
from twitmin.resolution.utils.log import debug, enabled

__all__ = [
    "State",
    "TokenizeResult",
    "Tokenizer",
    "tokenize",
    "make_filler",
    "is_word_char",
    "is_handle_char",
    "is_url_char",
    "is_email_char",
]

log = logging.getLogger(__name__)

State = Literal["idle", "hashtag", "handle", "email", "url", "junk"]

# Every state hands over to idle after one finalization; a third try means a bug
MAX_ATTEMPTS = 3


class TokenizeResult(NamedTuple):
    tokens: tuple[Token, ...]
    length_adjustment: int


# ── Character classes ────────────────────────────────────────────────────────


def is_word_char(ch: str) -> bool:
    return ch.isalnum() or ch in WORD_EXTRA_CHARS


def is_handle_char(ch: str) -> bool:
    return ch.isalnum() or ch in HANDLE_EXTRA_CHARS


def is_url_char(ch: str) -> bool:
    return ch.isalnum() or ch in URL_EXTRA_CHARS


def is_email_char(ch: str) -> bool:
    return ch.isalnum() or ch in EMAIL_EXTRA_CHARS


def make_filler(text: str) -> Filler:
    """Does: Build a Filler with its whitespace normalized."""
    return Filler(collapse_filler_whitespace(text))


# ── State machine ────────────────────────────────────────────────────────────


class Tokenizer:
    """
    Single-use scanner: feed characters, then finish().

    The buffer holds the token in progress as a list of characters; `state`
    says what it will become ("idle" with a non-empty buffer is a pending word).
    """

    def __init__(self) -> None:
        self.state: State = "idle"
        self._chars: list[str] = []
        self.tokens: list[Token] = []
        self.length_adjustment = 0

    @property
    def buffer(self) -> str:
        return "".join(self._chars)

    # ── emission ──────────────────────────────────────────────
    def _emit(self, token: Token) -> None:
        if isinstance(token, Word) and token.text.endswith(APOSTROPHE):
            # dictionary lookups never see a dangling quote
            stripped = token.text.rstrip(APOSTROPHE)
            if stripped:
                self._append(Word(stripped))
            self._append(make_filler(token.text[len(stripped):]))
        else:
            self._append(token)

        if isinstance(token, Special):
            self.length_adjustment += token.length_adjustment

        self._chars.clear()
        self.state = "idle"

    def _append(self, token: Token) -> None:
        if enabled("tokenizer"):
            debug(f"emit {token}", topic="tokenizer")
        self.tokens.append(token)

    def _finalize(self) -> None:
        """Emit the buffer as whatever the current state makes it."""
        state = self.state
        if state in ("hashtag", "handle", "email", "url"):
            self._emit(Special(self.buffer, state))
        elif state == "junk":
            self._emit(make_filler(self.buffer))
        elif state == "idle":
            self._emit(Word(self.buffer))
        else:
            raise InvariantViolation(f"Unknown tokenizer state {state!r}")

    # ── transition ────────────────────────────────────────────
    def step(self, ch: str) -> bool:
        """
        Does: Present one character to the current state.
        Returns: True when consumed; False when a token was finalized and
                 `ch` must be presented again in the new state.
        """
        state = self.state

        if state in ("hashtag", "handle"):
            if not is_handle_char(ch):
                self._finalize()
                return False
            self._chars.append(ch)
            return True

        if state == "url":
            if not is_url_char(ch):
                self._finalize()
                return False
            self._chars.append(ch)
            return True

        if state == "email":
            if not is_email_char(ch):
                self._finalize()
                return False
            self._chars.append(ch)
            return True

        if state == "junk":
            if (is_word_char(ch) and ch != APOSTROPHE) or ch in ("#", "@"):
                # end of junk, start of good stuff
                self._finalize()
                return False
            self._chars.append(ch)
            return True

        # idle: empty buffer, or a word in progress
        if is_word_char(ch):
            self._chars.append(ch)
            return True

        if ch == "@":
            # text before '@' is the local part of an e-mail
            self.state = "email" if self._chars else "handle"
            self._chars.append(ch)
            return True

        if ch == "#":
            # after word characters the '#' stays inside the word
            if not self._chars:
                self.state = "hashtag"
            self._chars.append(ch)
            return True

        if ch == ":" and self.buffer in URL_SCHEMES:
            self.state = "url"
            self._chars.append(ch)
            return True

        # junk starts
        if self._chars:
            self._finalize()
        self.state = "junk"
        self._chars.append(ch)
        return True

    def feed(self, ch: str) -> None:
        """Does: Drive step() until `ch` is consumed (bounded by MAX_ATTEMPTS)."""
        for _ in range(MAX_ATTEMPTS):
            if self.step(ch):
                return
        raise InvariantViolation(
            f"Character {ch!r} not consumed after {MAX_ATTEMPTS} attempts "
            f"(state={self.state!r}, buffer={self.buffer!r})"
        )

    def finish(self) -> TokenizeResult:
        """Does: Flush the pending buffer and return the token stream."""
        if self._chars:
            self._finalize()
        return TokenizeResult(tuple(self.tokens), self.length_adjustment)


def tokenize(text: str) -> TokenizeResult:
    """
    Does: Tokenize normalized text into Word / Filler / Special tokens.
    Returns: TokenizeResult with the tokens and the running length adjustment
             (sum of literal length minus weight over Special tokens).
    """
    tokenizer = Tokenizer()
    for ch in text:
        tokenizer.feed(ch)
    result = tokenizer.finish()
    log.debug("Tokenized %d chars into %d tokens", len(text), len(result.tokens))
    return result
