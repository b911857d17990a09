# constants.py
# ============

"""
constants.
=========

Does: Define immutable tweet-domain constants for tokenization, the GNU/Linux
      correction and length accounting.
Used By: Normalizer, tokenizer, token types, CLI.
Returns: Pure data structures only (no side effects).
"""

from __future__ import annotations

# ── 1) Length accounting ─────────────────────────────────────────────────────

# Every link is shortened by the platform to a fixed-width t.co form
URL_WEIGHT = 23

# ── 2) Character classes (besides Unicode alnum) ─────────────────────────────

WORD_EXTRA_CHARS: frozenset[str] = frozenset({"'", "-", "/"})
HANDLE_EXTRA_CHARS: frozenset[str] = frozenset({"_"})
URL_EXTRA_CHARS: frozenset[str] = frozenset({"_", "-", ".", "/", "#", "%", "=", "?", "!"})
EMAIL_EXTRA_CHARS: frozenset[str] = frozenset({"_", "-", "."})

# A word buffer followed by ':' starts a link only for these schemes
URL_SCHEMES: frozenset[str] = frozenset({"http", "https"})

APOSTROPHE = "'"
ELLIPSIS = "…"

# ── 3) Text corrections ──────────────────────────────────────────────────────

# Longest alternatives first so "sucks balls" wins over "sucks"
LINUX_NEGATIVE_PHRASES: tuple[str, ...] = (
    r"is\s+bad",
    r"sucks\s+dick",
    r"sucks\s+balls",
    r"sucks",
)
LINUX_REPLACEMENT = "GNU/Linux"
LINUX_PRAISE = "is great"

# ── 4) Demo ──────────────────────────────────────────────────────────────────

SAMPLE_TWEET = (
    "By the way, thanks for the tips @bob!! Be right back... "
    "see https://example.com/a-very-long-path?ref=tweet #win"
)
