# twitmin/resolution/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Text conditioning applied before the tokenizer sees a tweet
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Trim and unify line endings, compact "..." into an ellipsis, apply the
      case-preserving GNU/Linux correction, and normalize filler whitespace.
Returns: prepare_text(), rewrite_text(), normalize_text(), praise_linux(),
         collapse_filler_whitespace().
Used by: The tokenizer (filler creation) and the resolve_tweet orchestrator.
"""

from __future__ import annotations

import re

from twitmin.resolution.constants import (
    ELLIPSIS,
    LINUX_NEGATIVE_PHRASES,
    LINUX_PRAISE,
    LINUX_REPLACEMENT,
)

__all__ = [
    "prepare_text",
    "rewrite_text",
    "normalize_text",
    "praise_linux",
    "collapse_filler_whitespace",
]

_CRLF_RE = re.compile(r"\r\n")
# ASCII trim set; NBSP and other Unicode spaces at the edges are content
_TRIM_CHARS = " \t\n\r\0\x0b"
_MULTI_SPACE_RE = re.compile(r"[ ]{2,}")
_SPACE_BEFORE_NL_RE = re.compile(r"[ ]+\n")

# (linux)(whitespace)(negative phrase | nothing at a word boundary)
_LINUX_RE = re.compile(
    r"((?:gnu/|arch|\b)linux)(\s+)(" + "|".join(LINUX_NEGATIVE_PHRASES) + r"|\b)",
    re.IGNORECASE | re.MULTILINE,
)


# ──────────────────────────────────────────────────────────────
# 1) Conditioning
# ──────────────────────────────────────────────────────────────


def prepare_text(raw: str) -> str:
    """
    Does: Trim surrounding whitespace and turn CRLF into LF.
    Returns: The text whose length is the base of length accounting.
    """
    if not isinstance(raw, str):
        return ""
    return _CRLF_RE.sub("\n", raw.strip(_TRIM_CHARS))


def _praise(m: re.Match[str]) -> str:
    linux, space, negative = m.group(1), m.group(2), m.group(3)
    if linux.lower() == "linux":
        linux = LINUX_REPLACEMENT.upper() if linux.isupper() else LINUX_REPLACEMENT
    # an empty span counts as upper case
    praise = LINUX_PRAISE.upper() if negative == negative.upper() else LINUX_PRAISE
    return linux + space + praise


def praise_linux(text: str) -> str:
    """
    Does: Rewrite "linux sucks"-style spans to "GNU/Linux is great", matching case.
    Returns: Corrected text (unchanged when nothing matches).
    """
    return _LINUX_RE.sub(_praise, text)


def rewrite_text(prepared: str) -> str:
    """
    Does: "..." → "…" then praise_linux, on text already through prepare_text.
    Returns: Text ready for character scanning.
    """
    return praise_linux(prepared.replace("...", ELLIPSIS))


def normalize_text(raw: str) -> str:
    """Does: prepare_text + rewrite_text."""
    return rewrite_text(prepare_text(raw))


# ──────────────────────────────────────────────────────────────
# 2) Filler whitespace
# ──────────────────────────────────────────────────────────────


def collapse_filler_whitespace(text: str) -> str:
    """
    Does: Collapse runs of 2+ spaces to one and drop spaces right before a newline.
    Returns: Normalized text; applied to every Filler at creation.
    """
    text = _MULTI_SPACE_RE.sub(" ", text)
    return _SPACE_BEFORE_NL_RE.sub("\n", text)
