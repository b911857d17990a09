# tests/test_token_tokenizer.py
from __future__ import annotations

from importlib import import_module

import pytest

from twitmin.resolution.token import tokenizer as T
from twitmin.resolution.types import Filler, InvariantViolation, Special, Word

"""
Tests: token/tokenizer.py

Goals:
- token boundaries for words, fillers, #hashtags, @handles, links and e-mails
- trailing apostrophe split and filler whitespace normalization
- length adjustment collected from special tokens
- the retry bound of the driver loop
"""


def _shape(tokens):
    """(type, text) pairs; specials report their kind instead of 'special'."""
    out = []
    for t in tokens:
        if isinstance(t, Special):
            out.append((t.special_kind, t.text))
        else:
            out.append((t.kind, t.text))
    return out


def _tok(text):
    return _shape(T.tokenize(text).tokens)


# ──────────────────────────────────────────────────────────────────────────────
# Character classes
# ──────────────────────────────────────────────────────────────────────────────

def test_character_classes():
    assert T.is_word_char("é") and T.is_word_char("'") and T.is_word_char("/")
    assert not T.is_word_char("_") and not T.is_word_char("#")
    assert T.is_handle_char("_") and not T.is_handle_char("-")
    assert all(T.is_url_char(c) for c in "_-./#%=?!")
    assert not T.is_url_char(",") and not T.is_url_char(" ")
    assert T.is_email_char(".") and not T.is_email_char("/")


# ──────────────────────────────────────────────────────────────────────────────
# Token boundaries
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "text,expected",
    [
        ("#win!", [("hashtag", "#win"), ("fill", "!")]),
        ("y'all'", [("word", "y'all"), ("fill", "'")]),
        ("@bob", [("handle", "@bob")]),
        ("bob@x.com", [("email", "bob@x.com")]),
        ("bob@x.com!", [("email", "bob@x.com"), ("fill", "!")]),
        ("https://example.com", [("url", "https://example.com")]),
        ("http", [("word", "http")]),
        ("http is", [("word", "http"), ("fill", " "), ("word", "is")]),
        (
            "By the way, hi",
            [
                ("word", "By"),
                ("fill", " "),
                ("word", "the"),
                ("fill", " "),
                ("word", "way"),
                ("fill", ", "),
                ("word", "hi"),
            ],
        ),
        ("hi #tag", [("word", "hi"), ("fill", " "), ("hashtag", "#tag")]),
        ("@bob_smith: hi", [("handle", "@bob_smith"), ("fill", ": "), ("word", "hi")]),
        ("http://x.co, ok", [("url", "http://x.co"), ("fill", ", "), ("word", "ok")]),
        ("see http://x.co/a?b=1!", [("word", "see"), ("fill", " "), ("url", "http://x.co/a?b=1!")]),
        ("note: ok", [("word", "note"), ("fill", ": "), ("word", "ok")]),
        ("it's e-mail and/or", [
            ("word", "it's"), ("fill", " "), ("word", "e-mail"), ("fill", " "), ("word", "and/or"),
        ]),
        ("café naïve", [("word", "café"), ("fill", " "), ("word", "naïve")]),
        ("hi 😀!", [("word", "hi"), ("fill", " 😀!")]),
        ("@", [("handle", "@")]),
        ("#", [("hashtag", "#")]),
        ("", []),
    ],
)
def test_token_boundaries(text, expected):
    assert _tok(text) == expected


def test_hash_after_word_characters_stays_in_the_word():
    assert _tok("a#b c") == [("word", "a#b"), ("fill", " "), ("word", "c")]


def test_quote_inside_junk_stays_filler():
    assert _tok("say 'hello'") == [
        ("word", "say"),
        ("fill", " '"),
        ("word", "hello"),
        ("fill", "'"),
    ]


def test_lone_apostrophe_yields_only_filler():
    assert _tok("'") == [("fill", "'")]


def test_all_trailing_apostrophes_are_kept():
    assert _tok("yes''") == [("word", "yes"), ("fill", "''")]


def test_filler_whitespace_is_normalized_at_creation():
    assert _tok("a  \n b") == [("word", "a"), ("fill", "\n "), ("word", "b")]
    assert _tok("a    b") == [("word", "a"), ("fill", " "), ("word", "b")]


def test_token_types_are_the_closed_variants():
    toks = T.tokenize("hi #x").tokens
    assert isinstance(toks[0], Word) and toks[0].options == ("hi",)
    assert isinstance(toks[1], Filler)
    assert isinstance(toks[2], Special) and toks[2].weight == 2


# ──────────────────────────────────────────────────────────────────────────────
# Length adjustment
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "text,adjustment",
    [
        ("https://example.com", 19 - 23),
        ("#win @bob a@b.co", 0),
        ("#win http://x.co", 11 - 23),
        ("go http://averylongdomainname.example/path?q=1 now", 43 - 23),
        ("plain words only", 0),
    ],
)
def test_length_adjustment(text, adjustment):
    assert T.tokenize(text).length_adjustment == adjustment


# ──────────────────────────────────────────────────────────────────────────────
# State machine & driver
# ──────────────────────────────────────────────────────────────────────────────

def test_step_reports_retry_after_finalizing():
    tk = T.Tokenizer()
    assert tk.step("#") is True
    assert tk.state == "hashtag"
    assert tk.step("a") is True
    # '!' ends the hashtag: token emitted, char must be presented again
    assert tk.step("!") is False
    assert tk.state == "idle" and tk.buffer == ""
    assert tk.step("!") is True
    assert tk.state == "junk"
    res = tk.finish()
    assert _shape(res.tokens) == [("hashtag", "#a"), ("fill", "!")]


def test_email_state_after_local_part():
    tk = T.Tokenizer()
    for ch in "bob@":
        tk.feed(ch)
    assert tk.state == "email"
    assert tk.buffer == "bob@"


def test_feed_raises_when_character_is_never_consumed(monkeypatch):
    monkeypatch.setattr(T.Tokenizer, "step", lambda self, ch: False, raising=True)
    with pytest.raises(InvariantViolation):
        T.tokenize("x")


def test_tokenizer_debug_topic_traces_emissions(monkeypatch, capsys):
    LOG = import_module("twitmin.resolution.utils.log")

    monkeypatch.setenv("TWITMIN_DEBUG_TOPICS", "tokenizer")
    LOG.reload_topics()
    try:
        T.tokenize("hi #x")
    finally:
        monkeypatch.delenv("TWITMIN_DEBUG_TOPICS")
        LOG.reload_topics()
    err = capsys.readouterr().err
    assert "[tokenizer][DEBUG]" in err
    assert 'Special<hashtag>["#x"]' in err


def test_long_tokens_are_emitted_whole():
    word = "a" * 200_000
    url = "https://x.co/" + "p" * 200_000
    res = T.tokenize(f"{word} {url}")
    assert _shape(res.tokens) == [("word", word), ("fill", " "), ("url", url)]
    assert res.length_adjustment == len(url) - 23
