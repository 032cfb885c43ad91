"""Utterance segmentation into item-level clauses."""

from __future__ import annotations

import re

_SENTENCE_PUNCT_RE = re.compile(r"[!?]+")
_MULTISPACE_RE = re.compile(r"\s+")
_TRAILING_DOTS_RE = re.compile(r"\.+$")

# Whole-word delimiters: English, Telugu, Hindi and romanized forms of "and"/"along with". They
# split only between whitespace, sentence punctuation or the string ends.
WORD_DELIMITERS: tuple[str, ...] = (
    "or",
    "with",
    "and also",
    "and then",
    "and plus",
    "and please",
    "andar",
    "మరియు",
    "మరియు కూడా",
    "మరీ",
    "తో పాటు",
    "తో",
    "అలాగే",
    "పాటు",
    "और",
    "और भी",
    "औऱ",
)

# Punctuation delimiters split regardless of surrounding whitespace.
SYMBOL_DELIMITERS: tuple[str, ...] = (",", "+")


def _build_regex_alternation(phrases: tuple[str, ...]) -> str:
    # Longest first so "and then" wins over a shorter overlapping phrase.
    parts = sorted(phrases, key=lambda p: (-len(p), p))
    return "|".join(re.escape(p) for p in parts)


_SPLIT_RE = re.compile(
    rf"{_build_regex_alternation(SYMBOL_DELIMITERS)}"
    rf"|(?<![^\s.,;:])(?:{_build_regex_alternation(WORD_DELIMITERS)})(?![^\s.,;:])",
    flags=re.IGNORECASE,
)


def split_utterance(text: str) -> list[str]:
    """Split an utterance into ordered segments, one per intended order line.

    `!`/`?` are treated as sentence ends, trailing dots are trimmed from each piece and empty
    pieces are dropped. Left-to-right order is preserved.
    """

    value = _SENTENCE_PUNCT_RE.sub(".", text or "")
    value = _MULTISPACE_RE.sub(" ", value).strip()
    if not value:
        return []

    segments: list[str] = []
    for piece in _SPLIT_RE.split(value):
        cleaned = _TRAILING_DOTS_RE.sub("", piece.strip()).strip()
        if cleaned:
            segments.append(cleaned)
    return segments
