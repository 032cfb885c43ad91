"""Text normalization and tokenization for deterministic order parsing."""

from __future__ import annotations

import re
import unicodedata

# Latin letters and digits plus the Devanagari and Telugu blocks. Dots are stripped in a second
# pass unless they sit between two digits.
_DISALLOWED_RE = re.compile(r"[^a-z0-9.\u0900-\u097f\u0c00-\u0c7f]+")
_STRAY_DOT_RE = re.compile(r"(?<![0-9])\.|\.(?![0-9])")

_DIGIT_LETTER_RE = re.compile(r"([0-9]+)([a-zA-Z]+)")
_LETTER_DIGIT_RE = re.compile(r"([a-zA-Z]+)([0-9]+)")
_DECIMAL_COMMA_RE = re.compile(r"([0-9]+),([0-9]+)")
_SEPARATOR_RE = re.compile(r"[\u2019'\"()\[\]{}+\-*/=]+")
_MULTISPACE_RE = re.compile(r"\s+")
_INDIC_RE = re.compile(r"[\u0900-\u097f\u0c00-\u0c7f]")


def _strip_diacritics(value: str) -> str:
    # Devanagari and Telugu marks (nukta, virama, length marks) are part of the letter.
    decomposed = unicodedata.normalize("NFD", value)
    kept = "".join(
        ch for ch in decomposed if not unicodedata.combining(ch) or _INDIC_RE.match(ch)
    )
    return unicodedata.normalize("NFC", kept)


def normalize_token(token: str) -> str:
    """Normalize a single token.

    Lowercases, strips diacritics and removes every character outside `[a-z0-9]`, Devanagari and
    Telugu. A dot survives only between digits, so `"1.5"` stays a decimal literal.
    """

    value = (token or "").strip().lower()
    if not value:
        return ""

    value = _strip_diacritics(value)
    value = _DISALLOWED_RE.sub("", value)
    return _STRAY_DOT_RE.sub("", value)


def _separate_numbers(text: str) -> str:
    value = _DIGIT_LETTER_RE.sub(r"\1 \2", text)
    value = _LETTER_DIGIT_RE.sub(r"\1 \2", value)
    return _DECIMAL_COMMA_RE.sub(r"\1.\2", value)


def tokenize(text: str) -> list[str]:
    """Split an utterance into normalized tokens.

    Digit runs are separated from adjacent letters first (`"2kg"` -> `["2", "kg"]`). Quotes,
    brackets and math operators act as separators. Empty or garbage input yields `[]`.
    """

    if not text:
        return []

    prepared = _separate_numbers(text)
    prepared = _SEPARATOR_RE.sub(" ", prepared)
    prepared = _MULTISPACE_RE.sub(" ", prepared).strip()
    if not prepared:
        return []

    tokens = (normalize_token(piece) for piece in prepared.split(" "))
    return [t for t in tokens if t]
