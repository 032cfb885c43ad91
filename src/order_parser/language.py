"""Language hint detection (Telugu / Hindi / English / mixed)."""

from __future__ import annotations

import re
from collections.abc import Sequence

from src.order_parser.schema import LanguageHint

_TELUGU_RE = re.compile(r"^[\u0c00-\u0c7f]+$")
_DEVANAGARI_RE = re.compile(r"^[\u0900-\u097f]+$")

NATIVE_SCRIPT_WEIGHT = 2
HINT_WORD_WEIGHT = 1

HINT_WORDS: dict[LanguageHint, frozenset[str]] = {
    LanguageHint.te: frozenset(
        {"oka", "rendu", "moodu", "nalugu", "aidu", "ara", "pav", "bendakaya", "tomatolu"}
    ),
    LanguageHint.hi: frozenset(
        {"ek", "do", "teen", "char", "paanch", "sawa", "aadha", "paav", "dozen"}
    ),
    LanguageHint.en: frozenset({"one", "two", "three", "four", "half", "quarter", "piece"}),
}


def _score(tokens: Sequence[str]) -> dict[LanguageHint, int]:
    # Insertion order (te, hi, en) decides ties for the best score.
    scores = {LanguageHint.te: 0, LanguageHint.hi: 0, LanguageHint.en: 0}
    for token in tokens:
        if _TELUGU_RE.match(token):
            scores[LanguageHint.te] += NATIVE_SCRIPT_WEIGHT
        elif _DEVANAGARI_RE.match(token):
            scores[LanguageHint.hi] += NATIVE_SCRIPT_WEIGHT

        for lang, words in HINT_WORDS.items():
            if token in words:
                scores[lang] += HINT_WORD_WEIGHT
    return scores


def guess_language(tokens: Sequence[str]) -> LanguageHint:
    """Classify normalized tokens.

    Two or more languages within one point of the best (and above zero) give `mixed`, as does a
    token list without any signal. An empty token list gives `en`.
    """

    if not tokens:
        return LanguageHint.en

    scores = _score(tokens)
    best_lang = max(scores, key=lambda lang: scores[lang])
    best_score = scores[best_lang]

    significant = [lang for lang, score in scores.items() if score > 0 and score >= best_score - 1]
    if len(significant) > 1 or best_score == 0:
        return LanguageHint.mixed
    return best_lang
