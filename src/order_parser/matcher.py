"""Product matching and guess generation against the canonical lexicon.

Every alias of every entry is scored; there is no early exit because a later alias can still win
on specificity. Equal scores keep the earlier lexicon entry.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from src.order_parser.distance import MAX_FUZZY_DISTANCE, levenshtein, within_tolerance
from src.order_parser.lexicon import PRODUCT_LEXICON
from src.order_parser.normalize import tokenize
from src.order_parser.schema import MAX_GUESSES, LexiconEntry, ParseGuess

# Below this score a match is a single token at the edge of fuzzy tolerance (or one token of a
# multi-token alias) and the segment is reported as guesses instead.
MIN_MATCH_SCORE = 3
SEGMENT_GUESS_LIMIT = 3
SWEEP_CONFIDENCE = 0.3


@dataclass(frozen=True)
class ProductMatch:
    """Best-scoring lexicon entry for a token sequence."""

    name: str
    score: int
    alias: str


def _best_distance(alias_token: str, tokens: Sequence[str]) -> int:
    return min(levenshtein(token, alias_token) for token in tokens)


def _score_alias(alias: str, tokens: Sequence[str], padded: str) -> int:
    alias_tokens = alias.split(" ")

    # Exact phrase anchored at a token start; also accepts suffixed forms ("tomatolu", "eggs").
    if f" {alias}" in padded:
        return len(alias_tokens) * 2 + 3

    if len(alias_tokens) == 1:
        distance = _best_distance(alias_tokens[0], tokens)
        if distance <= MAX_FUZZY_DISTANCE:
            return 2 + (MAX_FUZZY_DISTANCE - distance)
        return 0

    matches = sum(
        1 for alias_token in alias_tokens if _best_distance(alias_token, tokens) <= MAX_FUZZY_DISTANCE
    )
    return matches * 2


def match_product(
        tokens: Sequence[str],
        lexicon: Sequence[LexiconEntry] = PRODUCT_LEXICON,
) -> ProductMatch | None:
    """Return the best lexicon match for residual product tokens.

    Returns:
        The highest-scoring entry, or `None` if no alias reaches `MIN_MATCH_SCORE`.
    """

    if not tokens:
        return None

    padded = " " + " ".join(tokens)
    best: ProductMatch | None = None
    for entry in lexicon:
        for alias in entry.aliases:
            score = _score_alias(alias, tokens, padded)
            if score > 0 and (best is None or score > best.score):
                best = ProductMatch(name=entry.name, score=score, alias=alias)

    if best is None or best.score < MIN_MATCH_SCORE:
        return None
    return best


def _alias_fraction(alias: str, tokens: Sequence[str]) -> float:
    alias_tokens = alias.split(" ")
    matched = sum(
        1 for alias_token in alias_tokens if any(within_tolerance(t, alias_token) for t in tokens)
    )
    return matched / len(alias_tokens)


def build_guesses(
        segment: str,
        lexicon: Sequence[LexiconEntry] = PRODUCT_LEXICON,
) -> list[ParseGuess]:
    """Rank lexicon entries by the share of alias tokens fuzzily present in the segment."""

    tokens = tokenize(segment)
    if not tokens:
        return []

    raw = segment.strip()
    guesses: list[ParseGuess] = []
    for entry in lexicon:
        alias_score = max((_alias_fraction(alias, tokens) for alias in entry.aliases), default=0.0)
        if alias_score > 0:
            guesses.append(ParseGuess(name=entry.name, confidence=min(1.0, alias_score), raw=raw))

    guesses.sort(key=lambda g: -g.confidence)
    return guesses[:SEGMENT_GUESS_LIMIT]


def sweep_guesses(
        tokens: Sequence[str],
        raw: str,
        lexicon: Sequence[LexiconEntry] = PRODUCT_LEXICON,
) -> list[ParseGuess]:
    """Last-resort guesses: any entry with an alias token close to any utterance token."""

    if not tokens:
        return []

    guesses: list[ParseGuess] = []
    for entry in lexicon:
        alias_tokens = [t for alias in entry.aliases for t in alias.split(" ")]
        if any(within_tolerance(token, a) for a in alias_tokens for token in tokens):
            guesses.append(ParseGuess(name=entry.name, confidence=SWEEP_CONFIDENCE, raw=raw.strip()))
    return guesses


def rank_guesses(guesses: Iterable[ParseGuess], limit: int = MAX_GUESSES) -> list[ParseGuess]:
    """Merge guesses by name (max confidence, first-seen position), rank and truncate."""

    merged: dict[str, ParseGuess] = {}
    for guess in guesses:
        existing = merged.get(guess.name)
        if existing is None:
            merged[guess.name] = guess
        elif guess.confidence > existing.confidence:
            merged[guess.name] = existing.model_copy(update={"confidence": guess.confidence})

    ranked = sorted(merged.values(), key=lambda g: -g.confidence)
    return ranked[:limit]
