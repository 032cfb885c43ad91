"""Free-text order parsing orchestration.

Strategy per utterance:
    1) Split into segments (one intended order line each).
    2) Per segment: resolve quantity, infer unit, match a product; emit an item or, if no confident
       match exists, ranked guesses for that segment.
    3) Detect the language over the whole utterance.
    4) If nothing at all was found, sweep the whole utterance for any fuzzy overlap.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from src.order_parser.language import guess_language
from src.order_parser.matcher import build_guesses, match_product, rank_guesses, sweep_guesses
from src.order_parser.normalize import tokenize
from src.order_parser.quantity import clamp_quantity, infer_unit, is_unit_token, resolve_quantity
from src.order_parser.schema import LanguageHint, ParsedItem, ParseGuess, ParseResult
from src.order_parser.segment import split_utterance

logger = logging.getLogger(__name__)


def parse_segment(segment: str) -> ParsedItem | None:
    """Parse one segment into an item, or `None` when no product matches confidently."""

    tokens = tokenize(segment)
    if not tokens:
        return None

    quantity = resolve_quantity(tokens)
    residual = [t for idx, t in enumerate(tokens) if idx not in quantity.consumed]
    unit = infer_unit(residual)
    product_tokens = [t for t in residual if not is_unit_token(t)]

    match = match_product(product_tokens)
    if match is None:
        return None

    return ParsedItem(
        name=match.name,
        quantity=clamp_quantity(quantity.value),
        unit=unit,
        raw=segment.strip(),
    )


def parse_utterance(text: str) -> ParseResult:
    """Parse a free-text order utterance.

    Never raises for user input: unrecognized text yields empty items and low or no guesses.
    """

    if not text or not text.strip():
        return ParseResult(language_hint=LanguageHint.en)

    segments = split_utterance(text)
    items: list[ParsedItem] = []
    guesses: list[ParseGuess] = []
    for segment in segments:
        item = parse_segment(segment)
        if item is not None:
            items.append(item)
        else:
            guesses.extend(build_guesses(segment))

    tokens = tokenize(text)
    language_hint = guess_language(tokens)

    if not items and not guesses:
        logger.debug("no match in any segment, sweeping tokens=%d", len(tokens))
        guesses = sweep_guesses(tokens, text)

    result = ParseResult(
        items=tuple(items),
        guesses=tuple(rank_guesses(guesses)),
        language_hint=language_hint,
    )
    logger.debug(
        "parsed segments=%d items=%d guesses=%d language=%s",
        len(segments),
        len(result.items),
        len(result.guesses),
        result.language_hint,
    )
    return result


def parse_multiple(texts: Iterable[str]) -> ParseResult:
    """Parse utterances independently and combine the results.

    The language hint is re-derived from the raw text of all accepted items (`en` if there are
    none), and guesses are re-ranked across the batch.
    """

    items: list[ParsedItem] = []
    guesses: list[ParseGuess] = []
    for text in texts:
        result = parse_utterance(text)
        items.extend(result.items)
        guesses.extend(result.guesses)

    language_hint = LanguageHint.en
    if items:
        language_hint = guess_language(tokenize(" ".join(item.raw for item in items)))

    return ParseResult(
        items=tuple(items),
        guesses=tuple(rank_guesses(guesses)),
        language_hint=language_hint,
    )
