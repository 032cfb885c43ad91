"""Quantity and unit resolution from order tokens.

Number words cover English, Hindi and Telugu (romanized). Word values are additive, so spoken
compounds like "one half" resolve to 1.5, while a digit literal overwrites whatever came before it.
"""

from __future__ import annotations

import math
import re
from collections.abc import Sequence

from src.order_parser.schema import QuantityResolution, Unit

DEFAULT_QUANTITY = 1.0
MIN_QUANTITY = 0.01

UNIT_SYNONYMS: dict[Unit, tuple[str, ...]] = {
    Unit.kg: ("kg", "kgs", "kilo", "kilos", "kilogram", "kilograms", "kgee", "keer"),
    Unit.g: ("g", "gram", "grams", "gm", "gms", "gramm"),
    Unit.dozen: ("dozen", "dazzen", "dazane"),
    Unit.piece: ("piece", "pieces", "pc", "pcs", "packet", "pack"),
}

UNIT_TERM_TO_UNIT: dict[str, Unit] = {
    term: unit for unit, terms in UNIT_SYNONYMS.items() for term in terms
}

NUMBER_WORDS: dict[str, float] = {
    # English
    "zero": 0,
    "one": 1,
    "two": 2,
    "three": 3,
    "four": 4,
    "five": 5,
    "six": 6,
    "seven": 7,
    "eight": 8,
    "nine": 9,
    "ten": 10,
    "half": 0.5,
    "quarter": 0.25,
    "threequarter": 0.75,
    "threequarters": 0.75,
    "oneandhalf": 1.5,
    "onehalf": 1.5,
    "onepointfive": 1.5,
    "dozen": 12,
    # Hindi
    "ek": 1,
    "do": 2,
    "teen": 3,
    "char": 4,
    "chaar": 4,
    "paanch": 5,
    "panch": 5,
    "sawa": 1.25,
    "sava": 1.25,
    "dedh": 1.5,
    "adhai": 2.5,
    "aadha": 0.5,
    "adha": 0.5,
    "paav": 0.25,
    "pau": 0.25,
    "sawaikilo": 1.25,
    "savaikilo": 1.25,
    # Telugu
    "oka": 1,
    "okati": 1,
    "rendu": 2,
    "moodu": 3,
    "nalugu": 4,
    "aidu": 5,
    "ara": 0.5,
    "aru": 0.5,
    "pav": 0.25,
    "pavu": 0.25,
}

_DECIMAL_LITERAL_RE = re.compile(r"^[0-9]+(?:\.[0-9]+)?$")
_DECIMAL_SEPARATOR_RE = re.compile(r"[.,]")


def is_unit_token(token: str) -> bool:
    return token in UNIT_TERM_TO_UNIT


def resolve_quantity(tokens: Sequence[str]) -> QuantityResolution:
    """Extract a quantity from tokens.

    Unit tokens are skipped (so "dozen" is a unit here, not 12). Returns an unresolved result
    (`value=None`, nothing consumed) unless the accumulated value is positive.
    """

    value: float | None = None
    consumed: list[int] = []

    for idx, token in enumerate(tokens):
        if is_unit_token(token):
            continue

        if _DECIMAL_LITERAL_RE.match(token):
            value = float(token)
            consumed.append(idx)
            continue

        word_value = NUMBER_WORDS.get(token)
        if word_value is None:
            word_value = NUMBER_WORDS.get(_DECIMAL_SEPARATOR_RE.sub("", token))
        if word_value is not None:
            value = (value or 0) + word_value
            consumed.append(idx)

    if value is not None and value > 0:
        return QuantityResolution(value=value, consumed=tuple(consumed))
    return QuantityResolution()


def infer_unit(tokens: Sequence[str]) -> Unit:
    """Return the unit of the first unit-synonym token, or `Unit.piece`."""

    for token in tokens:
        unit = UNIT_TERM_TO_UNIT.get(token)
        if unit is not None:
            return unit
    return Unit.piece


def clamp_quantity(value: float | None) -> float:
    """Clamp a resolved quantity to `>= 0.01` with 2 decimals; unresolved becomes 1."""

    if value is None or not math.isfinite(value):
        return DEFAULT_QUANTITY
    return round(max(MIN_QUANTITY, value), 2)
