"""Canonical product lexicon (English, Hindi and Telugu aliases).

The lexicon is built once at import time and never mutated. Every alias is run through the same
tokenizer used on input, so alias tokens and utterance tokens compare directly.
"""

from __future__ import annotations

from collections.abc import Iterable
from types import MappingProxyType

from src.order_parser.normalize import normalize_token, tokenize
from src.order_parser.schema import LexiconEntry

# Declaration order matters: the matcher keeps the earlier entry on equal scores.
_PRODUCT_ALIASES: tuple[tuple[str, tuple[str, ...]], ...] = (
    (
        "tomato",
        (
            "tomato",
            "tomatos",
            "tomatoes",
            "tomata",
            "tomatar",
            "tamatar",
            "tomatolu",
            "tomato lu",
            "tamato",
        ),
    ),
    ("onion", ("onion", "onions", "uligadda", "ulli", "pyaz", "payyalu", "pyaaz", "erra gadda")),
    ("potato", ("potato", "potatoes", "alu", "aloo", "bangaladumpa")),
    (
        "okra",
        (
            "okra",
            "bhindi",
            "lady finger",
            "ladyfinger",
            "bendakaya",
            "bendakayalu",
            "bhendi",
            "bendakai",
        ),
    ),
    ("brinjal", ("brinjal", "baingan", "vankaya", "eggplant")),
    ("cabbage", ("cabbage", "patta gobi")),
    ("cauliflower", ("cauliflower", "gobi", "phool gobi")),
    ("carrot", ("carrot", "gajar", "gajar ka")),
    ("beans", ("beans", "green beans", "bens", "bean")),
    ("spinach", ("spinach", "palak", "keerai", "keerra")),
    ("rice", ("rice", "biyyam", "chawal", "beras", "annam")),
    ("sugar", ("sugar", "shakkar", "sakkare", "sakkar")),
    ("salt", ("salt", "uppu", "namak")),
    ("milk", ("milk", "paal", "doodh", "paalu")),
    ("eggs", ("egg", "eggs", "anda", "guddu", "mutta", "muttai")),
    ("banana", ("banana", "bananas", "kela", "arati pandu")),
    ("apple", ("apple", "apples", "seb")),
    ("mango", ("mango", "mangos", "mangoes", "aam", "mamidipandu")),
    ("chicken", ("chicken", "murgi", "kozi", "chikkan")),
    ("mutton", ("mutton", "goat", "lamb", "kodi mamsam", "gosht")),
    ("fish", ("fish", "meen", "chepa", "machli")),
    ("curd", ("curd", "dahi", "perugu", "yogurt")),
    ("butter", ("butter", "vennai", "makhan")),
    ("bread", ("bread", "loaf")),
    ("atta", ("atta", "wheat flour", "godhuma pindi", "gehun ka atta")),
    ("maida", ("maida", "all purpose flour")),
    ("oil", ("oil", "sunflower oil", "nune", "tel")),
    ("ghee", ("ghee", "neyyi", "ghi")),
    ("tea powder", ("tea", "tea powder", "chai", "chai patti")),
    ("coffee", ("coffee", "filter coffee", "coffi")),
    ("dal", ("dal", "pappu", "lentils", "pappulu")),
    ("green gram", ("green gram", "pesalu", "moong dal", "pesara")),
    ("black gram", ("black gram", "urad dal", "minappappu")),
    ("chickpea", ("chickpea", "chana", "senagalu", "chole")),
    ("soap", ("soap", "sabun")),
    ("detergent", ("detergent", "powder", "soapu powder")),
)


def _normalize_alias(alias: str) -> str:
    tokens = tokenize(alias)
    if tokens:
        return " ".join(tokens)
    return normalize_token(alias)


def build_lexicon(raw_entries: Iterable[tuple[str, Iterable[str]]]) -> tuple[LexiconEntry, ...]:
    """Normalize and deduplicate aliases per entry.

    Raises:
        ValueError: If two entries share a canonical name.
    """

    entries: list[LexiconEntry] = []
    seen_names: set[str] = set()
    for name, aliases in raw_entries:
        if name in seen_names:
            raise ValueError(f"duplicate canonical name: {name}")
        seen_names.add(name)

        # dict.fromkeys deduplicates while preserving declaration order.
        normalized = dict.fromkeys(a for a in (_normalize_alias(x) for x in aliases) if a)
        entries.append(LexiconEntry(name=name, aliases=tuple(normalized)))
    return tuple(entries)


def _build_lookup(entries: Iterable[LexiconEntry]) -> MappingProxyType[str, str]:
    lookup: dict[str, str] = {}
    for entry in entries:
        for alias in entry.aliases:
            lookup.setdefault(alias, entry.name)
    return MappingProxyType(lookup)


PRODUCT_LEXICON: tuple[LexiconEntry, ...] = build_lexicon(_PRODUCT_ALIASES)

# Reverse index alias -> canonical name. The matcher scores the full lexicon instead of relying on
# exact hits here.
PRODUCT_LOOKUP: MappingProxyType[str, str] = _build_lookup(PRODUCT_LEXICON)


def lookup_alias(text: str) -> str | None:
    """Return the canonical name for an exact (normalized) alias, if any."""

    return PRODUCT_LOOKUP.get(" ".join(tokenize(text)))


def canonical_names() -> list[str]:
    """All canonical product names in declaration order."""

    return [entry.name for entry in PRODUCT_LEXICON]
