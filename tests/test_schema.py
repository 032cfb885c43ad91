"""Tests for the parse result Pydantic models and their invariants."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.order_parser.schema import (
    LanguageHint,
    LexiconEntry,
    ParsedItem,
    ParseGuess,
    ParseResult,
    QuantityResolution,
    Unit,
)


def _guess(name: str, confidence: float) -> ParseGuess:
    return ParseGuess(name=name, confidence=confidence, raw="x")


def test_parsed_item_requires_positive_quantity() -> None:
    with pytest.raises(ValidationError):
        ParsedItem(name="tomato", quantity=0, unit=Unit.kg, raw="0 kg tomato")


def test_parsed_item_defaults_to_piece_and_strips_raw() -> None:
    item = ParsedItem(name="tomato", quantity=1, raw="  tomato ")
    assert item.unit == Unit.piece
    assert item.raw == "tomato"


def test_unit_and_language_are_closed() -> None:
    with pytest.raises(ValueError):
        Unit("litre")
    with pytest.raises(ValueError):
        LanguageHint("ta")
    with pytest.raises(ValidationError):
        ParsedItem(name="milk", quantity=1, unit="litre", raw="1 litre milk")  # type: ignore[arg-type]


def test_guess_confidence_bounds() -> None:
    with pytest.raises(ValidationError):
        _guess("okra", 1.5)
    with pytest.raises(ValidationError):
        _guess("okra", -0.1)


def test_result_rejects_more_than_five_guesses() -> None:
    guesses = tuple(_guess(f"g{i}", 0.5) for i in range(6))
    with pytest.raises(ValidationError):
        ParseResult(guesses=guesses)


def test_result_rejects_unsorted_or_duplicate_guesses() -> None:
    with pytest.raises(ValidationError):
        ParseResult(guesses=(_guess("okra", 0.3), _guess("beans", 0.9)))
    with pytest.raises(ValidationError):
        ParseResult(guesses=(_guess("okra", 0.9), _guess("okra", 0.3)))


def test_result_serializes_language_hint_alias() -> None:
    result = ParseResult(
        items=(ParsedItem(name="tomato", quantity=1, unit=Unit.kg, raw="oka kg tomatolu"),),
        language_hint=LanguageHint.te,
    )
    dumped = result.model_dump(mode="json", by_alias=True)
    assert dumped == {
        "items": [{"name": "tomato", "quantity": 1.0, "unit": "kg", "raw": "oka kg tomatolu"}],
        "guesses": [],
        "languageHint": "te",
    }


def test_models_are_immutable() -> None:
    item = ParsedItem(name="tomato", quantity=1, raw="tomato")
    with pytest.raises(ValidationError):
        item.quantity = 2  # type: ignore[misc]

    entry = LexiconEntry(name="okra", aliases=("okra",))
    with pytest.raises(ValidationError):
        entry.name = "bhindi"  # type: ignore[misc]


def test_quantity_resolution_defaults_to_unresolved() -> None:
    resolution = QuantityResolution()
    assert resolution.value is None
    assert resolution.consumed == ()
    assert not resolution.resolved
