"""Tests for language hint detection."""

from __future__ import annotations

import pytest

from src.order_parser.language import guess_language
from src.order_parser.schema import LanguageHint


@pytest.mark.parametrize(
    ("tokens", "hint"),
    [
        (["oka", "kg", "tomatolu"], LanguageHint.te),
        (["do", "dozen", "eggs"], LanguageHint.hi),
        (["half", "kilo", "tomato"], LanguageHint.en),
        (["oka", "rendu", "moodu", "one"], LanguageHint.te),
        (["టమాటా"], LanguageHint.te),
        (["दो", "किलो"], LanguageHint.hi),
    ],
)
def test_single_language(tokens: list[str], hint: LanguageHint) -> None:
    assert guess_language(tokens) == hint


@pytest.mark.parametrize(
    "tokens",
    [
        ["one", "ek"],
        ["oka", "rendu", "one"],
        ["टमाटर", "టమాటా"],
    ],
)
def test_close_scores_are_mixed(tokens: list[str]) -> None:
    assert guess_language(tokens) == LanguageHint.mixed


def test_no_signal_is_mixed_but_no_tokens_is_en() -> None:
    assert guess_language(["2", "kg", "bendakayalu"]) == LanguageHint.mixed
    assert guess_language([]) == LanguageHint.en
