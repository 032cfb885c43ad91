"""Order parse result schema (Pydantic models).

These models are the contract between the free-text order parser and its callers (cart building,
catalog search). Units and language hints are closed enumerations so that an invalid value cannot
be represented.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, model_validator

MAX_GUESSES = 5


class Unit(StrEnum):
    """Supported order units."""

    kg = "kg"
    g = "g"
    dozen = "dozen"
    piece = "piece"


class LanguageHint(StrEnum):
    """Best-effort classification of the utterance language."""

    te = "te"
    hi = "hi"
    en = "en"
    mixed = "mixed"


@dataclass(frozen=True)
class QuantityResolution:
    """Outcome of scanning a token sequence for a quantity.

    `value` is `None` when no positive quantity was found (unresolved, which is not the same as 0).
    `consumed` holds the indices of the tokens that contributed to the value.
    """

    value: float | None = None
    consumed: tuple[int, ...] = field(default_factory=tuple)

    @property
    def resolved(self) -> bool:
        return self.value is not None


class LexiconEntry(BaseModel):
    """A canonical product name and its normalized alias token-sequences."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(min_length=1)
    aliases: tuple[str, ...]


class ParsedItem(BaseModel):
    """One confidently recognized order line."""

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    name: str
    quantity: float = Field(ge=0.01)
    unit: Unit = Unit.piece
    raw: str


class ParseGuess(BaseModel):
    """A low-confidence product candidate for a segment that could not be matched."""

    model_config = ConfigDict(extra="forbid", frozen=True, str_strip_whitespace=True)

    name: str
    confidence: float = Field(ge=0, le=1)
    raw: str


class ParseResult(BaseModel):
    """Parsed items, ranked guesses and a language hint for one utterance (or a batch)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    items: tuple[ParsedItem, ...] = ()
    guesses: tuple[ParseGuess, ...] = ()
    language_hint: LanguageHint = Field(
        default=LanguageHint.en,
        serialization_alias="languageHint",
    )

    @model_validator(mode="after")
    def validate_guesses(self) -> ParseResult:
        """Enforce the guess list invariants: bounded, unique by name, ranked."""

        if len(self.guesses) > MAX_GUESSES:
            raise ValueError(f"at most {MAX_GUESSES} guesses are allowed")

        names = [g.name for g in self.guesses]
        if len(set(names)) != len(names):
            raise ValueError("guess names must be unique")

        for prev, cur in zip(self.guesses, self.guesses[1:]):
            if cur.confidence > prev.confidence:
                raise ValueError("guesses must be sorted by descending confidence")
        return self
