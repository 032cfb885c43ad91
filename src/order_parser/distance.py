"""Bounded Levenshtein distance used for fuzzy alias matching."""

from __future__ import annotations

MAX_FUZZY_DISTANCE = 2


def levenshtein(a: str, b: str) -> int:
    """Return the unit-cost edit distance (insert/delete/substitute) between two strings."""

    if a == b:
        return 0
    if not a:
        return len(b)
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            current.append(
                min(
                    previous[j] + 1,
                    current[j - 1] + 1,
                    previous[j - 1] + (ca != cb),
                )
            )
        previous = current
    return previous[-1]


def within_tolerance(a: str, b: str) -> bool:
    """Whether two tokens are a fuzzy match (distance at most `MAX_FUZZY_DISTANCE`)."""

    return levenshtein(a, b) <= MAX_FUZZY_DISTANCE
