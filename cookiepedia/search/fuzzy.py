"""Typo-tolerant lookup over the built-in catalogue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from typing import Any

from rapidfuzz import fuzz
from rapidfuzz import utils

from .catalogue import RECIPES

if TYPE_CHECKING:  # import for type checking only
    from collections.abc import Iterable

    from .catalogue import Recipe

# Field weights sum to 1; a lower weight pushes the same distance further from 0.
KEY_WEIGHTS = (("name", 0.7), ("ingredients", 0.2), ("tags", 0.1))
# Maximum accepted raw distance, 0 is an exact hit and 1 no resemblance at all.
THRESHOLD = 0.4
# Floor for exact hits so their weighted score still depends on the field.
EXACT_DISTANCE = 1e-12
MIN_QUERY_LENGTH = 2


@dataclass(frozen=True)
class Match:
    recipe: Recipe
    score: float
    key: str
    value: str

    def as_dict(self) -> dict[str, Any]:
        return {
            **self.recipe.as_dict(),
            "score": round(self.score, 4),
            "matches": [{"key": self.key, "value": self.value}],
        }


def _values(recipe: Recipe, key: str) -> tuple[str, ...]:
    if key == "name":
        return (recipe.name,)
    return getattr(recipe, key)


def _similarity(query: str, value: str) -> float:
    value = utils.default_process(value)
    if not value:
        return 0.0
    # partial_ratio would let a short value match any window of a long query.
    scorer = fuzz.partial_ratio if len(query) <= len(value) else fuzz.ratio
    return scorer(query, value) / 100


def _weighted(distance: float, weight: float) -> float:
    return max(distance, EXACT_DISTANCE) ** weight


def search(
    query: str,
    *,
    limit: int = 8,
    recipes: Iterable[Recipe] = RECIPES,
) -> list[Match]:
    """Best matches first; queries shorter than two characters match nothing."""

    processed = utils.default_process(query or "")
    if len(processed) < MIN_QUERY_LENGTH:
        return []

    matches = []
    for recipe in recipes:
        best = None
        for key, weight in KEY_WEIGHTS:
            for value in _values(recipe, key):
                distance = 1 - _similarity(processed, value)
                if distance > THRESHOLD:
                    continue
                score = _weighted(distance, weight)
                if best is None or score < best.score:
                    best = Match(recipe, score, key, value)
        if best is not None:
            matches.append(best)

    matches.sort(key=lambda m: (m.score, -m.recipe.rating, m.recipe.id))
    return matches[:limit]
