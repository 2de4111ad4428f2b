"""Recipe matching: rank a recipe catalog by how well a pantry covers each recipe.

Scoring for a single recipe, with names compared case-insensitively as sets:

    required_score = |pantry & required| / |required|
    optional_score = |pantry & optional| / |optional| * 0.2   (0 when no optionals)
    total_score    = required_score * 0.8 + optional_score

A recipe qualifies only when required_score >= 0.5. Recipes without required
ingredients never qualify. Qualifying recipes are ordered by total_score,
highest first; equal scores keep catalog order.

Recipes are never mutated: each result is a RecipeMatch wrapping the recipe
with its score for this call only.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence, FrozenSet

from mealprep.domain.Recipe import Recipe
from mealprep.utilities.constants import (
    REQUIRED_WEIGHT, OPTIONAL_WEIGHT, MIN_REQUIRED_COVERAGE, DEFAULT_MATCH_LIMIT
)

__all__ = [
    "ScoredRecipe", "RecipeMatch", "normalize_names", "score_recipe",
    "find_matching_recipes", "recommend_recipes",
]


@dataclass(frozen=True)
class ScoredRecipe:
    recipe: Recipe
    required_score: float
    optional_score: float

    @property
    def total_score(self) -> float:
        return self.required_score * REQUIRED_WEIGHT + self.optional_score

    @property
    def qualifies(self) -> bool:
        return self.required_score >= MIN_REQUIRED_COVERAGE


@dataclass(frozen=True)
class RecipeMatch:
    recipe: Recipe
    score: float

    @property
    def match_percentage(self) -> float:
        return self.score * 100

    def to_dict(self):
        return {"recipe": self.recipe.to_dict(), "match_percentage": self.match_percentage}


def normalize_names(names: Iterable[str]) -> FrozenSet[str]:
    """Lowercase names into a set; duplicates differing only by case collapse."""
    return frozenset(name.lower() for name in names)


def score_recipe(pantry_names: Iterable[str], recipe: Recipe) -> Optional[ScoredRecipe]:
    """Score one recipe against a pantry. Returns None when the recipe has no required ingredients."""
    return _score(normalize_names(pantry_names), recipe)


def _score(pantry: FrozenSet[str], recipe: Recipe) -> Optional[ScoredRecipe]:
    required = normalize_names(i.name for i in recipe.required_ingredients)
    optional = normalize_names(i.name for i in recipe.optional_ingredients)
    if not required:
        return None

    required_score = len(pantry & required) / len(required)
    optional_score = len(pantry & optional) / len(optional) * OPTIONAL_WEIGHT if optional else 0.0
    return ScoredRecipe(recipe, required_score, optional_score)


def find_matching_recipes(pantry_ingredient_names: Iterable[str], catalog: Sequence[Recipe],
                          limit: int = DEFAULT_MATCH_LIMIT) -> List[RecipeMatch]:
    """Return up to `limit` recipes the pantry can most nearly support, best first.

    `limit <= 0` yields an empty list, as do an empty pantry or an empty catalog.
    """
    if limit <= 0:
        return []
    pantry = normalize_names(pantry_ingredient_names)

    candidates: List[ScoredRecipe] = []
    for recipe in catalog:
        scored = _score(pantry, recipe)
        if scored is not None and scored.qualifies:
            candidates.append(scored)

    # sorted() is stable, so ties stay in catalog order
    candidates = sorted(candidates, key=lambda c: c.total_score, reverse=True)
    return [RecipeMatch(c.recipe, c.total_score) for c in candidates[:limit]]


def recommend_recipes(pantry_repository, recipe_repository, limit: int = DEFAULT_MATCH_LIMIT) -> List[RecipeMatch]:
    """Match the current pantry snapshot against the current catalog snapshot."""
    return find_matching_recipes(
        pantry_repository.ingredient_names(),
        recipe_repository.get_all_recipes(),
        limit=limit,
    )
