"""
Per-recipe match scoring and cross-recipe ranking.
Pure functions of (recipes, pantry); nothing is cached between calls.
"""

from typing import Iterable, Sequence

from pantry_chef.schemas.matching import MatchKind, ScoredRecipe
from pantry_chef.schemas.recipe import Recipe
from pantry_chef.services.matching.resolver import resolve


def _match_percentage(total: int, missing: int) -> int:
    # an empty ingredient list has nothing missing: treat as fully stocked
    if total == 0:
        return 100
    # exact half-up in integers, e.g. 1 of 8 -> 12.5 -> 13, 23 of 40 -> 57.5 -> 58
    have = total - missing
    return (200 * have + total) // (2 * total)


def score(recipe: Recipe, pantry_items: Sequence[str]) -> ScoredRecipe:
    details = [resolve(ingredient, pantry_items) for ingredient in recipe.ingredients]
    missing = [d.ingredient for d in details if d.kind is MatchKind.none]
    return ScoredRecipe(
        recipe=recipe,
        ingredient_details=details,
        match_percentage=_match_percentage(len(details), len(missing)),
        fully_cookable=not missing,
        missing_ingredients=missing,
    )


def rank(scored: Iterable[ScoredRecipe]) -> list[ScoredRecipe]:
    """Cookable recipes first, then by match percentage; stable for ties."""
    return sorted(scored, key=lambda s: (not s.fully_cookable, -s.match_percentage))


def score_all(recipes: Iterable[Recipe], pantry_items: Sequence[str]) -> list[ScoredRecipe]:
    return rank(score(recipe, pantry_items) for recipe in recipes)
