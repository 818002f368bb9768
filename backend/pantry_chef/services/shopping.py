from typing import Iterable, Mapping, Sequence

from pantry_chef.schemas.matching import MatchKind
from pantry_chef.schemas.recipe import Recipe
from pantry_chef.services.matching.resolver import resolve


def shopping_list(
    meal_plan: Mapping[str, Iterable[Recipe]], pantry_items: Sequence[str]
) -> list[str]:
    """
    Distinct ingredients the pantry cannot cover across every planned recipe.
    Deduplicated by original spelling ("Buns" and "buns" are two entries), sorted.
    """
    needed: set[str] = set()
    for recipes in meal_plan.values():
        for recipe in recipes:
            for ingredient in recipe.ingredients:
                if resolve(ingredient, pantry_items).kind is MatchKind.none:
                    needed.add(ingredient)
    return sorted(needed)
