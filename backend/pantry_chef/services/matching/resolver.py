from typing import Sequence

from pantry_chef.schemas.matching import MatchKind, MatchResult
from pantry_chef.services.matching.exclusions import is_excluded_pair
from pantry_chef.services.matching.normalizer import singularize
from pantry_chef.services.matching.substitutions import substitutes_for


def _overlaps(a: str, b: str) -> bool:
    return a == b or a in b or b in a


def _find_direct(target: str, pantry_items: Sequence[str]) -> str | None:
    """First pantry item equal to or containing/contained in target, in pantry order."""
    for item in pantry_items:
        source = singularize(item)
        if source == target:
            return item
        # exclusions only veto containment, never equality
        if is_excluded_pair(source, target):
            continue
        if target in source or source in target:
            return item
    return None


def _find_substitute(target: str, pantry_items: Sequence[str]) -> str | None:
    options = [singularize(opt) for opt in substitutes_for(target)]
    if not options:
        return None
    for item in pantry_items:
        source = singularize(item)
        if any(_overlaps(source, opt) for opt in options):
            return item
    return None


def resolve(recipe_ingredient: str, pantry_items: Sequence[str]) -> MatchResult:
    """
    Decide whether the pantry satisfies one recipe ingredient.
    Direct matches (equality or containment) win over substitutions; pantry
    order breaks ties, so duplicates resolve to their first occurrence.
    """
    target = singularize(recipe_ingredient)

    direct = _find_direct(target, pantry_items)
    if direct is not None:
        return MatchResult(ingredient=recipe_ingredient, matched_with=direct, kind=MatchKind.direct)

    substitute = _find_substitute(target, pantry_items)
    if substitute is not None:
        return MatchResult(
            ingredient=recipe_ingredient, matched_with=substitute, kind=MatchKind.substitution
        )

    return MatchResult(ingredient=recipe_ingredient)
