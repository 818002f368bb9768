from enum import Enum

from pydantic import BaseModel, computed_field

from pantry_chef.schemas.recipe import Recipe


class MatchKind(str, Enum):
    none = "none"
    direct = "direct"
    substitution = "substitution"


class MatchResult(BaseModel):
    ingredient: str  # original recipe text
    matched_with: str | None = None
    kind: MatchKind = MatchKind.none

    @computed_field
    @property
    def satisfied(self) -> bool:
        return self.kind is not MatchKind.none


class ScoredRecipe(BaseModel):
    recipe: Recipe
    ingredient_details: list[MatchResult]
    match_percentage: int
    fully_cookable: bool
    missing_ingredients: list[str]
