from fastapi import APIRouter

from pantry_chef.schemas.matching import ScoredRecipe
from pantry_chef.schemas.plan import ShoppingListResponse
from pantry_chef.services.scoring import score_all
from pantry_chef.services.shopping import shopping_list
from pantry_chef.storage.db import get_session
from pantry_chef.storage.repositories import get_meal_plan, list_pantry, list_recipes
from pantry_chef.utils.timing import time_span

router = APIRouter()


@router.get("/matches", response_model=list[ScoredRecipe])
def get_matches() -> list[ScoredRecipe]:
    """All recipes scored against the current pantry, cookable first."""
    with get_session() as session:
        pantry = list_pantry(session)
        recipes = list_recipes(session)
    with time_span("matches.rank", recipes=len(recipes), pantry=len(pantry)):
        return score_all(recipes, pantry)


@router.get("/shopping-list", response_model=ShoppingListResponse)
def get_shopping_list() -> ShoppingListResponse:
    with get_session() as session:
        pantry = list_pantry(session)
        plan = get_meal_plan(session)
    with time_span("shopping_list.build", planned=sum(len(r) for r in plan.values())):
        return ShoppingListResponse(items=shopping_list(plan, pantry))
