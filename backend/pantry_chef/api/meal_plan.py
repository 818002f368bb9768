from fastapi import APIRouter, HTTPException

from pantry_chef.schemas.plan import DAYS_OF_WEEK, MealPlanAdd, MealPlanResponse
from pantry_chef.storage.db import get_session
from pantry_chef.storage.repositories import (
    add_to_meal_plan,
    get_meal_plan,
    get_recipe,
    remove_from_meal_plan,
)

router = APIRouter()


def _check_day(day: str) -> None:
    if day not in DAYS_OF_WEEK:
        raise HTTPException(status_code=404, detail=f"Unknown day '{day}'")


@router.get("/meal-plan", response_model=MealPlanResponse)
def get_plan() -> MealPlanResponse:
    with get_session() as session:
        return MealPlanResponse(days=get_meal_plan(session))


@router.post("/meal-plan/{day}", response_model=MealPlanResponse)
def post_plan_slot(day: str, body: MealPlanAdd) -> MealPlanResponse:
    _check_day(day)
    with get_session() as session:
        if get_recipe(session, body.recipe_id) is None:
            raise HTTPException(status_code=404, detail="Recipe not found")
        add_to_meal_plan(session, day, body.recipe_id)
        return MealPlanResponse(days=get_meal_plan(session))


@router.delete("/meal-plan/{day}/{recipe_id}", response_model=MealPlanResponse)
def delete_plan_slot(day: str, recipe_id: int) -> MealPlanResponse:
    _check_day(day)
    with get_session() as session:
        remove_from_meal_plan(session, day, recipe_id)
        return MealPlanResponse(days=get_meal_plan(session))
