from pydantic import BaseModel

from pantry_chef.schemas.recipe import Recipe

DAYS_OF_WEEK = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


class MealPlanAdd(BaseModel):
    recipe_id: int


class MealPlanResponse(BaseModel):
    days: dict[str, list[Recipe]]


class ShoppingListResponse(BaseModel):
    items: list[str]
