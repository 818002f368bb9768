from fastapi import APIRouter, HTTPException

from pantry_chef.logging import get_logger
from pantry_chef.schemas.matching import ScoredRecipe
from pantry_chef.schemas.recipe import RECIPE_TYPES, Recipe, RecipeCreate, RecipeNotesUpdate
from pantry_chef.services.parsing.recipe_parser import clean_ingredients, parse_ingredient_list
from pantry_chef.services.scoring import score
from pantry_chef.storage.db import get_session
from pantry_chef.storage.repositories import (
    create_recipe,
    delete_recipe,
    get_recipe,
    list_pantry,
    list_recipes,
    update_recipe,
    update_recipe_notes,
)

router = APIRouter()
logger = get_logger(__name__)


def _ingredients_from_form(body: RecipeCreate) -> list[str]:
    if isinstance(body.ingredients, str):
        ingredients = parse_ingredient_list(body.ingredients)
    else:
        ingredients = clean_ingredients(body.ingredients)
    if not ingredients:
        raise HTTPException(status_code=400, detail="Recipe needs at least one ingredient")
    if body.type not in RECIPE_TYPES:
        raise HTTPException(status_code=400, detail=f"type must be one of {', '.join(RECIPE_TYPES)}")
    return ingredients


@router.get("/recipes", response_model=list[Recipe])
def get_recipes() -> list[Recipe]:
    with get_session() as session:
        return list_recipes(session)


@router.get("/recipes/{recipe_id}", response_model=Recipe)
def get_recipe_by_id(recipe_id: int) -> Recipe:
    with get_session() as session:
        recipe = get_recipe(session, recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@router.post("/recipes", response_model=Recipe, status_code=201)
def post_recipe(body: RecipeCreate) -> Recipe:
    ingredients = _ingredients_from_form(body)
    with get_session() as session:
        return create_recipe(
            session,
            Recipe(
                name=body.name.strip(),
                ingredients=ingredients,
                instructions=body.instructions,
                type=body.type,
            ),
        )


@router.put("/recipes/{recipe_id}", response_model=Recipe)
def put_recipe(recipe_id: int, body: RecipeCreate) -> Recipe:
    ingredients = _ingredients_from_form(body)
    with get_session() as session:
        recipe = update_recipe(
            session,
            recipe_id,
            name=body.name.strip(),
            ingredients=ingredients,
            instructions=body.instructions,
            type=body.type,
        )
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@router.patch("/recipes/{recipe_id}/notes", response_model=Recipe)
def patch_recipe_notes(recipe_id: int, body: RecipeNotesUpdate) -> Recipe:
    with get_session() as session:
        recipe = update_recipe_notes(session, recipe_id, body.notes)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    return recipe


@router.delete("/recipes/{recipe_id}")
def delete_recipe_by_id(recipe_id: int) -> dict:
    """Delete the recipe and drop it from every day of the meal plan."""
    with get_session() as session:
        if not delete_recipe(session, recipe_id):
            raise HTTPException(status_code=404, detail="Recipe not found")
    return {"ok": True, "id": recipe_id}


@router.get("/recipes/{recipe_id}/match", response_model=ScoredRecipe)
def get_recipe_match(recipe_id: int) -> ScoredRecipe:
    with get_session() as session:
        recipe = get_recipe(session, recipe_id)
        if recipe is None:
            raise HTTPException(status_code=404, detail="Recipe not found")
        pantry = list_pantry(session)
    return score(recipe, pantry)
