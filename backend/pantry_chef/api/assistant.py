"""Generative recipe features backed by the configured LLM."""

from fastapi import APIRouter, Depends, HTTPException

from pantry_chef.logging import get_logger
from pantry_chef.schemas.assistant import ChefTipsResponse, GenerateRecipeRequest, ImportRecipeRequest
from pantry_chef.schemas.recipe import Recipe, RecipeDraft
from pantry_chef.services.llm.recipe_assistant import (
    RecipeAssistantError,
    chef_tips,
    generate_recipe,
    import_recipe,
)
from pantry_chef.services.llm.text_generator import DspyTextGenerator, TextGenerator
from pantry_chef.services.scoring import score
from pantry_chef.storage.db import get_session
from pantry_chef.storage.repositories import create_recipe, get_recipe, list_pantry

router = APIRouter(prefix="/assistant")
logger = get_logger(__name__)


def get_text_generator() -> TextGenerator:
    """The LM itself is configured once at startup; see main.on_startup."""
    return DspyTextGenerator()


@router.post("/generate", response_model=Recipe, status_code=201)
def post_generate(
    body: GenerateRecipeRequest, generator: TextGenerator = Depends(get_text_generator)
) -> Recipe:
    """Create a recipe from a free-text request, using the pantry as context."""
    if not body.prompt.strip():
        raise HTTPException(status_code=400, detail="prompt is required")
    with get_session() as session:
        pantry = list_pantry(session)
        try:
            draft = generate_recipe(body.prompt, pantry, generator)
        except RecipeAssistantError as e:
            raise HTTPException(status_code=502, detail=str(e))
        return create_recipe(session, Recipe(**draft.model_dump()))


@router.post("/import", response_model=RecipeDraft)
def post_import(
    body: ImportRecipeRequest, generator: TextGenerator = Depends(get_text_generator)
) -> RecipeDraft:
    """Turn pasted recipe text into a draft for the recipe form; nothing is saved."""
    if not body.text.strip():
        raise HTTPException(status_code=400, detail="text is required")
    try:
        return import_recipe(body.text, generator)
    except RecipeAssistantError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/tips/{recipe_id}", response_model=ChefTipsResponse)
def post_tips(recipe_id: int, generator: TextGenerator = Depends(get_text_generator)) -> ChefTipsResponse:
    with get_session() as session:
        recipe = get_recipe(session, recipe_id)
        if recipe is None:
            raise HTTPException(status_code=404, detail="Recipe not found")
        pantry = list_pantry(session)
    missing = score(recipe, pantry).missing_ingredients
    tip = chef_tips(recipe.name, missing, pantry, generator)
    return ChefTipsResponse(recipe_id=recipe_id, missing_ingredients=missing, tip=tip)
