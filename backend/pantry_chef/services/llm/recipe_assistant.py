"""
LLM recipe features: generate a recipe from a request, import messy recipe text,
and suggest workarounds for missing ingredients.
Generation and import raise RecipeAssistantError so callers can report the
failure without touching stored data; tips fall back to a fixed message.
"""

from typing import Any, Sequence

from pantry_chef.config import settings
from pantry_chef.logging import get_logger
from pantry_chef.schemas.recipe import RECIPE_TYPES, RecipeDraft
from pantry_chef.services.llm.prompts import (
    CHEF_TIPS_INSTRUCTION,
    CHEF_TIPS_PROMPT_VERSION,
    CHEF_TIPS_TEMPLATE,
    RECIPE_GENERATE_INSTRUCTION,
    RECIPE_GENERATE_PROMPT_VERSION,
    RECIPE_GENERATE_TEMPLATE,
    RECIPE_IMPORT_INSTRUCTION,
    RECIPE_IMPORT_PROMPT_VERSION,
)
from pantry_chef.services.llm.text_generator import TextGenerator
from pantry_chef.services.parsing.recipe_parser import clean_ingredients, parse_json_object

logger = get_logger(__name__)

GENERATE_FAILED_MESSAGE = "Failed to generate recipe. Please try again."
IMPORT_FAILED_MESSAGE = "Could not parse that text. Try pasting just the ingredients and instructions."
TIPS_FAILED_MESSAGE = "Error communicating with the AI Chef. Please try again."


class RecipeAssistantError(Exception):
    """Generation or import failed; message is safe to show to the user."""


def _draft_from_payload(payload: dict[str, Any]) -> RecipeDraft:
    name = payload.get("name")
    if not isinstance(name, str) or not name.strip():
        raise ValueError("recipe name missing")
    raw_ingredients = payload.get("ingredients")
    if not isinstance(raw_ingredients, list):
        raise ValueError("ingredients must be a list")
    ingredients = clean_ingredients([str(i) for i in raw_ingredients])
    if not ingredients:
        raise ValueError("recipe has no ingredients")
    instructions = payload.get("instructions") or ""
    if isinstance(instructions, list):
        instructions = "\n".join(str(step) for step in instructions)
    recipe_type = payload.get("type")
    if recipe_type not in RECIPE_TYPES:
        recipe_type = settings.default_recipe_type
    return RecipeDraft(
        name=name.strip(),
        ingredients=ingredients,
        instructions=str(instructions),
        type=recipe_type,
    )


def generate_recipe(request: str, pantry_items: Sequence[str], generator: TextGenerator) -> RecipeDraft:
    prompt = RECIPE_GENERATE_TEMPLATE.format(request=request.strip(), pantry=", ".join(pantry_items))
    try:
        raw = generator.generate(
            prompt,
            RECIPE_GENERATE_INSTRUCTION,
            prompt_name="recipe_generate",
            prompt_version=RECIPE_GENERATE_PROMPT_VERSION,
        )
        draft = _draft_from_payload(parse_json_object(raw))
    except Exception as e:
        logger.warning("assistant.generate_failed request=%s error=%s", request, e)
        raise RecipeAssistantError(GENERATE_FAILED_MESSAGE) from e
    logger.info("assistant.generated name=%s ingredients=%s", draft.name, len(draft.ingredients))
    return draft


def import_recipe(text: str, generator: TextGenerator) -> RecipeDraft:
    try:
        raw = generator.generate(
            text,
            RECIPE_IMPORT_INSTRUCTION,
            prompt_name="recipe_import",
            prompt_version=RECIPE_IMPORT_PROMPT_VERSION,
        )
        draft = _draft_from_payload(parse_json_object(raw))
    except Exception as e:
        logger.warning("assistant.import_failed chars=%s error=%s", len(text), e)
        raise RecipeAssistantError(IMPORT_FAILED_MESSAGE) from e
    logger.info("assistant.imported name=%s ingredients=%s", draft.name, len(draft.ingredients))
    return draft


def chef_tips(
    recipe_name: str,
    missing_ingredients: Sequence[str],
    pantry_items: Sequence[str],
    generator: TextGenerator,
) -> str:
    prompt = CHEF_TIPS_TEMPLATE.format(
        dish=recipe_name,
        missing=", ".join(missing_ingredients),
        pantry=", ".join(pantry_items),
    )
    try:
        tip = generator.generate(
            prompt,
            CHEF_TIPS_INSTRUCTION,
            prompt_name="chef_tips",
            prompt_version=CHEF_TIPS_PROMPT_VERSION,
        )
    except Exception as e:
        logger.warning("assistant.tips_failed dish=%s error=%s", recipe_name, e)
        return TIPS_FAILED_MESSAGE
    return tip.strip() or "Sorry, I couldn't generate a response."
