from typing import Iterable, Optional

from sqlmodel import Session, select

from pantry_chef.logging import get_logger
from pantry_chef.schemas.plan import DAYS_OF_WEEK
from pantry_chef.schemas.recipe import Recipe
from pantry_chef.services.matching.normalizer import normalize
from pantry_chef.storage.models import LLMCallLog, MealPlanEntry, PantryEntry, StoredRecipe

logger = get_logger(__name__)


# --- Pantry ---


def list_pantry(session: Session) -> list[str]:
    entries = session.exec(select(PantryEntry).order_by(PantryEntry.id))
    return [entry.name for entry in entries]


def add_pantry_item(session: Session, name: str) -> tuple[list[str], bool]:
    """
    Append an item unless an equal one (ignoring case and surrounding space) exists.
    Returns the pantry after the call and whether the item was added.
    """
    items = list_pantry(session)
    key = normalize(name)
    if any(normalize(item) == key for item in items):
        logger.info("pantry.duplicate name=%s", name)
        return items, False
    session.add(PantryEntry(name=name))
    session.commit()
    logger.info("pantry.added name=%s count=%s", name, len(items) + 1)
    return items + [name], True


def remove_pantry_item(session: Session, name: str) -> bool:
    entries = list(session.exec(select(PantryEntry).where(PantryEntry.name == name)))
    for entry in entries:
        session.delete(entry)
    session.commit()
    logger.info("pantry.removed name=%s rows=%s", name, len(entries))
    return bool(entries)


def clear_pantry(session: Session) -> int:
    entries = list(session.exec(select(PantryEntry)))
    for entry in entries:
        session.delete(entry)
    session.commit()
    logger.info("pantry.cleared rows=%s", len(entries))
    return len(entries)


# --- Recipes ---


def list_recipes(session: Session) -> list[Recipe]:
    rows = session.exec(select(StoredRecipe).order_by(StoredRecipe.id))
    return [row.to_recipe() for row in rows]


def get_recipe(session: Session, recipe_id: int) -> Recipe | None:
    row = session.get(StoredRecipe, recipe_id)
    return row.to_recipe() if row else None


def create_recipe(session: Session, recipe: Recipe) -> Recipe:
    row = StoredRecipe(
        name=recipe.name,
        ingredients=list(recipe.ingredients),
        instructions=recipe.instructions,
        type=recipe.type,
        notes=recipe.notes,
    )
    session.add(row)
    session.commit()
    session.refresh(row)
    logger.info("recipe.created id=%s name=%s ingredients=%s", row.id, row.name, len(row.ingredients))
    return row.to_recipe()


def update_recipe(
    session: Session,
    recipe_id: int,
    name: str,
    ingredients: list[str],
    instructions: str,
    type: str,
) -> Recipe | None:
    """Replace the editable fields; notes are kept."""
    row = session.get(StoredRecipe, recipe_id)
    if row is None:
        return None
    row.name = name
    row.ingredients = list(ingredients)
    row.instructions = instructions
    row.type = type
    session.add(row)
    session.commit()
    session.refresh(row)
    logger.info("recipe.updated id=%s name=%s", row.id, row.name)
    return row.to_recipe()


def update_recipe_notes(session: Session, recipe_id: int, notes: str) -> Recipe | None:
    row = session.get(StoredRecipe, recipe_id)
    if row is None:
        return None
    row.notes = notes
    session.add(row)
    session.commit()
    session.refresh(row)
    return row.to_recipe()


def delete_recipe(session: Session, recipe_id: int) -> bool:
    """Delete a recipe and every meal-plan slot that references it."""
    row = session.get(StoredRecipe, recipe_id)
    if row is None:
        return False
    slots = list(session.exec(select(MealPlanEntry).where(MealPlanEntry.recipe_id == recipe_id)))
    for slot in slots:
        session.delete(slot)
    session.delete(row)
    session.commit()
    logger.info("recipe.deleted id=%s plan_slots_removed=%s", recipe_id, len(slots))
    return True


# --- Meal plan ---


def get_meal_plan(session: Session) -> dict[str, list[Recipe]]:
    plan: dict[str, list[Recipe]] = {day: [] for day in DAYS_OF_WEEK}
    recipes = {r.id: r for r in list_recipes(session)}
    for entry in session.exec(select(MealPlanEntry).order_by(MealPlanEntry.id)):
        recipe = recipes.get(entry.recipe_id)
        if recipe is not None and entry.day in plan:
            plan[entry.day].append(recipe)
    return plan


def add_to_meal_plan(session: Session, day: str, recipe_id: int) -> None:
    session.add(MealPlanEntry(day=day, recipe_id=recipe_id))
    session.commit()
    logger.info("meal_plan.added day=%s recipe_id=%s", day, recipe_id)


def remove_from_meal_plan(session: Session, day: str, recipe_id: int) -> int:
    """Remove every slot of this recipe on this day; returns slots removed."""
    slots = list(
        session.exec(
            select(MealPlanEntry).where(
                MealPlanEntry.day == day, MealPlanEntry.recipe_id == recipe_id
            )
        )
    )
    for slot in slots:
        session.delete(slot)
    session.commit()
    logger.info("meal_plan.removed day=%s recipe_id=%s rows=%s", day, recipe_id, len(slots))
    return len(slots)


# --- Seed data / LLM log ---


def seed_demo_data(session: Session, pantry: Iterable[str], recipes: Iterable[Recipe]) -> None:
    """Populate empty tables with starter data; existing data is left alone."""
    if session.exec(select(PantryEntry)).first() is None:
        for name in pantry:
            session.add(PantryEntry(name=name))
        session.commit()
    if session.exec(select(StoredRecipe)).first() is None:
        for recipe in recipes:
            create_recipe(session, recipe)
    logger.info("seed.done pantry=%s recipes=%s", len(list_pantry(session)), len(list_recipes(session)))


def log_llm_call(
    session: Session,
    prompt_name: str,
    prompt_version: str,
    model: str,
    input_payload: str,
    output_payload: str,
    latency_ms: int,
) -> LLMCallLog:
    entry = LLMCallLog(
        prompt_name=prompt_name,
        prompt_version=prompt_version,
        model=model,
        input_payload=input_payload,
        output_payload=output_payload,
        latency_ms=latency_ms,
    )
    session.add(entry)
    session.commit()
    session.refresh(entry)
    return entry


def get_llm_calls(session: Session, prompt_name: Optional[str] = None) -> list[LLMCallLog]:
    stmt = select(LLMCallLog).order_by(LLMCallLog.id)
    if prompt_name:
        stmt = stmt.where(LLMCallLog.prompt_name == prompt_name)
    return list(session.exec(stmt))
