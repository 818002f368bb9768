from pantry_chef.schemas.plan import DAYS_OF_WEEK
from pantry_chef.schemas.recipe import Recipe
from pantry_chef.storage.repositories import (
    add_pantry_item,
    add_to_meal_plan,
    clear_pantry,
    create_recipe,
    delete_recipe,
    get_meal_plan,
    list_pantry,
    list_recipes,
    remove_from_meal_plan,
    remove_pantry_item,
    seed_demo_data,
    update_recipe,
    update_recipe_notes,
)
from pantry_chef.storage.seed import INITIAL_PANTRY, INITIAL_RECIPES


def test_pantry_dedup_ignores_case_and_space(session):
    items, added = add_pantry_item(session, "Fresh Basil")
    assert added
    assert items == ["Fresh Basil"]

    items, added = add_pantry_item(session, "  fresh basil ")
    assert not added
    assert items == ["Fresh Basil"]
    assert list_pantry(session) == ["Fresh Basil"]


def test_pantry_keeps_insertion_order(session):
    for name in ["salt", "Pepper", "garlic"]:
        add_pantry_item(session, name)
    assert list_pantry(session) == ["salt", "Pepper", "garlic"]

    assert remove_pantry_item(session, "Pepper")
    assert not remove_pantry_item(session, "pepper")
    assert list_pantry(session) == ["salt", "garlic"]

    assert clear_pantry(session) == 2
    assert list_pantry(session) == []


def test_recipe_round_trip_and_update_keeps_notes(session):
    recipe = create_recipe(
        session, Recipe(name="Toast", ingredients=["bread", "butter"], type="Breakfast", notes="crispy")
    )
    assert recipe.id is not None

    updated = update_recipe(
        session, recipe.id, name="Garlic Toast", ingredients=["bread", "garlic"], instructions="Toast.", type="Snack"
    )
    assert updated.name == "Garlic Toast"
    assert updated.ingredients == ["bread", "garlic"]
    assert updated.notes == "crispy"

    noted = update_recipe_notes(session, recipe.id, "extra garlic")
    assert noted.notes == "extra garlic"
    assert update_recipe_notes(session, 999, "x") is None


def test_meal_plan_has_every_day(session):
    plan = get_meal_plan(session)
    assert list(plan) == list(DAYS_OF_WEEK)
    assert all(recipes == [] for recipes in plan.values())


def test_meal_plan_repeats_and_removal(session):
    toast = create_recipe(session, Recipe(name="Toast", ingredients=["bread"]))
    soup = create_recipe(session, Recipe(name="Soup", ingredients=["broth"]))
    add_to_meal_plan(session, "Monday", toast.id)
    add_to_meal_plan(session, "Monday", soup.id)
    add_to_meal_plan(session, "Monday", toast.id)
    add_to_meal_plan(session, "Friday", toast.id)

    plan = get_meal_plan(session)
    assert [r.name for r in plan["Monday"]] == ["Toast", "Soup", "Toast"]

    assert remove_from_meal_plan(session, "Monday", toast.id) == 2
    plan = get_meal_plan(session)
    assert [r.name for r in plan["Monday"]] == ["Soup"]
    assert [r.name for r in plan["Friday"]] == ["Toast"]


def test_delete_recipe_clears_plan_slots(session):
    toast = create_recipe(session, Recipe(name="Toast", ingredients=["bread"]))
    add_to_meal_plan(session, "Tuesday", toast.id)
    add_to_meal_plan(session, "Sunday", toast.id)

    assert delete_recipe(session, toast.id)
    assert not delete_recipe(session, toast.id)
    plan = get_meal_plan(session)
    assert all(recipes == [] for recipes in plan.values())
    assert list_recipes(session) == []


def test_seed_demo_data_only_fills_empty_tables(session):
    seed_demo_data(session, INITIAL_PANTRY, INITIAL_RECIPES)
    seed_demo_data(session, INITIAL_PANTRY, INITIAL_RECIPES)
    assert list_pantry(session) == INITIAL_PANTRY
    assert [r.name for r in list_recipes(session)] == [r.name for r in INITIAL_RECIPES]


def test_rows_get_timezone_aware_timestamps(session):
    from sqlmodel import select

    from pantry_chef.storage.models import PantryEntry

    add_pantry_item(session, "garlic")
    entry = session.exec(select(PantryEntry)).one()
    assert entry.created_at is not None
    assert list_pantry(session) == ["garlic"]
