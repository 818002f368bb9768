from pantry_chef.schemas.recipe import Recipe
from pantry_chef.services.shopping import shopping_list

BURGERS = Recipe(name="Burgers", ingredients=["ground beef", "buns"])
SLIDERS = Recipe(name="Sliders", ingredients=["buns", "pickles", "ground beef"])


def test_only_unmatched_ingredients():
    plan = {"Monday": [BURGERS]}
    assert shopping_list(plan, ["ground beef"]) == ["buns"]


def test_dedup_across_days_and_recipes():
    plan = {"Monday": [BURGERS], "Tuesday": [SLIDERS, BURGERS], "Wednesday": []}
    assert shopping_list(plan, ["ground beef"]) == ["buns", "pickles"]


def test_dedup_is_by_original_spelling():
    shouty = Recipe(name="Loud Burgers", ingredients=["Buns"])
    plan = {"Monday": [BURGERS, shouty]}
    assert shopping_list(plan, ["ground beef"]) == ["Buns", "buns"]


def test_sorted_and_substitutions_count_as_stocked():
    bowl = Recipe(name="Bowl", ingredients=["soy sauce", "coleslaw mix", "ginger", "avocado"])
    plan = {"Friday": [bowl]}
    assert shopping_list(plan, ["cabbage", "tamari"]) == ["avocado", "ginger"]


def test_empty_plan():
    assert shopping_list({"Monday": [], "Sunday": []}, []) == []
