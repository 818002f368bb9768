import pytest

from pantry_chef.services.llm.prompts import CHEF_TIPS_INSTRUCTION, RECIPE_IMPORT_INSTRUCTION
from pantry_chef.services.llm.recipe_assistant import (
    GENERATE_FAILED_MESSAGE,
    IMPORT_FAILED_MESSAGE,
    TIPS_FAILED_MESSAGE,
    RecipeAssistantError,
    chef_tips,
    generate_recipe,
    import_recipe,
)

GENERATED = """```json
{"name": "Cabbage Stir Fry", "ingredients": ["Cabbage", "Soy Sauce", " garlic "],
 "instructions": "1. Slice.\\n2. Fry.", "type": "Dinner"}
```"""


def test_generate_recipe_parses_fenced_json(stub_generator):
    generator = stub_generator(GENERATED)
    draft = generate_recipe("something quick", ["cabbage", "soy sauce"], generator)
    assert draft.name == "Cabbage Stir Fry"
    assert draft.ingredients == ["cabbage", "soy sauce", "garlic"]
    assert draft.instructions == "1. Slice.\n2. Fry."
    assert draft.type == "Dinner"
    call = generator.calls[0]
    assert call["prompt"] == 'Request: "something quick". Pantry: cabbage, soy sauce.'
    assert call["prompt_name"] == "recipe_generate"


def test_generate_recipe_defaults_unknown_type(stub_generator):
    generator = stub_generator('{"name": "Toast", "ingredients": ["bread"], "type": "Brunch"}')
    draft = generate_recipe("toast", [], generator)
    assert draft.type == "Dinner"
    assert draft.instructions == ""


@pytest.mark.parametrize(
    "response",
    [
        "Error communicating with the AI Chef. Please try again.",
        '{"ingredients": ["bread"]}',
        '{"name": "Toast", "ingredients": "bread"}',
        '{"name": "Toast", "ingredients": ["  "]}',
        RuntimeError("network down"),
    ],
)
def test_generate_recipe_failures(stub_generator, response):
    with pytest.raises(RecipeAssistantError) as exc:
        generate_recipe("toast", ["bread"], stub_generator(response))
    assert str(exc.value) == GENERATE_FAILED_MESSAGE


def test_import_recipe_uses_normalization_instruction(stub_generator):
    generator = stub_generator(
        '{"name": "Burgers", "ingredients": ["ground beef", "bun"], '
        '"instructions": ["Form patties", "Grill"], "type": "Lunch"}'
    )
    draft = import_recipe("2 lb ground beef (80/20)\n4 buns\nGrill it.", generator)
    assert draft.ingredients == ["ground beef", "bun"]
    assert draft.instructions == "Form patties\nGrill"
    assert draft.type == "Lunch"
    assert generator.calls[0]["instruction"] == RECIPE_IMPORT_INSTRUCTION


def test_import_recipe_failure(stub_generator):
    with pytest.raises(RecipeAssistantError) as exc:
        import_recipe("gibberish", stub_generator("not json"))
    assert str(exc.value) == IMPORT_FAILED_MESSAGE


def test_chef_tips(stub_generator):
    generator = stub_generator("  Use cabbage instead of coleslaw mix.  ")
    tip = chef_tips("Egg Roll Bowl", ["coleslaw mix"], ["cabbage"], generator)
    assert tip == "Use cabbage instead of coleslaw mix."
    call = generator.calls[0]
    assert call["prompt"] == 'Dish: "Egg Roll Bowl". Missing: coleslaw mix. Pantry: cabbage. Give subs or tips. Short.'
    assert call["instruction"] == CHEF_TIPS_INSTRUCTION


def test_chef_tips_failure_is_not_fatal(stub_generator):
    tip = chef_tips("Egg Roll Bowl", ["ginger"], [], stub_generator(TimeoutError("slow")))
    assert tip == TIPS_FAILED_MESSAGE
