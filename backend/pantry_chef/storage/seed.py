"""Starter pantry and recipes loaded into a fresh in-memory store."""

from pantry_chef.schemas.recipe import Recipe

INITIAL_PANTRY = [
    "eggs", "milk", "butter", "flour", "sugar", "salt", "pepper", "garlic",
    "onion", "pasta", "tomato sauce", "beef", "cabbage", "soy sauce",
]

INITIAL_RECIPES = [
    Recipe(
        name="Turkey Egg Roll Bowl",
        ingredients=["ground beef", "coleslaw mix", "soy sauce", "ginger", "garlic", "onion"],
        instructions=(
            "1. Brown the meat with onion and garlic.\n"
            "2. Add coleslaw mix and cook until wilted.\n"
            "3. Stir in soy sauce and ginger.\n"
            "4. Serve over rice or on its own."
        ),
        type="Dinner",
        notes="Great for meal prep!",
    ),
    Recipe(
        name="Classic Burgers",
        ingredients=["ground beef", "buns", "cheese", "lettuce", "tomato", "onion"],
        instructions=(
            "1. Form ground beef into patties.\n"
            "2. Season with salt and pepper.\n"
            "3. Grill or pan fry for 4-5 mins per side.\n"
            "4. Toast buns and assemble with toppings."
        ),
        type="Dinner",
    ),
    Recipe(
        name="Scrambled Eggs",
        ingredients=["eggs", "milk", "butter", "salt", "pepper"],
        instructions=(
            "1. Crack eggs into a bowl.\n"
            "2. Add a splash of milk and whisk.\n"
            "3. Melt butter in a non-stick pan.\n"
            "4. Pour in eggs and cook gently, stirring constantly."
        ),
        type="Breakfast",
        notes="Add cheese at the end.",
    ),
    Recipe(
        name="Simple Pasta",
        ingredients=["pasta", "tomato sauce", "garlic", "onion", "salt"],
        instructions=(
            "1. Boil salted water and cook pasta.\n"
            "2. Meanwhile, saute chopped garlic and onion.\n"
            "3. Add tomato sauce and simmer.\n"
            "4. Drain pasta and toss with sauce."
        ),
        type="Dinner",
    ),
]
