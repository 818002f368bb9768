"""
Substitution table: recipe ingredient -> pantry items that can stand in for it.
Keys are singularized names. Lookup only ever happens from the recipe side.
"""

COMMON_SUBSTITUTIONS: dict[str, tuple[str, ...]] = {
    "coleslaw mix": ("cabbage", "shredded cabbage", "red cabbage", "green cabbage"),
    "sour cream": ("greek yogurt", "plain yogurt", "yogurt"),
    "butter": ("margarine", "oil", "coconut oil", "ghee"),
    "milk": (
        "almond milk", "soy milk", "oat milk", "coconut milk",
        "heavy cream", "half and half", "water",
    ),
    "ground beef": ("ground turkey", "ground chicken", "lentils", "tofu"),
    "ground turkey": ("ground beef", "ground chicken", "lentils"),
    "bread crumb": ("oats", "crushed crackers", "croutons"),
    "egg": ("flax egg", "chia egg", "banana", "applesauce"),
    "sugar": ("honey", "maple syrup", "stevia"),
    "soy sauce": ("tamari", "coconut aminos"),
    "heavy cream": ("milk", "half and half"),
}


def substitutes_for(target: str) -> tuple[str, ...]:
    return COMMON_SUBSTITUTIONS.get(target, ())
