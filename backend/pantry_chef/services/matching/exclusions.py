"""
Curated containment false positives.
Each pair names a short term that appears inside a longer, different ingredient.
"""

# (short, long): "pepper" must never be satisfied by "bell pepper" and vice versa
FALSE_POSITIVES: tuple[tuple[str, str], ...] = (
    ("pepper", "bell pepper"),
    ("pepper", "jalapeno pepper"),
    ("pepper", "chili pepper"),
    ("tomato", "tomato sauce"),
    ("tomato", "tomato paste"),
    ("corn", "popcorn"),
    ("milk", "coconut milk"),
    ("milk", "almond milk"),
    ("oil", "boil"),
)


def is_excluded_pair(a: str, b: str) -> bool:
    """True when {a, b} is exactly one (short, long) entry, in either order."""
    for short, long in FALSE_POSITIVES:
        if (a == short and b == long) or (a == long and b == short):
            return True
    return False
