from pydantic import BaseModel, Field, field_validator

RECIPE_TYPES = ("Breakfast", "Lunch", "Dinner", "Snack", "Dessert")


class Recipe(BaseModel):
    id: int | None = None
    name: str
    ingredients: list[str] = Field(default_factory=list)  # raw text, normalized only at match time
    instructions: str = ""
    type: str = "Dinner"
    notes: str = ""


class RecipeCreate(BaseModel):
    name: str
    ingredients: list[str] | str  # list, or comma-separated text from the recipe form
    instructions: str = ""
    type: str = "Dinner"

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value


class RecipeNotesUpdate(BaseModel):
    notes: str


class RecipeDraft(BaseModel):
    """Structured recipe produced by the assistant before it is saved."""

    name: str
    ingredients: list[str]
    instructions: str = ""
    type: str = "Dinner"
