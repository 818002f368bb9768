from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Column, JSON
from sqlmodel import Field, SQLModel

from pantry_chef.schemas.recipe import Recipe


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PantryEntry(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str  # as entered by the user
    created_at: datetime = Field(default_factory=_utcnow)


class StoredRecipe(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    name: str
    ingredients: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    instructions: str = ""
    type: str = "Dinner"  # Breakfast | Lunch | Dinner | Snack | Dessert
    notes: str = ""
    created_at: datetime = Field(default_factory=_utcnow)

    def to_recipe(self) -> Recipe:
        return Recipe(
            id=self.id,
            name=self.name,
            ingredients=list(self.ingredients or []),
            instructions=self.instructions,
            type=self.type,
            notes=self.notes,
        )


class MealPlanEntry(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    day: str = Field(index=True)
    recipe_id: int = Field(foreign_key="storedrecipe.id")
    created_at: datetime = Field(default_factory=_utcnow)


class LLMCallLog(SQLModel, table=True):
    id: Optional[int] = Field(default=None, primary_key=True)
    prompt_name: str
    prompt_version: str
    model: str
    input_payload: str
    output_payload: str
    latency_ms: int
    created_at: datetime = Field(default_factory=_utcnow)
