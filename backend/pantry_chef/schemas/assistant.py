from pydantic import BaseModel


class GenerateRecipeRequest(BaseModel):
    prompt: str


class ImportRecipeRequest(BaseModel):
    text: str


class ChefTipsResponse(BaseModel):
    recipe_id: int
    missing_ingredients: list[str]
    tip: str
