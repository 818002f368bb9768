from pydantic import BaseModel


class PantryItemCreate(BaseModel):
    name: str


class PantryResponse(BaseModel):
    items: list[str]
    added: bool | None = None  # set on POST; False when the item was already stocked
