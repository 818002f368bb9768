from fastapi import APIRouter, HTTPException

from pantry_chef.logging import get_logger
from pantry_chef.schemas.pantry import PantryItemCreate, PantryResponse
from pantry_chef.storage.db import get_session
from pantry_chef.storage.repositories import (
    add_pantry_item,
    clear_pantry,
    list_pantry,
    remove_pantry_item,
)

router = APIRouter()
logger = get_logger(__name__)


@router.get("/pantry", response_model=PantryResponse)
def get_pantry() -> PantryResponse:
    with get_session() as session:
        return PantryResponse(items=list_pantry(session))


@router.post("/pantry", response_model=PantryResponse)
def post_pantry_item(body: PantryItemCreate) -> PantryResponse:
    """Add an item; an item already stocked (any casing/spacing) leaves the pantry unchanged."""
    if not body.name.strip():
        raise HTTPException(status_code=400, detail="Pantry item must not be blank")
    with get_session() as session:
        items, added = add_pantry_item(session, body.name)
    return PantryResponse(items=items, added=added)


@router.delete("/pantry/{item:path}", response_model=PantryResponse)
def delete_pantry_item(item: str) -> PantryResponse:
    with get_session() as session:
        if not remove_pantry_item(session, item):
            raise HTTPException(status_code=404, detail=f"'{item}' is not in the pantry")
        return PantryResponse(items=list_pantry(session))


@router.delete("/pantry", response_model=PantryResponse)
def delete_pantry() -> PantryResponse:
    with get_session() as session:
        clear_pantry(session)
    return PantryResponse(items=[])
