"""
Items Controller

Implements the /items collection contract used by the shopping list app:
- GET    /items       list every item
- POST   /items       create an item, assigning the next id
- PATCH  /items/{id}  merge partial changes, return the full item
- DELETE /items/{id}  remove an item, return {}

An id that is not a positive integer, or that does not exist, is answered
with 404 {"message": "Invalid ID"}.
"""

from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from app.schemas import ErrorResponse, ItemCreate, ItemResponse, ItemUpdate
from app.store import ItemStore, get_store

router = APIRouter(prefix="/items", tags=["items"])

NOT_FOUND = {404: {"model": ErrorResponse}}


def parse_item_id(raw: str) -> Optional[int]:
    """Return the id as an int, or None unless it is a positive integer."""
    if not (raw.isascii() and raw.isdigit()):
        return None
    item_id = int(raw)
    return item_id if item_id > 0 else None


def invalid_id_response() -> JSONResponse:
    return JSONResponse(status_code=404, content={"message": "Invalid ID"})


@router.get("", response_model=list[ItemResponse])
def list_items(store: ItemStore = Depends(get_store)):
    """List all items in insertion order."""
    return store.list_items()


@router.post("", response_model=ItemResponse)
def create_item(data: ItemCreate, store: ItemStore = Depends(get_store)):
    """Create an item; the id is assigned here."""
    return store.create(data)


@router.patch("/{item_id}", response_model=ItemResponse, responses=NOT_FOUND)
def update_item(item_id: str, changes: ItemUpdate, store: ItemStore = Depends(get_store)):
    """Apply partial changes and return the full updated item."""
    parsed = parse_item_id(item_id)
    if parsed is None:
        return invalid_id_response()

    item = store.update(parsed, changes)
    if item is None:
        return invalid_id_response()
    return item


@router.delete("/{item_id}", responses=NOT_FOUND)
def delete_item(item_id: str, store: ItemStore = Depends(get_store)):
    """Delete an item."""
    parsed = parse_item_id(item_id)
    if parsed is None or not store.delete(parsed):
        return invalid_id_response()
    return {}
