"""
Shopping List Entities

Pydantic models for the records exchanged with the remote collection
service. Field names are snake_case in Python and camelCase on the wire
(`isInCart`), so every dump for the API uses `by_alias=True`.

Record Lifecycle:
    ItemDraft ──POST /items──> Item (server assigns id)
    Item ──PATCH /items/:id (ItemUpdate)──> Item (server returns full record)
    Item ──DELETE /items/:id──> gone
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class Category(str, Enum):
    """Fixed set of item categories."""
    PRODUCE = "Produce"
    DAIRY = "Dairy"
    DESSERT = "Dessert"


# Filter value meaning "no filtering"; never stored on an item
ALL_CATEGORIES = "All"

DEFAULT_CATEGORY = Category.PRODUCE


class Item(BaseModel):
    """
    A shopping list record confirmed by the remote collection service.

    Frozen: local copies are replaced with server responses, never edited.
    """
    id: int
    name: str
    category: Category
    is_in_cart: bool = Field(default=False, alias="isInCart")

    class Config:
        populate_by_name = True
        frozen = True

    def to_payload(self) -> dict:
        """Serialize using wire field names."""
        return self.model_dump(by_alias=True, mode="json")


class ItemDraft(BaseModel):
    """A user-entered item that has not been created yet (no id)."""
    name: str
    category: Category = DEFAULT_CATEGORY
    is_in_cart: bool = Field(default=False, alias="isInCart")

    class Config:
        populate_by_name = True
        frozen = True

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, mode="json")


class ItemUpdate(BaseModel):
    """
    Partial changes for an existing item.

    Only fields that were explicitly set end up in the request body, so
    `ItemUpdate(is_in_cart=True)` sends `{"isInCart": true}`.
    """
    name: Optional[str] = None
    category: Optional[Category] = None
    is_in_cart: Optional[bool] = Field(default=None, alias="isInCart")

    class Config:
        populate_by_name = True

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True, exclude_unset=True, mode="json")
