"""
Pydantic Schemas for the mock items service.

Wire names are camelCase (`isInCart`) to match the client contract;
FastAPI serializes responses by alias.
"""

from pydantic import BaseModel, Field

from models.entities import Category


# ============================================
# Item Schemas
# ============================================

class ItemCreate(BaseModel):
    """Request body for POST /items."""
    name: str
    category: Category
    is_in_cart: bool = Field(False, alias="isInCart")

    class Config:
        populate_by_name = True


class ItemUpdate(BaseModel):
    """Request body for PATCH /items/{id}; every field is optional."""
    name: str | None = None
    category: Category | None = None
    is_in_cart: bool | None = Field(None, alias="isInCart")

    class Config:
        populate_by_name = True


class ItemResponse(BaseModel):
    """An item as returned by the service."""
    id: int
    name: str
    category: Category
    is_in_cart: bool = Field(..., alias="isInCart")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    """Body of a 404 response."""
    message: str
