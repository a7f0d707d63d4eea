"""
Models Package - Shopping list records and UI input state.
"""

from models.entities import (
    ALL_CATEGORIES,
    DEFAULT_CATEGORY,
    Category,
    Item,
    ItemDraft,
    ItemUpdate,
)
from models.category_filter import CategoryFilter, category_matches
from models.item_form import ItemEntryForm

__all__ = [
    # Records
    "ALL_CATEGORIES",
    "DEFAULT_CATEGORY",
    "Category",
    "Item",
    "ItemDraft",
    "ItemUpdate",
    # UI state
    "CategoryFilter",
    "category_matches",
    "ItemEntryForm",
]
