"""
In-memory item store backing the mock items service.

Ids come from a counter that starts at the last seeded id and only grows,
so a deleted id is never handed out again.
"""

import logging
import threading
from typing import Optional

from app.schemas import ItemCreate, ItemResponse, ItemUpdate

logger = logging.getLogger(__name__)


SEED_ITEMS = [
    {"id": 1, "name": "Yogurt", "category": "Dairy", "isInCart": False},
    {"id": 2, "name": "Pomegranate", "category": "Produce", "isInCart": False},
    {"id": 3, "name": "Lettuce", "category": "Produce", "isInCart": False},
]


class ItemStore:
    """Ordered, in-memory collection of items."""

    def __init__(self, seed: Optional[list[dict]] = None):
        self._seed = [dict(item) for item in (SEED_ITEMS if seed is None else seed)]
        self._lock = threading.Lock()
        self.reset()

    def reset(self):
        """Restore the seed data and the id counter."""
        with self._lock:
            self._items = [ItemResponse.model_validate(item) for item in self._seed]
            self._last_id = self._items[-1].id if self._items else 0

    def list_items(self) -> list[ItemResponse]:
        with self._lock:
            return list(self._items)

    def get(self, item_id: int) -> Optional[ItemResponse]:
        with self._lock:
            return self._find(item_id)

    def create(self, data: ItemCreate) -> ItemResponse:
        with self._lock:
            self._last_id += 1
            item = ItemResponse(id=self._last_id, **data.model_dump())
            self._items.append(item)
        logger.info(f"Created item {item.id} ({item.name})")
        return item

    def update(self, item_id: int, changes: ItemUpdate) -> Optional[ItemResponse]:
        """Merge the fields that were set; None if the id is unknown."""
        with self._lock:
            current = self._find(item_id)
            if current is None:
                return None
            merged = current.model_copy(update=changes.model_dump(exclude_unset=True, exclude_none=True))
            self._items[self._items.index(current)] = merged
        logger.info(f"Updated item {item_id}")
        return merged

    def delete(self, item_id: int) -> bool:
        with self._lock:
            current = self._find(item_id)
            if current is None:
                return False
            self._items.remove(current)
        logger.info(f"Deleted item {item_id}")
        return True

    def _find(self, item_id: int) -> Optional[ItemResponse]:
        for item in self._items:
            if item.id == item_id:
                return item
        return None


_store = ItemStore()


def get_store() -> ItemStore:
    """FastAPI dependency returning the process-wide store."""
    return _store
