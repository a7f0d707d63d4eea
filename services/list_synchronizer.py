"""
List Synchronizer - keeps a local mirror of the remote item collection.

This service owns the in-memory copy of the collection and reconciles it
after each request:
- Loading the whole collection once at startup
- Appending created items once the server has assigned an id
- Replacing updated items with the server's full record
- Dropping deleted items

The mirror is only written in the response path of a successful request.
A failed or not-found request leaves it exactly as it was.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, Optional

from models.category_filter import category_matches
from models.entities import ALL_CATEGORIES, Item, ItemDraft, ItemUpdate
from services.items_api import ItemsAPI, ItemsAPIError, ItemNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class SyncResult:
    """Outcome of one synchronizer operation."""
    success: bool
    item: Optional[Item] = None
    not_found: bool = False
    error: Optional[str] = None


class ListSynchronizer:
    """Server-confirmed mirror of the shopping list."""

    def __init__(self, api: Optional[ItemsAPI] = None):
        self.api = api if api is not None else ItemsAPI()
        # Keyed by id; dict insertion order is the display order
        self._items: dict[int, Item] = {}

    # ==========================================
    # Read Access
    # ==========================================

    @property
    def items(self) -> tuple[Item, ...]:
        """Snapshot of the mirror in display order."""
        return tuple(self._items.values())

    def get(self, item_id: int) -> Optional[Item]:
        return self._items.get(item_id)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id) -> bool:
        return item_id in self._items

    def filtered_view(self, category: str = ALL_CATEGORIES) -> Iterator[Item]:
        """
        Items whose category equals `category`, in display order.

        Every call returns a fresh generator over the current mirror;
        nothing is cached.
        """
        return (item for item in self._items.values() if category_matches(item, category))

    # ==========================================
    # Synchronization
    # ==========================================

    def load(self) -> SyncResult:
        """Replace the mirror with the server's full collection."""
        try:
            items = self.api.list_items()
        except ItemsAPIError as e:
            logger.error(f"Failed to load items: {e}")
            return SyncResult(success=False, error=str(e))

        mirror: dict[int, Item] = {}
        for item in items:
            if item.id in mirror:
                logger.warning(f"Duplicate item id {item.id} from server, keeping the last one")
            mirror[item.id] = item
        self._items = mirror

        logger.info(f"Loaded {len(self._items)} items")
        return SyncResult(success=True)

    def add_item(self, draft: ItemDraft) -> SyncResult:
        """Create an item on the server, then append the confirmed record."""
        try:
            item = self.api.create_item(draft)
        except ItemsAPIError as e:
            logger.error(f"Failed to add item {draft.name!r}: {e}")
            return SyncResult(success=False, error=str(e))

        if item.id in self._items:
            # Replaces the entry so ids stay unique
            logger.warning(f"Server returned existing id {item.id} for a new item")
        self._items[item.id] = item

        logger.info(f"Added item {item.id} ({item.name})")
        return SyncResult(success=True, item=item)

    def update_item(self, item_id: int, changes: ItemUpdate) -> SyncResult:
        """Send partial changes and replace the local entry with the server's record."""
        try:
            item = self.api.update_item(item_id, changes)
        except ItemNotFoundError as e:
            logger.warning(f"Update skipped: {e}")
            return SyncResult(success=False, not_found=True, error=str(e))
        except ItemsAPIError as e:
            logger.error(f"Failed to update item {item_id}: {e}")
            return SyncResult(success=False, error=str(e))

        if item.id != item_id:
            # Applying it would overwrite one entry with another item's record
            logger.warning(f"Update of item {item_id} returned item {item.id}, not applied")
            return SyncResult(
                success=False,
                error=f"Server returned item {item.id} for an update of item {item_id}",
            )

        if item_id in self._items:
            # Assigning an existing key keeps its position
            self._items[item_id] = item
        else:
            logger.warning(f"Updated item {item_id} is not in the local list")

        logger.info(f"Updated item {item_id}")
        return SyncResult(success=True, item=item)

    def toggle_in_cart(self, item_id: int) -> SyncResult:
        """Flip the in-cart flag of a mirrored item via the server."""
        current = self._items.get(item_id)
        if current is None:
            return SyncResult(success=False, not_found=True, error=f"Item {item_id} not found")
        return self.update_item(item_id, ItemUpdate(is_in_cart=not current.is_in_cart))

    def delete_item(self, item_id: int) -> SyncResult:
        """Delete an item on the server, then drop it locally."""
        try:
            self.api.delete_item(item_id)
        except ItemNotFoundError as e:
            logger.warning(f"Delete skipped: {e}")
            return SyncResult(success=False, not_found=True, error=str(e))
        except ItemsAPIError as e:
            logger.error(f"Failed to delete item {item_id}: {e}")
            return SyncResult(success=False, error=str(e))

        item = self._items.pop(item_id, None)

        logger.info(f"Deleted item {item_id}")
        return SyncResult(success=True, item=item)
