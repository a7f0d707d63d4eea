"""
Services layer - pure business logic, no Streamlit dependencies.
"""

from services.items_api import ItemsAPI, ItemsAPIError, ItemNotFoundError
from services.list_synchronizer import ListSynchronizer, SyncResult

__all__ = [
    "ItemsAPI",
    "ItemsAPIError",
    "ItemNotFoundError",
    "ListSynchronizer",
    "SyncResult",
]
