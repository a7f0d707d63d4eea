"""
Shopping Controller - manages shopping list state and user intents.

This controller handles:
- Loading the list once per session
- Adding, toggling and deleting items through the List Synchronizer
- The selected category filter and the entry form
- Dark mode and the last error shown to the user

All per-session state lives in one ShoppingState object stored in
Streamlit session state under "shopping". Views receive data and
callbacks from here and never touch session state themselves.
"""

import logging
import streamlit as st
from typing import Any, MutableMapping, Optional
from dataclasses import dataclass, field

from config.settings import get_settings
from models import Category, CategoryFilter, Item, ItemEntryForm
from services import ListSynchronizer, SyncResult

logger = logging.getLogger(__name__)


NOT_FOUND_MESSAGE = "That item no longer exists on the server."


@dataclass
class ShoppingStats:
    """Counts for the stats row."""
    total: int
    in_cart: int
    visible: int

    @property
    def remaining(self) -> int:
        return self.total - self.in_cart


@dataclass
class ShoppingState:
    """Everything the shopping page owns for one session."""
    synchronizer: ListSynchronizer
    category_filter: CategoryFilter = field(default_factory=CategoryFilter)
    entry_form: ItemEntryForm = field(default_factory=ItemEntryForm)
    is_dark_mode: bool = False
    loaded: bool = False
    last_error: Optional[str] = None


class ShoppingController:
    """Controller for the shopping list page."""

    def __init__(
        self,
        session_state: Optional[MutableMapping[str, Any]] = None,
        synchronizer: Optional[ListSynchronizer] = None,
    ):
        """
        Args:
            session_state: Mapping holding per-session state; defaults to
                st.session_state
            synchronizer: Used only when the session has no state yet
        """
        self._session = st.session_state if session_state is None else session_state
        self._init_session_state(synchronizer)

    def _init_session_state(self, synchronizer: Optional[ListSynchronizer]):
        """Initialize session state if not already set."""
        if "shopping" not in self._session:
            if synchronizer is None:
                synchronizer = ListSynchronizer()
            state = ShoppingState(synchronizer=synchronizer)
            state.category_filter.subscribe(
                lambda category: logger.info(f"Showing {category} items")
            )
            self._session["shopping"] = state

    @property
    def state(self) -> ShoppingState:
        return self._session["shopping"]

    # ==========================================
    # Session State
    # ==========================================

    def get_title(self) -> str:
        return get_settings().app_title

    def get_api_url(self) -> str:
        return self.state.synchronizer.api.base_url

    def is_dark_mode(self) -> bool:
        return self.state.is_dark_mode

    def toggle_dark_mode(self) -> bool:
        """Flip dark mode. Returns the new value."""
        self.state.is_dark_mode = not self.state.is_dark_mode
        return self.state.is_dark_mode

    def get_last_error(self) -> Optional[str]:
        return self.state.last_error

    def clear_error(self):
        self.state.last_error = None

    def is_loaded(self) -> bool:
        return self.state.loaded

    # ==========================================
    # Loading
    # ==========================================

    def ensure_loaded(self) -> Optional[SyncResult]:
        """Load the list on the first render of the session only."""
        if self.state.loaded:
            return None
        return self.reload()

    def reload(self) -> SyncResult:
        """Fetch the full list again, replacing the local copy."""
        result = self.state.synchronizer.load()
        # Marked loaded even on failure; the user retries explicitly
        self.state.loaded = True
        return self._record(result)

    # ==========================================
    # Item Operations
    # ==========================================

    def add_item(self, name: str, category) -> SyncResult:
        """Submit the entry form as a new item."""
        form = self.state.entry_form
        form.set_name(name)
        form.set_category(category)
        draft = form.submit()
        return self._record(self.state.synchronizer.add_item(draft))

    def toggle_item(self, item_id: int) -> SyncResult:
        """Add an item to the cart, or take it out."""
        return self._record(self.state.synchronizer.toggle_in_cart(item_id))

    def delete_item(self, item_id: int) -> SyncResult:
        return self._record(self.state.synchronizer.delete_item(item_id))

    def _record(self, result: SyncResult) -> SyncResult:
        """Remember the error of a failed operation for the next render."""
        if result.success:
            self.state.last_error = None
        elif result.not_found:
            self.state.last_error = NOT_FOUND_MESSAGE
        else:
            self.state.last_error = result.error or "Request failed"
        return result

    # ==========================================
    # Filtering
    # ==========================================

    def get_category(self) -> str:
        return self.state.category_filter.selected

    def get_category_options(self) -> list[str]:
        return self.state.category_filter.options()

    def get_form_categories(self) -> list[str]:
        """Categories offered by the entry form (no "All")."""
        return [c.value for c in Category]

    def get_form_default_category(self) -> str:
        return self.state.entry_form.category.value

    def set_category(self, category: str) -> bool:
        """Change the filter. Returns True if it changed."""
        return self.state.category_filter.select(category)

    def get_visible_items(self) -> list[Item]:
        """Items matching the current filter, in list order."""
        return list(self.state.synchronizer.filtered_view(self.get_category()))

    def get_stats(self) -> ShoppingStats:
        items = self.state.synchronizer.items
        return ShoppingStats(
            total=len(items),
            in_cart=sum(1 for i in items if i.is_in_cart),
            visible=sum(1 for _ in self.state.synchronizer.filtered_view(self.get_category())),
        )
