"""
Category Filter - the selected category and its item predicate.
"""

import logging
from typing import Callable

from models.entities import ALL_CATEGORIES, Category, Item

logger = logging.getLogger(__name__)


class CategoryFilter:
    """
    Holds the single selected category value.

    "All" is the default and matches every item. Listeners are called with
    the new value whenever the selection actually changes.
    """

    def __init__(self, selected: str = ALL_CATEGORIES):
        self._selected = self._validate(selected)
        self._listeners: list[Callable[[str], None]] = []

    @staticmethod
    def options() -> list[str]:
        """Choices in display order, "All" first."""
        return [ALL_CATEGORIES] + [c.value for c in Category]

    @classmethod
    def _validate(cls, value) -> str:
        if isinstance(value, Category):
            value = value.value
        if value not in cls.options():
            raise ValueError(f"Unknown category: {value!r}")
        return value

    @property
    def selected(self) -> str:
        return self._selected

    def subscribe(self, listener: Callable[[str], None]):
        """Register a callback for selection changes."""
        self._listeners.append(listener)

    def select(self, category) -> bool:
        """
        Change the selected category.

        Returns True if the selection changed. Raises ValueError for a
        value outside the category set.
        """
        value = self._validate(category)
        if value == self._selected:
            return False

        logger.debug(f"Category filter changed: {self._selected} -> {value}")
        self._selected = value
        for listener in self._listeners:
            listener(value)
        return True

    def matches(self, item: Item) -> bool:
        """True if the item is visible under the current selection."""
        return category_matches(item, self._selected)


def category_matches(item: Item, category: str) -> bool:
    """Pure predicate: does `item` belong to `category` ("All" matches everything)?"""
    if category == ALL_CATEGORIES:
        return True
    return item.category.value == category
