"""
Item Entry Form - input state for a new shopping list item.
"""

from models.entities import Category, DEFAULT_CATEGORY, ItemDraft


class ItemEntryForm:
    """
    Collects a name and a category and emits an ItemDraft on submit.

    No validation is applied; an empty name is forwarded as-is.
    """

    def __init__(self):
        self.name: str = ""
        self.category: Category = DEFAULT_CATEGORY

    def set_name(self, name: str):
        self.name = name

    def set_category(self, category):
        self.category = Category(category)

    def submit(self) -> ItemDraft:
        """Build a draft (not in cart) and clear the name field."""
        draft = ItemDraft(name=self.name, category=self.category, is_in_cart=False)
        self.name = ""
        return draft
