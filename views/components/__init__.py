"""
Reusable UI components.
"""

from views.components.header import render_header
from views.components.item_form import render_item_form
from views.components.category_filter import render_category_filter
from views.components.shopping_item import render_shopping_item_row, render_shopping_items
from views.components.shopping_stats import render_shopping_stats

# Sidebar components
from views.components.sidebar import render_shopping_list_sidebar

__all__ = [
    # Page
    "render_header",
    # Shopping
    "render_item_form",
    "render_category_filter",
    "render_shopping_item_row",
    "render_shopping_items",
    "render_shopping_stats",
    # Sidebar
    "render_shopping_list_sidebar",
]
