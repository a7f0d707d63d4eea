"""
Shopping View - UI for the shopping list.

This view handles:
- The header and dark mode toggle
- Adding items through the entry form
- Filtering by category
- Toggling items in and out of the cart, and deleting them
"""

import streamlit as st

from controllers.shopping_controller import ShoppingController
from views.components.header import render_header
from views.components.item_form import render_item_form
from views.components.category_filter import render_category_filter
from views.components.shopping_item import render_shopping_items
from views.components.shopping_stats import render_shopping_stats
from views.components.sidebar import render_shopping_list_sidebar


class ShoppingView:
    """View for shopping list UI."""

    def __init__(self, controller: ShoppingController | None = None):
        self.controller = controller or ShoppingController()

    def render(self):
        """Main render method."""
        render_header(
            title=self.controller.get_title(),
            is_dark_mode=self.controller.is_dark_mode(),
            on_toggle_dark_mode=self.controller.toggle_dark_mode,
        )

        self.controller.ensure_loaded()

        render_shopping_list_sidebar(
            api_url=self.controller.get_api_url(),
            item_count=self.controller.get_stats().total,
            on_reload=self.controller.reload,
        )

        self._render_error()

        render_item_form(
            categories=self.controller.get_form_categories(),
            default_category=self.controller.get_form_default_category(),
            on_submit=self.controller.add_item,
        )

        st.markdown("---")

        self._render_list()

    def _render_error(self):
        """Show the last failed request, if any."""
        error = self.controller.get_last_error()
        if not error:
            return

        col_msg, col_dismiss = st.columns([5, 1])
        with col_msg:
            st.error(error)
        with col_dismiss:
            if st.button("Dismiss", key="dismiss_error", use_container_width=True):
                self.controller.clear_error()
                st.rerun()

    def _render_list(self):
        """Render the filter, stats and visible items."""
        stats = self.controller.get_stats()

        col_filter, col_stats = st.columns([1, 2])
        with col_filter:
            render_category_filter(
                options=self.controller.get_category_options(),
                selected=self.controller.get_category(),
                on_change=self.controller.set_category,
            )
        with col_stats:
            render_shopping_stats(stats, self.controller.get_category())

        st.markdown("---")

        render_shopping_items(
            items=self.controller.get_visible_items(),
            on_toggle=self.controller.toggle_item,
            on_delete=self.controller.delete_item,
        )
