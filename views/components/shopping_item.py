"""
Shopping list item components.

One row per item: name, category, cart toggle and delete.
"""

import streamlit as st
from typing import Any, Callable


def cart_button_label(is_in_cart: bool) -> str:
    """Label of the cart toggle for an item's current state."""
    return "Remove From Cart" if is_in_cart else "Add to Cart"


def render_shopping_item_row(
    item: Any,
    on_toggle: Callable[[int], Any],
    on_delete: Callable[[int], Any],
):
    """
    Render a single item row.

    Args:
        item: Item (needs .id, .name, .category, .is_in_cart)
        on_toggle: Callback to add the item to the cart or remove it
        on_delete: Callback to delete the item
    """
    category = getattr(item.category, "value", item.category)

    col_name, col_category, col_cart, col_delete = st.columns([3, 1.5, 1.5, 1])

    with col_name:
        if item.is_in_cart:
            st.markdown(f"~~{item.name}~~")
        else:
            st.markdown(f"**{item.name}**")

    with col_category:
        st.caption(category)

    with col_cart:
        if st.button(
            cart_button_label(item.is_in_cart),
            key=f"cart_{item.id}",
            type="secondary" if item.is_in_cart else "primary",
            use_container_width=True,
        ):
            on_toggle(item.id)
            st.rerun()

    with col_delete:
        if st.button("Delete", key=f"delete_{item.id}", use_container_width=True):
            on_delete(item.id)
            st.rerun()


def render_shopping_items(
    items: list[Any],
    on_toggle: Callable[[int], Any],
    on_delete: Callable[[int], Any],
):
    """
    Render the visible items in list order.

    Args:
        items: Items to show, already filtered
        on_toggle: Callback for the cart button
        on_delete: Callback for the delete button
    """
    if not items:
        st.info("No items to show")
        return

    for item in items:
        render_shopping_item_row(item, on_toggle, on_delete)
