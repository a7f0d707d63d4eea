"""
Shopping list statistics component.
"""

import streamlit as st
from typing import Any

from models.entities import ALL_CATEGORIES


def shown_label(category: str) -> str:
    """Metric label for the visible count under a filter."""
    return "Showing" if category == ALL_CATEGORIES else f"Showing {category}"


def render_shopping_stats(stats: Any, category: str):
    """
    Render list counts and cart progress.

    Args:
        stats: ShoppingStats (needs .total, .in_cart, .remaining, .visible)
        category: Selected filter value, used to label the visible count
    """
    col_shown, col_cart, col_left = st.columns(3)
    with col_shown:
        st.metric(shown_label(category), f"{stats.visible} of {stats.total}")
    with col_cart:
        st.metric("In Cart", stats.in_cart)
    with col_left:
        st.metric("Still to Get", stats.remaining)

    if stats.total:
        st.progress(stats.in_cart / stats.total, text=f"{stats.in_cart}/{stats.total} in cart")
    else:
        st.caption("The list is empty")
