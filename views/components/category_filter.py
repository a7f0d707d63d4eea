"""
Category filter component.
"""

import streamlit as st
from typing import Any, Callable

from models.entities import ALL_CATEGORIES


def render_category_filter(
    options: list[str],
    selected: str,
    on_change: Callable[[str], Any],
):
    """
    Render the category select box.

    Args:
        options: Filter choices, "All" first
        selected: Currently selected value
        on_change: Callback with the new value when it changes
    """
    choice = st.selectbox(
        "Filter by category",
        options,
        index=options.index(selected),
        format_func=lambda c: "All categories" if c == ALL_CATEGORIES else c,
        key="category_filter",
    )

    if choice != selected:
        on_change(choice)
        st.rerun()
