"""
New item entry form.
"""

import streamlit as st
from typing import Any, Callable


def render_item_form(
    categories: list[str],
    default_category: str,
    on_submit: Callable[[str, str], Any],
):
    """
    Render the "Add to List" form.

    The name is not validated; an empty name is submitted as-is.

    Args:
        categories: Category choices for the select box
        default_category: Initially selected category
        on_submit: Callback with (name, category) on submit
    """
    with st.form("new_item", clear_on_submit=True):
        col_name, col_category = st.columns([3, 2])
        with col_name:
            name = st.text_input("Name")
        with col_category:
            category = st.selectbox(
                "Category",
                categories,
                index=categories.index(default_category),
            )

        if st.form_submit_button("Add to List", type="primary"):
            on_submit(name, category)
            st.rerun()
