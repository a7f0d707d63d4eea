"""
Page header with the dark mode toggle.
"""

import streamlit as st
from typing import Any, Callable

DARK_MODE_CSS = """
<style>
.stApp { background-color: #1e1e1e; color: #f0f0f0; }
.stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp label { color: #f0f0f0; }
</style>
"""


def render_header(
    title: str,
    is_dark_mode: bool,
    on_toggle_dark_mode: Callable[[], Any],
):
    """
    Render the title and the mode toggle.

    Args:
        title: App title
        is_dark_mode: Current mode
        on_toggle_dark_mode: Callback when the mode button is clicked
    """
    if is_dark_mode:
        st.markdown(DARK_MODE_CSS, unsafe_allow_html=True)

    col_title, col_mode = st.columns([5, 1])

    with col_title:
        st.title(title)

    with col_mode:
        label = f"{'Dark' if is_dark_mode else 'Light'} Mode"
        if st.button(label, key="dark_mode", use_container_width=True):
            on_toggle_dark_mode()
            st.rerun()
