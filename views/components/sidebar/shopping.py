"""
Shopping list sidebar component.
"""

import streamlit as st
from typing import Any, Callable


def render_shopping_list_sidebar(
    api_url: str,
    item_count: int,
    on_reload: Callable[[], Any],
):
    """
    Render the connection info sidebar.

    Args:
        api_url: Items API base URL
        item_count: Number of items currently loaded
        on_reload: Callback to fetch the list again
    """
    with st.sidebar:
        st.markdown("### Items API")
        st.caption(api_url)
        st.markdown("---")

        st.markdown(f"{item_count} items loaded")
        if st.button("Reload List", use_container_width=True):
            on_reload()
            st.rerun()
