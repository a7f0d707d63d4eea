"""
Shopster - Shopping List

Keep a shopping list in sync with the items API: add items, filter by
category, and tick them into the cart as you shop.
"""

import streamlit as st

# Page configuration (must be first Streamlit command)
st.set_page_config(
    page_title="Shopster",
    page_icon="🛒",
    layout="wide"
)

from config import configure_logging
from views.shopping_view import ShoppingView

configure_logging()

view = ShoppingView()
view.render()
