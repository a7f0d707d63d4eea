"""
Controllers layer - orchestration and session state management.
"""

from controllers.shopping_controller import ShoppingController, ShoppingState, ShoppingStats

__all__ = ["ShoppingController", "ShoppingState", "ShoppingStats"]
