"""
Sidebar components for different views.
"""

from views.components.sidebar.cooking import render_cooking_sidebar
from views.components.sidebar.saved import render_saved_recipes_sidebar

__all__ = [
    "render_cooking_sidebar",
    "render_saved_recipes_sidebar",
]
