"""
Saved recipes sidebar component.
"""

import streamlit as st
from typing import Callable

from models.recipe import Recipe


def render_saved_recipes_sidebar(bookmarks: list[Recipe], on_open: Callable[[Recipe], None]):
    """
    Render the user's bookmarked recipes.

    Args:
        bookmarks: Saved recipes, oldest first
        on_open: Callback when a saved recipe is opened
    """
    with st.sidebar:
        st.markdown("### Saved Recipes")

        if not bookmarks:
            st.caption("Save recipes to find them here.")
            return

        for recipe in bookmarks:
            if st.button(recipe.title, key=f"saved_{recipe.id}", use_container_width=True):
                on_open(recipe)
