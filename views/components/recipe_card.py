"""
Recipe card component for search results and saved recipes.
"""

import streamlit as st
from typing import Callable

from models.recipe import Recipe


def render_recipe_card(recipe: Recipe, on_open: Callable[[Recipe], None], key_prefix: str = "card"):
    """
    Render one recipe as a card with an Open button.

    Args:
        recipe: The recipe to show
        on_open: Callback when the recipe is opened
        key_prefix: Prefix keeping button keys unique per section
    """
    with st.container(border=True):
        if recipe.image:
            st.image(recipe.image, use_container_width=True)
        st.markdown(f"#### {recipe.title}")
        st.caption(f"⏱ {recipe.time} min · {recipe.total_steps} steps")
        st.markdown(" ".join(f"`#{ing}`" for ing in recipe.ingredients))
        if st.button("Open recipe", key=f"{key_prefix}_{recipe.id}", use_container_width=True):
            on_open(recipe)


def render_recipe_grid(recipes: list[Recipe], on_open: Callable[[Recipe], None], columns: int = 3):
    """Render recipes as a grid of cards."""
    cols = st.columns(columns)
    for i, recipe in enumerate(recipes):
        with cols[i % columns]:
            render_recipe_card(recipe, on_open)
