"""
Home View - find a recipe by the ingredients you have.
"""

import streamlit as st

from config.auth import get_current_user
from controllers.cooking_controller import leave_cooking
from controllers.profile_controller import ProfileController
from models.recipe import Recipe
from services.recipe_service import RecipeService
from views.components.recipe_card import render_recipe_grid
from views.components.sidebar import render_saved_recipes_sidebar

SELECTED_RECIPE_KEY = "selected_recipe_id"
COOK_PAGE = "pages/1_🍳_Cook.py"


def open_recipe_page(recipe: Recipe):
    """Remember the chosen recipe and switch to the cooking page."""
    st.session_state[SELECTED_RECIPE_KEY] = recipe.id
    st.switch_page(COOK_PAGE)


class HomeView:
    """View for the recipe search page."""

    def __init__(self):
        self.recipes = RecipeService()
        self.user = get_current_user()

    def render(self) -> None:
        """Render the home page."""
        leave_cooking()

        st.title("🍳 Recipe Assistant")
        st.markdown("Your smart, hands-free cooking assistant.")

        if self.user:
            self._render_saved_recipes()

        query = st.text_input(
            "What ingredients do you have?",
            placeholder="e.g. tomato, onion, garlic",
            key="ingredient_query",
        )

        results = self.recipes.search(query)
        if not results:
            st.info("No recipes use those ingredients. Try something else!")
            return

        st.markdown(f"### {len(results)} recipe(s)")
        render_recipe_grid(results, on_open=open_recipe_page)

    def _render_saved_recipes(self) -> None:
        profile, error = ProfileController(self.user).get_profile()
        if error:
            st.toast(error)
        render_saved_recipes_sidebar(profile.bookmarks, on_open=open_recipe_page)
