"""
Planner View - a week of planned meals for the signed-in user.
"""

from datetime import date, timedelta

import streamlit as st

from config.auth import require_auth
from controllers.cooking_controller import leave_cooking
from controllers.profile_controller import ProfileController, date_key
from models.recipe import Recipe
from services.recipe_service import RecipeService
from views.home_view import open_recipe_page


class PlannerView:
    """View for meal planning UI."""

    def __init__(self):
        self.user = require_auth()
        self.controller = ProfileController(self.user)
        self.recipes = RecipeService()

    def render(self):
        """Main render method."""
        leave_cooking()
        st.title("Meal Planner")

        profile, error = self.controller.get_profile()
        if error:
            st.error(error)

        start = st.date_input("Week starting", value=date.today(), key="planner_week_start")
        self._render_add_form(start)
        st.markdown("---")

        for day, meals in self.controller.week_of(start, profile):
            self._render_day(day, meals, start)

    def _render_add_form(self, start: date):
        """Pick a recipe and a day of the week to plan it on."""
        recipes = self.recipes.get_all()
        days = [start + timedelta(days=i) for i in range(7)]

        recipe_col, day_col, add_col = st.columns([3, 2, 1])
        with recipe_col:
            recipe = st.selectbox("Recipe", recipes, format_func=lambda r: r.title)
        with day_col:
            day = st.selectbox("Day", days, format_func=lambda d: d.strftime("%A %b %d"))
        with add_col:
            st.write("")
            if st.button("Add", type="primary", use_container_width=True):
                success, error = self.controller.plan_meal(day, recipe)
                if success:
                    st.toast(f"{recipe.title} planned for {day.strftime('%A')}.")
                else:
                    st.toast(error)
                st.rerun()

    def _render_day(self, day: date, meals: list[Recipe], start: date):
        st.markdown(f"#### {day.strftime('%A, %b %d')}")
        if not meals:
            st.caption("Nothing planned.")
            return

        days = [start + timedelta(days=i) for i in range(7)]
        key = date_key(day)

        for position, recipe in enumerate(meals):
            title_col, move_col, cook_col, remove_col = st.columns([4, 2, 1, 1])
            widget_key = f"{key}_{position}_{recipe.id}"

            with title_col:
                st.markdown(f"**{recipe.title}** · {recipe.time} min")

            with move_col:
                move_key = f"move_{widget_key}"
                # Always show the stored day; a failed move snaps back
                st.session_state[move_key] = day
                st.selectbox(
                    "Move to",
                    days,
                    format_func=lambda d: d.strftime("%a"),
                    key=move_key,
                    on_change=self._on_move,
                    args=(key, recipe.id, move_key),
                    label_visibility="collapsed",
                )

            with cook_col:
                if st.button("Cook", key=f"cook_{widget_key}"):
                    open_recipe_page(recipe)

            with remove_col:
                if st.button("🗑️", key=f"remove_{widget_key}", help="Remove from plan"):
                    success, error = self.controller.unplan_meal(key, recipe.id)
                    if not success:
                        st.toast(error)
                    st.rerun()

    def _on_move(self, from_key: str, recipe_id: int, move_key: str):
        success, error = self.controller.move_meal(from_key, st.session_state[move_key], recipe_id)
        if not success:
            st.toast(error)
