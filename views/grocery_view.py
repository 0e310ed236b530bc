"""
Grocery View - the signed-in user's grocery list.

This view handles:
- Checking items off while shopping
- Renaming and removing items
- Clearing everything already checked
"""

from typing import Optional

import streamlit as st

from config.auth import require_auth
from controllers.cooking_controller import leave_cooking
from controllers.profile_controller import ProfileController
from models.user_profile import GroceryItem
from views.components.grocery_stats import render_grocery_stats


class GroceryView:
    """View for grocery list UI."""

    def __init__(self):
        self.user = require_auth()
        self.controller = ProfileController(self.user)

    def render(self):
        """Main render method."""
        leave_cooking()
        st.title("Grocery List")

        profile, error = self.controller.get_profile()
        if error:
            st.error(error)
            return

        items = profile.grocery_list
        if not items:
            st.info("Your grocery list is empty. Add a recipe's ingredients from its page!")
            return

        render_grocery_stats(len(items), sum(1 for item in items if item.checked))
        st.markdown("---")

        for index, item in enumerate(items):
            self._render_item(index, item)

        st.markdown("---")
        if st.button("Clear checked items", disabled=not any(item.checked for item in items)):
            self._report(self.controller.clear_checked_items())
            st.rerun()

    def _render_item(self, index: int, item: GroceryItem):
        """Render one row: checkbox, editable name and remove button."""
        check_key = f"grocery_check_{index}"
        name_key = f"grocery_name_{index}"

        # Widgets always show the stored item; a refused edit snaps back
        st.session_state[check_key] = item.checked
        st.session_state[name_key] = item.name

        check_col, name_col, remove_col = st.columns([0.5, 6, 1])

        with check_col:
            st.checkbox(
                "Done",
                key=check_key,
                on_change=self._on_toggle,
                args=(index,),
                label_visibility="collapsed",
            )

        with name_col:
            st.text_input(
                "Item",
                key=name_key,
                on_change=self._on_rename,
                args=(index, name_key),
                label_visibility="collapsed",
            )

        with remove_col:
            if st.button("🗑️", key=f"grocery_remove_{index}", help="Remove item"):
                self._report(self.controller.remove_grocery_item(index))
                st.rerun()

    def _on_toggle(self, index: int):
        self._report(self.controller.toggle_grocery_item(index))

    def _on_rename(self, index: int, name_key: str):
        self._report(self.controller.rename_grocery_item(index, st.session_state[name_key]))

    @staticmethod
    def _report(outcome: tuple[bool, Optional[str]]):
        success, error = outcome
        if not success:
            st.toast(error)
