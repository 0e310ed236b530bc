"""
Cooking View - recipe details and hands-free guided cooking.

This view handles all rendering for the cooking page.
It delegates business logic to the CookingController.
"""

import streamlit as st

from config.auth import get_current_user
from controllers.cooking_controller import CookingController
from controllers.profile_controller import ProfileController
from models.navigator import NavigatorStatus
from models.recipe import Recipe
from views.home_view import SELECTED_RECIPE_KEY
from views.components.audio import render_mic_button, render_audio_playback
from views.components.cooking_panel import (
    render_status,
    render_command_buttons,
    render_go_to_step,
    render_step_list,
)
from views.components.sidebar import render_cooking_sidebar

HOME_PAGE = "streamlit_app.py"


class CookingView:
    """View for the recipe detail and cooking session UI."""

    def __init__(self):
        self.controller = CookingController()
        self.user = get_current_user()

    def render(self):
        """Main render method - displays the selected recipe."""
        recipe_id = st.session_state.get(SELECTED_RECIPE_KEY)
        recipe = self.controller.open_recipe(recipe_id) if recipe_id is not None else None

        if recipe is None:
            st.title("Cook")
            st.info("Pick a recipe to start cooking.")
            if st.button("Find a recipe →", type="primary"):
                st.switch_page(HOME_PAGE)
            return

        render_cooking_sidebar(
            voices=self.controller.get_available_voices(),
            current_voice=self.controller.get_voice_name(),
            current_speed=self.controller.get_speed_slider_value(),
            on_voice_change=self.controller.set_voice_name,
            on_speed_change=self.controller.set_speed_from_slider,
            on_back=self._go_home,
        )

        self._render_header(recipe)
        st.markdown("---")

        if self.controller.is_microphone_session() and hasattr(st, "fragment"):
            # A background listener changes state between script runs
            st.fragment(run_every="1s")(self._render_session)(recipe)
        else:
            self._render_session(recipe)

    def _go_home(self):
        self.controller.stop_cooking()
        st.switch_page(HOME_PAGE)

    def _render_header(self, recipe: Recipe):
        """Render the recipe's picture, facts and profile actions."""
        image_col, info_col = st.columns([1, 2])

        with image_col:
            if recipe.image:
                st.image(recipe.image, use_container_width=True)

        with info_col:
            st.title(recipe.title)
            st.caption(f"⏱ {recipe.time} min · {recipe.total_steps} steps")
            st.markdown("**Ingredients:** " + ", ".join(recipe.ingredients))

            if self.user:
                self._render_profile_actions(recipe)

    def _render_profile_actions(self, recipe: Recipe):
        profiles = ProfileController(self.user)
        grocery_col, bookmark_col = st.columns(2)

        with grocery_col:
            if st.button("🛒 Add to grocery list", use_container_width=True):
                _, message = profiles.add_recipe_to_grocery_list(recipe)
                st.toast(message)

        with bookmark_col:
            if st.button("🔖 Save / unsave", use_container_width=True):
                _, message = profiles.toggle_bookmark(recipe)
                st.toast(message)

    def _render_session(self, recipe: Recipe):
        """Render the start/stop control, status panel and steps."""
        state = self.controller.get_state()

        if state.active:
            if st.button("Stop Cooking", type="secondary", use_container_width=True):
                self.controller.stop_cooking()
                st.rerun()
        else:
            if st.button("Start Cooking (Hands-Free)", type="primary", use_container_width=True):
                success, error = self.controller.start_cooking()
                if not success:
                    st.error(error)
                st.rerun()

            last = self.controller.get_last_result()
            if last is not None and last.session_ended:
                st.success(last.message)

        if self.controller.is_microphone_session():
            render_audio_playback(self.controller.get_playback_audio())
        else:
            render_audio_playback(self.controller.get_pending_audio())

        if state.active:
            st.markdown("### AI Cooking Assistant")
            render_status(state)
            paused = state.status == NavigatorStatus.PAUSED
            render_command_buttons(self._send_command, paused=paused)
            render_go_to_step(recipe.total_steps, self._send_command, disabled=paused)

            if self.controller.is_push_to_talk() and self.controller.is_listening():
                self._render_push_to_talk()

        render_step_list(recipe.steps, state.step_index if state.active else None)

    def _render_push_to_talk(self):
        clip = render_mic_button(self.controller.get_audio_key(), label="🎤 Tap to say a command")
        if clip:
            with st.spinner("Listening..."):
                success, error = self.controller.handle_voice_clip(clip)
            self.controller.increment_audio_key()
            if not success and error:
                st.warning(error)
            st.rerun()

    def _send_command(self, command: str):
        self.controller.send_command(command)
        st.rerun()
