"""
Cooking page sidebar component.
"""

import streamlit as st
from typing import Callable

from views.components.voice_panel import render_voice_settings


def render_cooking_sidebar(
    voices: dict[str, str],
    current_voice: str,
    current_speed: int,
    on_voice_change: Callable[[str], None],
    on_speed_change: Callable[[int], None],
    on_back: Callable[[], None],
):
    """
    Render the cooking page sidebar.

    Args:
        voices: Dict of {voice_id: display_name}
        current_voice: Currently selected voice ID
        current_speed: Current speed slider value
        on_voice_change: Callback when voice changes
        on_speed_change: Callback when speed changes
        on_back: Callback to return to the recipe search
    """
    with st.sidebar:
        render_voice_settings(
            voices=voices,
            current_voice=current_voice,
            current_speed=current_speed,
            on_voice_change=on_voice_change,
            on_speed_change=on_speed_change,
        )

        st.markdown("---")

        if st.button("← Back to recipes", type="secondary", use_container_width=True):
            on_back()
