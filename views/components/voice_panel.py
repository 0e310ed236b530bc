"""
Voice Panel Component - voice and speed settings for spoken steps.
"""

import streamlit as st
from typing import Callable

# Speed labels for the slider
SPEED_LABELS = {
    -2: "Slower",
    -1: "Slow",
    0: "Normal",
    1: "Fast",
    2: "Faster",
}


def render_voice_settings(
    voices: dict[str, str],
    current_voice: str,
    current_speed: int,
    on_voice_change: Callable[[str], None],
    on_speed_change: Callable[[int], None],
):
    """
    Render the voice selector and speed slider.

    Args:
        voices: Dict of {voice_id: display_name}
        current_voice: Currently selected voice ID
        current_speed: Current speed slider value (-2 to +2)
        on_voice_change: Callback when voice changes (receives voice_id)
        on_speed_change: Callback when speed changes (receives slider value)
    """
    st.markdown("**Voice**")
    voice_ids = list(voices.keys())
    voice_names = list(voices.values())

    current_idx = voice_ids.index(current_voice) if current_voice in voice_ids else 0

    selected_name = st.selectbox(
        "Select voice:",
        options=voice_names,
        index=current_idx,
        label_visibility="collapsed",
        key="voice_panel_voice"
    )

    selected_voice_id = voice_ids[voice_names.index(selected_name)]
    if selected_voice_id != current_voice:
        on_voice_change(selected_voice_id)

    st.markdown("**Speed**")
    selected_speed = st.slider(
        "Playback speed",
        min_value=min(SPEED_LABELS),
        max_value=max(SPEED_LABELS),
        value=current_speed,
        step=1,
        format="%d",
        label_visibility="collapsed",
        key="voice_panel_speed",
    )
    st.caption(f"Speed: {SPEED_LABELS.get(selected_speed, 'Normal')}")

    if selected_speed != current_speed:
        on_speed_change(selected_speed)
