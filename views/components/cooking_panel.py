"""
Hands-free cooking panel - status line, command buttons and step list.
"""

import streamlit as st
from typing import Callable, Optional

from models.navigator import NavigatorState, NavigatorStatus

COMMAND_BUTTONS = [
    ("⏮ Back", "back"),
    ("🔁 Repeat", "repeat"),
    ("⏭ Next", "next"),
    ("⏸ Pause", "pause"),
    ("▶ Resume", "resume"),
    ("⏹ Stop", "stop"),
]

VOICE_HELP = 'Say: "Next", "Repeat", "Back", "Pause", "Resume", "Go to step [number]", or "Stop".'


def render_status(state: NavigatorState):
    """Render the listening/paused status and the last message."""
    label = "Paused..." if state.status == NavigatorStatus.PAUSED else "Listening..."
    if not state.hands_free:
        label = "Voice off."
    st.info(f"**{label}** {state.last_message}")
    st.caption(VOICE_HELP)


def render_command_buttons(on_command: Callable[[str], None], paused: bool):
    """
    Render on-screen equivalents of the voice commands.

    Args:
        on_command: Callback receiving the command text
        paused: Whether the session is paused (only Resume is enabled)
    """
    cols = st.columns(len(COMMAND_BUTTONS))
    for col, (label, command) in zip(cols, COMMAND_BUTTONS):
        with col:
            disabled = paused and command != "resume"
            if st.button(label, key=f"cmd_{command}", use_container_width=True, disabled=disabled):
                on_command(command)


def render_go_to_step(total_steps: int, on_command: Callable[[str], None], disabled: bool):
    """Render a jump-to-step control."""
    col1, col2 = st.columns([3, 1])
    with col1:
        step = st.number_input(
            "Go to step",
            min_value=1,
            max_value=total_steps,
            value=1,
            step=1,
            disabled=disabled,
        )
    with col2:
        st.markdown("&nbsp;", unsafe_allow_html=True)
        if st.button("Go", use_container_width=True, disabled=disabled, key="cmd_go_to"):
            on_command(f"go to step {int(step)}")


def render_step_list(steps: list[str], current_index: Optional[int]):
    """
    Render the recipe steps, highlighting the current one.

    Args:
        steps: Ordered step texts
        current_index: Index of the active step, or None when not cooking
    """
    st.markdown("### Steps")
    for i, step in enumerate(steps):
        if i == current_index:
            st.success(f"**{i + 1}.** {step}")
        else:
            st.markdown(f"**{i + 1}.** {step}")
