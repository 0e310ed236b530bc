"""
Audio UI components: the push-to-talk recorder and spoken-step playback.
"""

import streamlit as st
from typing import Optional

from views.components.cooking_panel import VOICE_HELP


def render_mic_button(audio_key: int, label: str = "🎤 Tap to Talk") -> Optional[bytes]:
    """
    Render the push-to-talk recorder for one spoken command.

    The widget key changes after every clip, so each recording starts
    from an empty recorder.

    Args:
        audio_key: Clip counter used in the widget key
        label: Label shown on the recorder

    Returns:
        WAV bytes of the recorded command, or None
    """
    clip = st.audio_input(label, key=f"command_clip_{audio_key}", help=VOICE_HELP)
    return clip.getvalue() if clip is not None else None


def render_audio_playback(audio_bytes: Optional[bytes]):
    """Autoplay a spoken message (MP3), if there is one."""
    if audio_bytes:
        st.audio(audio_bytes, format="audio/mp3", autoplay=True)
