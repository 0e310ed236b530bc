"""
Push-to-talk speech input for browser-hosted sessions.

The browser records a short clip (Streamlit's audio input widget) and the
clip is transcribed server-side. Each clip counts as one utterance: after
reporting it the input emits END and waits to be restarted.
"""

import logging
from typing import Optional

from models.recognition import RecognitionEvent
from services.audio_service import AudioService, DEFAULT_LANGUAGE
from services.speech.base import SpeechInput

logger = logging.getLogger(__name__)


class PushToTalkInput(SpeechInput):
    """SpeechInput fed by recorded clips."""

    def __init__(self, audio: Optional[AudioService] = None, language: str = DEFAULT_LANGUAGE):
        super().__init__()
        self.audio = audio or AudioService()
        self.language = language
        self._listening = False

    @property
    def is_listening(self) -> bool:
        return self._listening

    def start_continuous(self) -> None:
        self._listening = True

    def stop(self) -> None:
        self._listening = False

    def accept_clip(self, audio_bytes: bytes) -> bool:
        """
        Transcribe a recorded clip and report it.

        Returns:
            False if the input wasn't listening and the clip was dropped
        """
        if not self._listening:
            logger.debug("Dropping clip recorded while not listening")
            return False

        self._listening = False
        self._emit(self.audio.recognize(audio_bytes, self.language))
        self._emit(RecognitionEvent.end())
        return True
