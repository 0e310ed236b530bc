"""
Edge-TTS speech output.

Synthesizes each utterance to MP3 with edge-tts and holds it until the UI
plays it. The browser does the actual playback, so "playing" here means
handing the audio over exactly once through take_pending().

speak() only records the text. Synthesis is a network call, so it happens
when the UI collects the audio, never while the navigator is handling a
command.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Optional

from models.user_profile import DEFAULT_VOICE_NAME, DEFAULT_VOICE_RATE
from services.audio_service import AudioService
from services.speech.base import SpeechOutput

logger = logging.getLogger(__name__)


@dataclass
class Utterance:
    """One message, synthesized on first use."""
    text: str
    voice: str = DEFAULT_VOICE_NAME
    rate: str = DEFAULT_VOICE_RATE
    audio: Optional[bytes] = None
    synthesized: bool = False
    paused: bool = False
    delivered: bool = False


class EdgeSpeechOutput(SpeechOutput):
    """SpeechOutput backed by edge-tts, holding at most one utterance."""

    def __init__(
        self,
        audio: Optional[AudioService] = None,
        voice: str = DEFAULT_VOICE_NAME,
        rate: str = DEFAULT_VOICE_RATE,
    ):
        self.audio = audio or AudioService()
        self.voice = voice
        self.rate = rate
        self._current: Optional[Utterance] = None
        self._lock = threading.Lock()

    @property
    def current(self) -> Optional[Utterance]:
        return self._current

    def speak(self, text: str) -> None:
        with self._lock:
            self._current = Utterance(text=text, voice=self.voice, rate=self.rate)

    def pause(self) -> None:
        with self._lock:
            if self._current is not None:
                self._current.paused = True

    def resume(self) -> None:
        with self._lock:
            if self._current is not None and self._current.paused:
                self._current.paused = False
                # Offer it to the player again so playback can continue
                self._current.delivered = False

    def cancel_all(self) -> None:
        with self._lock:
            self._current = None

    def take_pending(self) -> Optional[Utterance]:
        """Return the current utterance if it still needs playing, once."""
        with self._lock:
            utterance = self._current
            if utterance is None or utterance.paused or utterance.delivered:
                return None
            utterance.delivered = True
        return self._synthesize(utterance)

    def current_audio(self) -> Optional[bytes]:
        """Audio of the current utterance, or None if there is none or it's paused."""
        with self._lock:
            utterance = self._current
            if utterance is None or utterance.paused:
                return None
        return self._synthesize(utterance).audio

    def _synthesize(self, utterance: Utterance) -> Utterance:
        if not utterance.synthesized:
            utterance.audio = self.audio.text_to_speech(
                utterance.text,
                voice=utterance.voice,
                rate=utterance.rate,
            )
            utterance.synthesized = True
            if utterance.audio is None:
                logger.warning("No audio synthesized; message will only be shown")
        return utterance
