"""
Microphone speech input for running the assistant on a machine with a mic.

Each start_continuous() call listens for one phrase on a background
thread, reports it, then emits END. The VoiceSession restarts listening
after END for as long as the cooking session is active, which gives
continuous hands-free listening.
"""

import logging
import threading
from typing import Callable, Optional

import speech_recognition as sr

from models.recognition import RecognitionEvent, NO_SPEECH, AUDIO_CAPTURE
from services.audio_service import AudioService, DEFAULT_LANGUAGE
from services.speech.base import SpeechInput

logger = logging.getLogger(__name__)


class MicrophoneSpeechInput(SpeechInput):
    """SpeechInput reading the default microphone through SpeechRecognition."""

    def __init__(
        self,
        audio: Optional[AudioService] = None,
        microphone_factory: Callable[[], sr.Microphone] = sr.Microphone,
        language: str = DEFAULT_LANGUAGE,
        listen_timeout: Optional[float] = None,
        phrase_time_limit: Optional[float] = 15.0,
    ):
        super().__init__()
        self.audio = audio or AudioService()
        self.microphone_factory = microphone_factory
        self.language = language
        self.listen_timeout = listen_timeout
        self.phrase_time_limit = phrase_time_limit
        self._thread: Optional[threading.Thread] = None
        self._stopped = True
        self._lock = threading.Lock()

    @staticmethod
    def is_available() -> bool:
        """Check for PyAudio and at least one input device."""
        try:
            return bool(sr.Microphone.list_microphone_names())
        except (AttributeError, OSError) as e:
            # SpeechRecognition raises AttributeError when PyAudio is missing
            logger.info(f"Microphone input unavailable: {e}")
            return False

    @property
    def is_listening(self) -> bool:
        with self._lock:
            return self._thread is not None and not self._stopped

    def start_continuous(self) -> None:
        with self._lock:
            self._stopped = False
            if self._thread is not None:
                return
            self._thread = threading.Thread(
                target=self._listen_once,
                name="microphone-listener",
                daemon=True,
            )
            self._thread.start()

    def stop(self) -> None:
        # A blocking listen() can't be interrupted; its result is dropped instead
        with self._lock:
            self._stopped = True

    def _listen_once(self) -> None:
        event = None
        try:
            with self.microphone_factory() as source:
                captured = self.audio.recognizer.listen(
                    source,
                    timeout=self.listen_timeout,
                    phrase_time_limit=self.phrase_time_limit,
                )
            event = self.audio.recognize_audio(captured, self.language)
        except sr.WaitTimeoutError:
            event = RecognitionEvent.failure(NO_SPEECH)
        except OSError as e:
            logger.error(f"Microphone capture failed: {e}")
            event = RecognitionEvent.failure(AUDIO_CAPTURE)
        finally:
            with self._lock:
                self._thread = None
                stopped = self._stopped

            if event is not None and not stopped:
                self._emit(event)
            self._emit(RecognitionEvent.end())
