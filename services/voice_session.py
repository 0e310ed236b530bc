"""
Voice Session - connects a speech input to the navigator.

Speech inputs report from whatever thread they run on (a microphone
thread, a Streamlit script run). Every event goes through one queue and
is handled by a single consumer at a time, so the navigator never sees
two transcripts at once.

The session also keeps listening going: after each END event it restarts
the speech input, but only while the navigator is still active. Once the
session stops nothing restarts, so no listener is left dangling.
"""

import logging
import queue
import threading
from typing import Optional

from models.navigator import CommandResult, NavigatorState
from models.recipe import Recipe
from models.recognition import RecognitionEvent, RESULT, ERROR, END
from services.speech.base import SpeechInput
from services.voice_navigator import VoiceNavigator

logger = logging.getLogger(__name__)

_SHUTDOWN = object()


class VoiceSession:
    """Serializes recognition events into a VoiceNavigator."""

    def __init__(self, navigator: VoiceNavigator, speech_input: Optional[SpeechInput] = None):
        self.navigator = navigator
        self.speech_input = speech_input if speech_input is not None else navigator.speech_input
        self._events: queue.Queue = queue.Queue()
        self._consumer_lock = threading.Lock()
        self._worker: Optional[threading.Thread] = None
        self._closed = False

        if self.speech_input is not None:
            self.speech_input.set_listener(self.submit)

    @property
    def state(self) -> NavigatorState:
        return self.navigator.state

    @property
    def pending(self) -> int:
        """Number of events waiting to be handled."""
        return self._events.qsize()

    def start(self, recipe: Recipe) -> NavigatorState:
        """Start guided cooking for a recipe."""
        self._closed = False
        return self.navigator.start(recipe.steps, title=recipe.title)

    # Producers
    def submit(self, event: RecognitionEvent) -> None:
        """Queue an event. Safe to call from any thread."""
        self._events.put(event)

    def submit_transcript(self, transcript: str) -> None:
        self.submit(RecognitionEvent.result(transcript))

    def submit_error(self, kind: str) -> None:
        self.submit(RecognitionEvent.failure(kind))

    # Consumers
    def drain(self) -> list[CommandResult]:
        """
        Handle every queued event on the calling thread.

        Returns:
            Results of the transcripts handled, in order
        """
        results = []
        while True:
            try:
                event = self._events.get_nowait()
            except queue.Empty:
                return results
            if event is _SHUTDOWN:
                continue
            result = self._handle(event)
            if result is not None:
                results.append(result)

    def start_worker(self) -> None:
        """Handle events on a background thread until close()."""
        if self._worker is not None and self._worker.is_alive():
            return
        self._worker = threading.Thread(
            target=self._run_worker,
            name="voice-session",
            daemon=True,
        )
        self._worker.start()

    def _run_worker(self) -> None:
        while True:
            event = self._events.get()
            if event is _SHUTDOWN:
                return
            try:
                self._handle(event)
            except Exception:
                # Keep listening; one bad event mustn't end the session
                logger.exception("Failed to handle recognition event")

    def _handle(self, event: RecognitionEvent) -> Optional[CommandResult]:
        with self._consumer_lock:
            if event.kind == RESULT:
                result = self.navigator.handle_command(event.transcript or "")
                logger.debug(f"{event.transcript!r} -> {result.outcome.value}")
                return result

            if event.kind == ERROR:
                self.navigator.report_recognition_error(event.error or "unknown")
                return None

            if event.kind == END:
                self._restart_listening()
                return None

            logger.warning(f"Ignoring unknown recognition event kind {event.kind!r}")
            return None

    def _restart_listening(self) -> None:
        state = self.navigator.state
        if not state.active or not state.hands_free or self.speech_input is None:
            return
        try:
            self.speech_input.start_continuous()
        except OSError as e:
            logger.error(f"Could not restart speech input: {e}")

    # Teardown
    def close(self) -> None:
        """Stop the session and the worker. Safe to call repeatedly."""
        if self._closed:
            return
        self._closed = True

        with self._consumer_lock:
            self.navigator.stop()

        worker = self._worker
        if worker is not None and worker.is_alive():
            self._events.put(_SHUTDOWN)
            if worker is not threading.current_thread():
                worker.join(timeout=1.0)
        self._worker = None

    def __enter__(self) -> "VoiceSession":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
