"""
Base classes for speech input and output collaborators.

The navigator only talks to these interfaces, so it never depends on a
particular speech technology. Speech inputs report what they hear as
RecognitionEvents to a single listener (normally a VoiceSession).
"""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from models.recognition import RecognitionEvent


EventListener = Callable[[RecognitionEvent], None]


class SpeechOutput(ABC):
    """
    A single, exclusive text-to-speech channel.

    At most one utterance exists at a time: speak() replaces it, and
    pause()/resume() only affect that utterance.
    """

    @abstractmethod
    def speak(self, text: str) -> None:
        """Cancel the current utterance and start speaking text."""
        pass

    @abstractmethod
    def pause(self) -> None:
        """Suspend the current utterance without discarding it."""
        pass

    @abstractmethod
    def resume(self) -> None:
        """Continue a suspended utterance."""
        pass

    @abstractmethod
    def cancel_all(self) -> None:
        """Discard the current utterance."""
        pass


class SpeechInput(ABC):
    """
    A speech-to-text stream.

    start_continuous() begins listening; the input emits RESULT or ERROR
    events and finally an END event when it stops on its own. Restarting
    after END is the listener's job.
    """

    def __init__(self):
        self._listener: Optional[EventListener] = None

    def set_listener(self, listener: Optional[EventListener]) -> None:
        """Route recognition events to listener."""
        self._listener = listener

    def _emit(self, event: RecognitionEvent) -> None:
        if self._listener is not None:
            self._listener(event)

    @property
    @abstractmethod
    def is_listening(self) -> bool:
        """Whether the input is currently capturing speech."""
        pass

    @abstractmethod
    def start_continuous(self) -> None:
        """Begin listening. Does nothing if already listening."""
        pass

    @abstractmethod
    def stop(self) -> None:
        """Stop listening. Safe to call when not listening."""
        pass
