"""
Recognition events - what a speech input reports to its listener.
"""

from dataclasses import dataclass
from typing import Optional


RESULT = "result"
ERROR = "error"
END = "end"

# Recognition error kinds
NO_SPEECH = "no-speech"
AUDIO_CAPTURE = "audio-capture"
NETWORK = "network"
NOT_ALLOWED = "not-allowed"


@dataclass(frozen=True)
class RecognitionEvent:
    """Something the speech input observed."""
    kind: str  # RESULT, ERROR or END
    transcript: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def result(cls, transcript: str) -> "RecognitionEvent":
        return cls(kind=RESULT, transcript=transcript)

    @classmethod
    def failure(cls, error: str) -> "RecognitionEvent":
        return cls(kind=ERROR, error=error)

    @classmethod
    def end(cls) -> "RecognitionEvent":
        return cls(kind=END)
