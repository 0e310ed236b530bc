"""
Speech input/output collaborators for hands-free cooking.

Available inputs:
- PushToTalkInput: browser-recorded clips (Streamlit audio input)
- MicrophoneSpeechInput: the server machine's microphone

Available outputs:
- EdgeSpeechOutput: edge-tts neural voices
"""

from models.recognition import (
    RecognitionEvent,
    NO_SPEECH,
    AUDIO_CAPTURE,
    NETWORK,
    NOT_ALLOWED,
)
from services.speech.base import SpeechInput, SpeechOutput
from services.speech.edge_output import EdgeSpeechOutput, Utterance
from services.speech.microphone import MicrophoneSpeechInput
from services.speech.push_to_talk import PushToTalkInput

__all__ = [
    "RecognitionEvent",
    "SpeechInput",
    "SpeechOutput",
    "NO_SPEECH",
    "AUDIO_CAPTURE",
    "NETWORK",
    "NOT_ALLOWED",
    "EdgeSpeechOutput",
    "Utterance",
    "MicrophoneSpeechInput",
    "PushToTalkInput",
]
