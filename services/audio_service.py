"""
Audio Service - handles speech recognition and text-to-speech.

This service is pure Python with no Streamlit dependencies.
Uses SpeechRecognition (Google Web Speech) for transcription and
edge-tts for high-quality neural text-to-speech.
"""

import asyncio
import tempfile
import os
import logging
from typing import Optional

import speech_recognition as sr
import edge_tts

from models.user_profile import (
    VOICE_OPTIONS,
    DEFAULT_VOICE_NAME,
    DEFAULT_VOICE_RATE,
)
from models.recognition import (
    RecognitionEvent,
    NO_SPEECH,
    AUDIO_CAPTURE,
    NETWORK,
)

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en-US"


class AudioService:
    """Service for audio transcription and text-to-speech."""

    def __init__(self, recognizer: Optional[sr.Recognizer] = None):
        self.recognizer = recognizer or sr.Recognizer()

    def recognize_audio(
        self,
        audio_data: sr.AudioData,
        language: str = DEFAULT_LANGUAGE
    ) -> RecognitionEvent:
        """
        Transcribe captured audio with Google Speech Recognition.

        Args:
            audio_data: Audio captured by SpeechRecognition
            language: BCP-47 language tag

        Returns:
            A RESULT event with the transcript, or an ERROR event
        """
        try:
            text = self.recognizer.recognize_google(audio_data, language=language)
        except sr.UnknownValueError:
            logger.debug("No intelligible speech in audio")
            return RecognitionEvent.failure(NO_SPEECH)
        except sr.RequestError as e:
            logger.error(f"Speech recognition service error: {e}")
            return RecognitionEvent.failure(NETWORK)

        return RecognitionEvent.result(text)

    def recognize(self, audio_bytes: bytes, language: str = DEFAULT_LANGUAGE) -> RecognitionEvent:
        """
        Transcribe a recorded clip.

        Args:
            audio_bytes: Raw audio data (WAV format)
            language: BCP-47 language tag

        Returns:
            A RESULT event with the transcript, or an ERROR event
        """
        if not audio_bytes:
            return RecognitionEvent.failure(NO_SPEECH)

        temp_path = None
        try:
            # SpeechRecognition reads clips from files
            with tempfile.NamedTemporaryFile(suffix=".wav", delete=False) as f:
                f.write(audio_bytes)
                temp_path = f.name

            with sr.AudioFile(temp_path) as source:
                audio_data = self.recognizer.record(source)

        except (ValueError, OSError) as e:
            logger.warning(f"Could not read recorded audio: {e}")
            return RecognitionEvent.failure(AUDIO_CAPTURE)
        finally:
            # Always clean up temp file
            if temp_path and os.path.exists(temp_path):
                os.unlink(temp_path)

        return self.recognize_audio(audio_data, language)

    async def _text_to_speech_async(
        self,
        text: str,
        voice: str = DEFAULT_VOICE_NAME,
        rate: str = DEFAULT_VOICE_RATE
    ) -> Optional[bytes]:
        """
        Async implementation of text-to-speech using edge-tts.

        Returns:
            MP3 audio bytes, or None if TTS failed
        """
        try:
            communicate = edge_tts.Communicate(text, voice, rate=rate)
            audio_bytes = b""
            async for chunk in communicate.stream():
                if chunk["type"] == "audio":
                    audio_bytes += chunk["data"]
            return audio_bytes if audio_bytes else None
        except Exception as e:
            logger.error(f"Edge-TTS error: {e}")
            return None

    def text_to_speech(
        self,
        text: str,
        voice: str = DEFAULT_VOICE_NAME,
        rate: str = DEFAULT_VOICE_RATE
    ) -> Optional[bytes]:
        """
        Convert text to speech audio using edge-tts.

        Args:
            text: Text to convert
            voice: Edge-TTS voice ID (e.g., 'en-US-AriaNeural')
            rate: Speech rate (e.g., '+20%', '-10%')

        Returns:
            MP3 audio bytes, or None if TTS failed
        """
        try:
            return asyncio.run(self._text_to_speech_async(text, voice, rate))
        except RuntimeError as e:
            # asyncio.run refuses to nest inside a running event loop
            logger.error(f"TTS error: {e}")
            return None

    @staticmethod
    def get_available_voices() -> dict[str, str]:
        """Get available voice options as {voice_id: display_name}."""
        return VOICE_OPTIONS.copy()
