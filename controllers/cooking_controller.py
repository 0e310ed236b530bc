"""
Cooking Controller - manages the hands-free cooking session and its state.

This controller handles:
- Session state initialization and management
- Choosing a speech input the host supports
- Wiring the navigator, speech I/O and voice session together
- Voice preferences (persisted to the profile store for signed-in users)
"""

import logging
from typing import Callable, MutableMapping, Optional

import streamlit as st
from sqlalchemy.exc import SQLAlchemyError

from config.auth import UserContext, get_current_user
from config.settings import Settings, get_settings
from models.navigator import CommandResult, NavigatorState
from models.recipe import Recipe
from models.user_profile import rate_to_slider_value, slider_value_to_rate
from services.audio_service import AudioService
from services.profile_service import ProfileService
from services.recipe_service import RecipeService
from services.speech.base import SpeechInput
from services.speech.edge_output import EdgeSpeechOutput
from services.speech.microphone import MicrophoneSpeechInput
from services.speech.push_to_talk import PushToTalkInput
from services.voice_navigator import VoiceNavigator
from services.voice_session import VoiceSession

logger = logging.getLogger(__name__)

MICROPHONE_MODE = "microphone"


def _new_cooking_state(settings: Settings) -> dict:
    return {
        "recipe_id": None,
        "session": None,
        "speech_output": None,
        "speech_input": None,
        "last_result": None,
        "audio_key": 0,
        "voice_name": settings.voice_name,
        "voice_rate": settings.voice_rate,
        "preferences_loaded": False,
    }


def leave_cooking(state: Optional[MutableMapping] = None) -> None:
    """
    Tear down any running cooking session.

    Called by every page other than the cooking page, so leaving the
    recipe view always stops listening and cancels speech.
    """
    state = state if state is not None else st.session_state
    cooking = state.get("cooking")
    if not cooking or cooking.get("session") is None:
        return
    cooking["session"].close()
    cooking["session"] = None
    cooking["speech_input"] = None
    logger.info("Left the recipe view; cooking session closed")


class CookingController:
    """Controller for hands-free cooking."""

    def __init__(
        self,
        state: Optional[MutableMapping] = None,
        recipes: Optional[RecipeService] = None,
        audio: Optional[AudioService] = None,
        profiles: Optional[ProfileService] = None,
        settings: Optional[Settings] = None,
        user_resolver: Callable[[], Optional[UserContext]] = get_current_user,
        hands_free_supported: Optional[bool] = None,
    ):
        self.state = state if state is not None else st.session_state
        self.settings = settings or get_settings()
        self.recipes = recipes or RecipeService()
        self.audio = audio or AudioService()
        self._profiles = profiles
        self._user_resolver = user_resolver
        self._hands_free_supported = hands_free_supported
        self._init_session_state()
        self._load_user_preferences()

    @property
    def profiles(self) -> ProfileService:
        if self._profiles is None:
            self._profiles = ProfileService()
        return self._profiles

    @property
    def _cooking(self) -> dict:
        return self.state["cooking"]

    def _init_session_state(self):
        """Initialize session state if not already set."""
        if "cooking" not in self.state:
            self.state["cooking"] = _new_cooking_state(self.settings)

    def _load_user_preferences(self):
        """Load voice preferences from the profile store once per session."""
        if self._cooking.get("preferences_loaded"):
            return
        self._cooking["preferences_loaded"] = True

        user = self._user_resolver()
        if not user:
            return

        try:
            voice = self.profiles.get_profile(user.user_id).voice
        except SQLAlchemyError as e:
            logger.warning(f"Could not load voice preferences, using defaults: {e}")
            return

        self._cooking["voice_name"] = voice.name
        self._cooking["voice_rate"] = voice.rate

    def _save_voice_preferences(self):
        """Save voice preferences for signed-in users."""
        user = self._user_resolver()
        if not user:
            return

        try:
            self.profiles.update_voice(
                user.user_id,
                self._cooking["voice_name"],
                self._cooking["voice_rate"],
            )
        except SQLAlchemyError as e:
            # Preferences are non-critical
            logger.warning(f"Could not save voice preferences: {e}")

    # Recipe selection
    def get_recipes(self) -> list[Recipe]:
        return self.recipes.get_all()

    def open_recipe(self, recipe_id: int) -> Optional[Recipe]:
        """
        Show a recipe. Opening a different recipe ends any running session.

        Returns:
            The recipe, or None if the ID is unknown
        """
        recipe = self.recipes.get_by_id(recipe_id)
        if recipe is None:
            return None

        if self._cooking["recipe_id"] != recipe_id:
            self.stop_cooking()
            self._cooking["last_result"] = None
        self._cooking["recipe_id"] = recipe_id
        return recipe

    def get_recipe(self) -> Optional[Recipe]:
        recipe_id = self._cooking["recipe_id"]
        return self.recipes.get_by_id(recipe_id) if recipe_id is not None else None

    # Session state accessors
    def _session(self) -> Optional[VoiceSession]:
        return self._cooking["session"]

    def get_state(self) -> NavigatorState:
        session = self._session()
        return session.state if session else NavigatorState()

    def is_cooking(self) -> bool:
        return self.get_state().active

    def is_push_to_talk(self) -> bool:
        return isinstance(self._cooking["speech_input"], PushToTalkInput)

    def is_microphone_session(self) -> bool:
        return isinstance(self._cooking["speech_input"], MicrophoneSpeechInput)

    def is_listening(self) -> bool:
        speech_input = self._cooking["speech_input"]
        return speech_input is not None and speech_input.is_listening

    def get_last_result(self) -> Optional[CommandResult]:
        return self._cooking["last_result"]

    def get_audio_key(self) -> int:
        """Get current audio input key for widget uniqueness."""
        return self._cooking["audio_key"]

    def increment_audio_key(self):
        """Increment audio key to reset widget."""
        self._cooking["audio_key"] += 1

    def get_pending_audio(self) -> Optional[bytes]:
        """Get the utterance audio that still needs playing, once."""
        speech_output = self._cooking["speech_output"]
        if speech_output is None:
            return None
        utterance = speech_output.take_pending()
        return utterance.audio if utterance else None

    def get_playback_audio(self) -> Optional[bytes]:
        """
        Get the current utterance audio, held until it is replaced, paused
        or cancelled.

        Used when a background listener drives the session and the page
        refreshes on a timer, so a refresh doesn't cut playback short.
        """
        speech_output = self._cooking["speech_output"]
        if speech_output is None:
            return None
        return speech_output.current_audio()

    # Session lifecycle
    def _create_speech_input(self) -> Optional[SpeechInput]:
        """Pick the speech input this host supports, if any."""
        if self.settings.voice_input_mode == MICROPHONE_MODE:
            if not MicrophoneSpeechInput.is_available():
                return None
            return MicrophoneSpeechInput(
                audio=self.audio,
                language=self.settings.speech_language,
                listen_timeout=self.settings.listen_timeout,
                phrase_time_limit=self.settings.phrase_time_limit,
            )

        supported = self._hands_free_supported
        if supported is None:
            supported = hasattr(st, "audio_input")
        if not supported:
            return None
        return PushToTalkInput(audio=self.audio, language=self.settings.speech_language)

    def start_cooking(self) -> tuple[bool, Optional[str]]:
        """
        Start hands-free cooking for the open recipe.

        Returns (success, error_message)
        """
        recipe = self.get_recipe()
        if recipe is None:
            return False, "Pick a recipe first."

        self.stop_cooking()

        speech_output = EdgeSpeechOutput(
            audio=self.audio,
            voice=self._cooking["voice_name"],
            rate=self._cooking["voice_rate"],
        )
        speech_input = self._create_speech_input()
        session = VoiceSession(VoiceNavigator(speech_output, speech_input))
        session.start(recipe)

        if isinstance(speech_input, MicrophoneSpeechInput):
            session.start_worker()

        self._cooking.update({
            "session": session,
            "speech_output": speech_output,
            "speech_input": speech_input,
            "last_result": None,
        })
        return True, None

    def stop_cooking(self):
        """Stop hands-free cooking. Safe to call when nothing is running."""
        leave_cooking(self.state)

    # Commands
    def _drain(self) -> Optional[CommandResult]:
        session = self._session()
        results = session.drain()
        if results:
            self._cooking["last_result"] = results[-1]
        return self._cooking["last_result"] if results else None

    def send_command(self, text: str) -> Optional[CommandResult]:
        """
        Send a typed or button command as if it had been spoken.

        Returns:
            The result, or None if no session is running or the command is
            queued for the background listener
        """
        session = self._session()
        if session is None or not text:
            return None

        session.submit_transcript(text)
        if self.is_microphone_session():
            return None
        return self._drain()

    def handle_voice_clip(self, audio_bytes: bytes) -> tuple[bool, Optional[str]]:
        """
        Process a push-to-talk recording.

        Returns (success, error_message)
        """
        speech_input = self._cooking["speech_input"]
        if not isinstance(speech_input, PushToTalkInput):
            return False, "Voice clips aren't used in this mode."

        if not speech_input.accept_clip(audio_bytes):
            return False, "Not listening right now."

        self._drain()
        return True, None

    # Voice preferences
    def get_available_voices(self) -> dict[str, str]:
        return self.audio.get_available_voices()

    def get_voice_name(self) -> str:
        return self._cooking["voice_name"]

    def set_voice_name(self, voice_name: str):
        """Set the voice name and save it."""
        self._cooking["voice_name"] = voice_name
        if self._cooking["speech_output"] is not None:
            self._cooking["speech_output"].voice = voice_name
        self._save_voice_preferences()

    def get_voice_rate(self) -> str:
        return self._cooking["voice_rate"]

    def set_voice_rate(self, rate: str):
        """Set the voice rate and save it."""
        self._cooking["voice_rate"] = rate
        if self._cooking["speech_output"] is not None:
            self._cooking["speech_output"].rate = rate
        self._save_voice_preferences()

    def get_speed_slider_value(self) -> int:
        return rate_to_slider_value(self.get_voice_rate())

    def set_speed_from_slider(self, slider_value: int):
        self.set_voice_rate(slider_value_to_rate(slider_value))
