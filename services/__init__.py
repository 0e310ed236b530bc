"""
Services layer - pure business logic, no Streamlit dependencies.
"""

from services.audio_service import AudioService
from services.recipe_service import RecipeService
from services.profile_service import ProfileService
from services.voice_navigator import VoiceNavigator
from services.voice_session import VoiceSession

__all__ = [
    "AudioService",
    "RecipeService",
    "ProfileService",
    "VoiceNavigator",
    "VoiceSession",
]
