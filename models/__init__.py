"""
Models Package - recipe, navigator and profile data structures.
"""

from models.recipe import Recipe
from models.navigator import (
    Command,
    CommandOutcome,
    CommandResult,
    NavigatorState,
    NavigatorStatus,
)
from models.user_profile import GroceryItem, UserProfileData, VoicePreferences

__all__ = [
    "Recipe",
    "Command",
    "CommandOutcome",
    "CommandResult",
    "NavigatorState",
    "NavigatorStatus",
    "GroceryItem",
    "UserProfileData",
    "VoicePreferences",
]
