"""
User Profile - Pydantic models for typed JSON access.

These models define the structure of the profile document stored
per user in the UserProfiles table.
"""

import json

from pydantic import BaseModel, Field

from models.recipe import Recipe


# Available edge-tts voices for English (US, UK, Ireland)
VOICE_OPTIONS = {
    "en-US-AriaNeural": "Aria (US, Female)",
    "en-US-GuyNeural": "Guy (US, Male)",
    "en-US-JennyNeural": "Jenny (US, Female)",
    "en-US-ChristopherNeural": "Christopher (US, Male)",
    "en-GB-SoniaNeural": "Sonia (UK, Female)",
    "en-GB-RyanNeural": "Ryan (UK, Male)",
    "en-IE-EmilyNeural": "Emily (Ireland, Female)",
    "en-IE-ConnorNeural": "Connor (Ireland, Male)",
}

DEFAULT_VOICE_NAME = "en-US-AriaNeural"
DEFAULT_VOICE_RATE = "+0%"

# Slider value -> edge-tts rate
SPEED_OPTIONS = {
    -2: "-20%",
    -1: "-10%",
    0: "+0%",
    1: "+10%",
    2: "+20%",
}


class GroceryItem(BaseModel):
    """One line on the grocery list."""
    name: str
    checked: bool = False


class VoicePreferences(BaseModel):
    """Voice used to read recipe steps aloud."""
    name: str = Field(default=DEFAULT_VOICE_NAME, description="Edge-TTS voice ID")
    rate: str = Field(default=DEFAULT_VOICE_RATE, description="Speech rate (e.g., '+20%')")


class UserProfileData(BaseModel):
    """
    Root profile document.

    meal_plan maps a date key ("YYYY-MM-DD") to the recipes planned
    for that day, in display order.
    """
    grocery_list: list[GroceryItem] = Field(default_factory=list)
    bookmarks: list[Recipe] = Field(default_factory=list)
    meal_plan: dict[str, list[Recipe]] = Field(default_factory=dict)
    voice: VoicePreferences = Field(default_factory=VoicePreferences)

    @classmethod
    def from_json(cls, json_str: str) -> "UserProfileData":
        """Parse a profile from JSON, with defaults for missing fields."""
        try:
            data = json.loads(json_str) if json_str else {}
            return cls.model_validate(data)
        except (json.JSONDecodeError, ValueError):
            return cls()

    def to_json(self) -> str:
        """Serialize the profile to a JSON string."""
        return self.model_dump_json()


def rate_to_slider_value(rate: str) -> int:
    """Convert edge-tts rate string to slider value."""
    for slider_val, rate_str in SPEED_OPTIONS.items():
        if rate_str == rate:
            return slider_val
    return 0


def slider_value_to_rate(slider_val: int) -> str:
    """Convert slider value to edge-tts rate string."""
    return SPEED_OPTIONS.get(slider_val, DEFAULT_VOICE_RATE)
