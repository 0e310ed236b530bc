"""
Reusable UI components.
"""

from views.components.audio import render_mic_button, render_audio_playback
from views.components.cooking_panel import (
    render_status,
    render_command_buttons,
    render_go_to_step,
    render_step_list,
)
from views.components.grocery_stats import render_grocery_stats
from views.components.recipe_card import render_recipe_card, render_recipe_grid
from views.components.voice_panel import render_voice_settings

# Sidebar components
from views.components.sidebar import (
    render_cooking_sidebar,
    render_saved_recipes_sidebar,
)

__all__ = [
    # Audio
    "render_mic_button",
    "render_audio_playback",
    # Cooking
    "render_status",
    "render_command_buttons",
    "render_go_to_step",
    "render_step_list",
    "render_voice_settings",
    # Recipes
    "render_recipe_card",
    "render_recipe_grid",
    # Grocery
    "render_grocery_stats",
    # Sidebar
    "render_cooking_sidebar",
    "render_saved_recipes_sidebar",
]
