"""
Controllers layer - orchestration and session state management.
"""

from controllers.cooking_controller import CookingController, leave_cooking
from controllers.profile_controller import ProfileController

__all__ = ["CookingController", "ProfileController", "leave_cooking"]
