"""
Profile Controller - grocery list, bookmarks and meal plan for the signed-in user.

Store failures never reach the views as exceptions: every write returns
(success, message) so the view can show a short notification instead.
"""

import logging
from datetime import date, timedelta
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError

from config.auth import UserContext
from models.recipe import Recipe
from models.user_profile import UserProfileData
from services.profile_service import ProfileService

logger = logging.getLogger(__name__)

SYNC_ERROR = "Couldn't sync with your profile. Please try again."


def date_key(day: date) -> str:
    """Meal plan key for a day."""
    return day.isoformat()


class ProfileController:
    """Controller for per-user profile features."""

    def __init__(self, user: UserContext, profiles: Optional[ProfileService] = None):
        self.user = user
        self.profiles = profiles or ProfileService()

    def get_profile(self) -> tuple[UserProfileData, Optional[str]]:
        """
        Load the user's profile.

        Returns (profile, error_message) - an empty profile on failure
        """
        try:
            return self.profiles.get_profile(self.user.user_id), None
        except SQLAlchemyError as e:
            logger.error(f"Profile load failed for {self.user.user_id}: {e}")
            return UserProfileData(), SYNC_ERROR

    def _write(self, action, *args) -> tuple[bool, Optional[str]]:
        try:
            action(self.user.user_id, *args)
        except SQLAlchemyError as e:
            logger.error(f"Profile write failed for {self.user.user_id}: {e}")
            return False, SYNC_ERROR
        return True, None

    # Grocery list
    def add_recipe_to_grocery_list(self, recipe: Recipe) -> tuple[bool, str]:
        """Add a recipe's missing ingredients. Returns (success, notification)."""
        try:
            added = self.profiles.add_to_grocery_list(self.user.user_id, recipe.ingredients)
        except SQLAlchemyError as e:
            logger.error(f"Grocery list update failed for {self.user.user_id}: {e}")
            return False, SYNC_ERROR

        if added:
            return True, f"{added} new item(s) added to your grocery list!"
        return True, "All ingredients are already on your list."

    def toggle_grocery_item(self, index: int) -> tuple[bool, Optional[str]]:
        return self._write(self.profiles.toggle_grocery_item, index)

    def rename_grocery_item(self, index: int, name: str) -> tuple[bool, Optional[str]]:
        if not name.strip():
            return False, "Item name can't be empty."
        return self._write(self.profiles.rename_grocery_item, index, name.strip())

    def remove_grocery_item(self, index: int) -> tuple[bool, Optional[str]]:
        return self._write(self.profiles.remove_grocery_item, index)

    def clear_checked_items(self) -> tuple[bool, Optional[str]]:
        return self._write(self.profiles.clear_checked_items)

    # Bookmarks
    def toggle_bookmark(self, recipe: Recipe) -> tuple[bool, str]:
        """Returns (success, notification)."""
        try:
            saved = self.profiles.toggle_bookmark(self.user.user_id, recipe)
        except SQLAlchemyError as e:
            logger.error(f"Bookmark update failed for {self.user.user_id}: {e}")
            return False, SYNC_ERROR
        return True, "Recipe saved!" if saved else "Recipe removed from saved."

    # Meal plan
    def plan_meal(self, day: date, recipe: Recipe) -> tuple[bool, Optional[str]]:
        return self._write(self.profiles.plan_meal, date_key(day), recipe)

    def unplan_meal(self, day_key: str, recipe_id: int) -> tuple[bool, Optional[str]]:
        return self._write(self.profiles.unplan_meal, day_key, recipe_id)

    def move_meal(self, from_key: str, to_day: date, recipe_id: int) -> tuple[bool, Optional[str]]:
        try:
            return self._write(self.profiles.move_meal, from_key, date_key(to_day), recipe_id)
        except KeyError:
            return False, "That meal is no longer planned for this day."

    @staticmethod
    def week_of(start: date, profile: UserProfileData) -> list[tuple[date, list[Recipe]]]:
        """The seven days from start, each with its planned recipes."""
        days = [start + timedelta(days=i) for i in range(7)]
        return [(day, profile.meal_plan.get(date_key(day), [])) for day in days]
