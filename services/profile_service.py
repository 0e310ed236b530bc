"""
Profile Service - grocery list, bookmarks, meal plan and voice settings.

This service is pure Python with no Streamlit dependencies. All of a
user's data lives in one profile document; every write is a merge of
just the field being changed, so features never overwrite each other.

Listeners registered with subscribe() are told about every write, which
lets a UI refresh without polling.
"""

import logging
from contextlib import contextmanager
from typing import Callable, Iterable, Iterator, Optional

from sqlalchemy.orm import Session, sessionmaker

from config.database import ensure_db
from models.recipe import Recipe
from models.repositories.user_profile_repository import UserProfileRepository
from models.user_profile import GroceryItem, UserProfileData, VoicePreferences

logger = logging.getLogger(__name__)

ProfileListener = Callable[[str, UserProfileData], None]


class ProfileService:
    """Service for per-user profile data."""

    def __init__(self, session_factory: Optional[sessionmaker] = None):
        if session_factory is None:
            from config.database import SessionLocal
            session_factory = SessionLocal
        self.session_factory = session_factory
        ensure_db(session_factory.kw.get("bind"))
        self._listeners: list[ProfileListener] = []

    @contextmanager
    def _repository(self) -> Iterator[UserProfileRepository]:
        db: Session = self.session_factory()
        try:
            yield UserProfileRepository(db)
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def subscribe(self, listener: ProfileListener) -> Callable[[], None]:
        """
        Call listener(user_id, profile) after every write.

        Returns:
            A function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe():
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def get_profile(self, user_id: str) -> UserProfileData:
        """Get a user's profile (defaults if they have none yet)."""
        with self._repository() as repo:
            return repo.get(user_id)

    def _merge(self, user_id: str, **updates) -> UserProfileData:
        with self._repository() as repo:
            profile = repo.merge(user_id, updates)
        logger.debug(f"Updated {', '.join(updates)} for user {user_id}")
        for listener in list(self._listeners):
            listener(user_id, profile)
        return profile

    # ==========================================
    # Grocery list
    # ==========================================

    def add_to_grocery_list(self, user_id: str, ingredients: Iterable[str]) -> int:
        """
        Add ingredients that aren't already on the list.

        Matching is case-insensitive, against the list and within the
        ingredients being added.

        Returns:
            Number of items actually added
        """
        items = self.get_profile(user_id).grocery_list
        seen = {item.name.lower() for item in items}

        new_items = []
        for name in ingredients:
            key = name.strip().lower()
            if key and key not in seen:
                seen.add(key)
                new_items.append(GroceryItem(name=name.strip()))

        if new_items:
            self._merge(user_id, grocery_list=items + new_items)
        return len(new_items)

    def rename_grocery_item(self, user_id: str, index: int, name: str) -> UserProfileData:
        """Rename the item at index."""
        items = self.get_profile(user_id).grocery_list
        items[index] = items[index].model_copy(update={"name": name})
        return self._merge(user_id, grocery_list=items)

    def toggle_grocery_item(self, user_id: str, index: int) -> UserProfileData:
        """Flip the checked flag of the item at index."""
        items = self.get_profile(user_id).grocery_list
        items[index] = items[index].model_copy(update={"checked": not items[index].checked})
        return self._merge(user_id, grocery_list=items)

    def remove_grocery_item(self, user_id: str, index: int) -> UserProfileData:
        """Remove the item at index."""
        items = self.get_profile(user_id).grocery_list
        del items[index]
        return self._merge(user_id, grocery_list=items)

    def clear_checked_items(self, user_id: str) -> int:
        """Remove every checked item. Returns how many were removed."""
        items = self.get_profile(user_id).grocery_list
        remaining = [item for item in items if not item.checked]
        removed = len(items) - len(remaining)
        if removed:
            self._merge(user_id, grocery_list=remaining)
        return removed

    # ==========================================
    # Bookmarks
    # ==========================================

    def is_bookmarked(self, user_id: str, recipe_id: int) -> bool:
        return any(r.id == recipe_id for r in self.get_profile(user_id).bookmarks)

    def toggle_bookmark(self, user_id: str, recipe: Recipe) -> bool:
        """
        Bookmark a recipe, or remove the bookmark if it exists.

        Returns:
            True if the recipe is bookmarked afterwards
        """
        bookmarks = self.get_profile(user_id).bookmarks
        remaining = [r for r in bookmarks if r.id != recipe.id]
        bookmarked = len(remaining) == len(bookmarks)
        if bookmarked:
            remaining.append(recipe)
        self._merge(user_id, bookmarks=remaining)
        return bookmarked

    # ==========================================
    # Meal plan
    # ==========================================

    def plan_meal(self, user_id: str, date_key: str, recipe: Recipe) -> UserProfileData:
        """Add a recipe to a day's plan."""
        plan = self.get_profile(user_id).meal_plan
        plan[date_key] = plan.get(date_key, []) + [recipe]
        return self._merge(user_id, meal_plan=plan)

    def unplan_meal(self, user_id: str, date_key: str, recipe_id: int) -> UserProfileData:
        """Remove the first occurrence of a recipe from a day's plan."""
        plan = self.get_profile(user_id).meal_plan
        day = list(plan.get(date_key, []))
        for i, recipe in enumerate(day):
            if recipe.id == recipe_id:
                del day[i]
                break

        if day:
            plan[date_key] = day
        else:
            plan.pop(date_key, None)
        return self._merge(user_id, meal_plan=plan)

    def move_meal(self, user_id: str, from_key: str, to_key: str, recipe_id: int) -> UserProfileData:
        """
        Move a planned recipe to another day.

        Raises:
            KeyError: if the recipe isn't planned on from_key
        """
        plan = self.get_profile(user_id).meal_plan
        day = list(plan.get(from_key, []))
        index = next((i for i, r in enumerate(day) if r.id == recipe_id), None)
        if index is None:
            raise KeyError(f"Recipe {recipe_id} is not planned on {from_key}")

        recipe = day.pop(index)
        if day:
            plan[from_key] = day
        else:
            plan.pop(from_key, None)
        plan[to_key] = plan.get(to_key, []) + [recipe]
        return self._merge(user_id, meal_plan=plan)

    # ==========================================
    # Voice
    # ==========================================

    def update_voice(self, user_id: str, voice_name: str, voice_rate: str) -> UserProfileData:
        """Save the voice used to read steps aloud."""
        return self._merge(user_id, voice=VoicePreferences(name=voice_name, rate=voice_rate))
