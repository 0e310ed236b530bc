"""
Recipe Service - handles recipe catalog access and search.

This service is pure Python with no Streamlit dependencies.
"""

from typing import Iterable, Optional

from models.catalog import SEED_RECIPES
from models.recipe import Recipe


class RecipeService:
    """Service for recipe catalog access."""

    def __init__(self, recipes: Optional[Iterable[Recipe]] = None):
        self._recipes = list(recipes) if recipes is not None else list(SEED_RECIPES)

    def get_all(self) -> list[Recipe]:
        """Get every recipe in the catalog."""
        return list(self._recipes)

    def get_by_id(self, recipe_id: int) -> Optional[Recipe]:
        """Get a recipe by ID."""
        return next((r for r in self._recipes if r.id == recipe_id), None)

    def search(self, query: str) -> list[Recipe]:
        """
        Find recipes that use any of the given ingredients.

        The query is a comma-separated list of ingredient terms. A recipe
        matches when any term appears (case-insensitively) inside any of
        its ingredient names, so "tomato" also matches "tomatoes".
        A blank query returns the whole catalog.
        """
        if not query or not query.strip():
            return self.get_all()

        terms = [t.strip() for t in query.lower().split(",")]
        terms = [t for t in terms if t]
        if not terms:
            return self.get_all()

        return [
            r for r in self._recipes
            if any(term in ing.lower() for term in terms for ing in r.ingredients)
        ]

