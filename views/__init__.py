"""
Views layer - UI presentation components.
"""

from views.home_view import HomeView
from views.cooking_view import CookingView
from views.grocery_view import GroceryView
from views.planner_view import PlannerView

__all__ = ["HomeView", "CookingView", "GroceryView", "PlannerView"]
