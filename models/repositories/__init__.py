"""
Repositories - Data access layer for database operations.
"""

from models.repositories.user_profile_repository import UserProfileRepository

__all__ = ["UserProfileRepository"]
