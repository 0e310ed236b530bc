"""
SQLAlchemy ORM Entity Models

The profile store keeps one JSON document per user rather than a table
per feature. Grocery list, bookmarks, meal plan and voice settings are
all fields of that document (see models.user_profile.UserProfileData),
so adding a profile feature never needs a schema migration.
"""

from sqlalchemy import Column, String, DateTime, Text
from sqlalchemy.sql import func

from config.database import Base


class UserProfile(Base):
    """Per-user profile document."""
    __tablename__ = "UserProfiles"

    UserId = Column(String(100), primary_key=True)  # Sign-in provider's user ID
    Document = Column(Text, nullable=False, default="{}")
    CreatedAt = Column(DateTime, nullable=False, server_default=func.now())
    UpdatedAt = Column(DateTime, nullable=False, server_default=func.now())
