"""
User Profile Repository - Data access for user profile documents.

This repository handles all database operations related to user profiles,
providing typed access through Pydantic models.
"""

import json
from datetime import datetime
from typing import Any, Optional

from sqlalchemy.orm import Session

from models.entities import UserProfile
from models.user_profile import UserProfileData


class UserProfileRepository:
    """Repository for user profile database operations."""

    def __init__(self, db: Session):
        """Initialize with a database session."""
        self.db = db

    def get(self, user_id: str) -> UserProfileData:
        """
        Get a user's profile, returning defaults if none is stored.

        Args:
            user_id: The sign-in provider's user ID

        Returns:
            UserProfileData with the user's data or defaults
        """
        record = self.get_record(user_id)
        if record:
            return UserProfileData.from_json(record.Document)
        return UserProfileData()

    def get_record(self, user_id: str) -> Optional[UserProfile]:
        """Get the raw database record for a user's profile."""
        return self.db.query(UserProfile).filter(
            UserProfile.UserId == user_id
        ).first()

    def save(self, user_id: str, profile: UserProfileData) -> UserProfile:
        """
        Save a whole profile document (upsert).

        Args:
            user_id: The sign-in provider's user ID
            profile: The profile data to save

        Returns:
            The saved UserProfile entity
        """
        return self._write(user_id, profile.to_json())

    def merge(self, user_id: str, updates: dict[str, Any]) -> UserProfileData:
        """
        Replace only the given top-level fields of a user's profile.

        Fields not named in updates are left exactly as stored, including
        ones this version of the app doesn't know about.

        Args:
            user_id: The sign-in provider's user ID
            updates: Field name -> new value (models or plain data)

        Returns:
            The merged UserProfileData
        """
        record = self.get_record(user_id)
        try:
            document = json.loads(record.Document) if record and record.Document else {}
        except json.JSONDecodeError:
            document = {}

        # Round-trip through the model so values are validated and serializable
        validated = UserProfileData.model_validate({**document, **updates})
        dumped = validated.model_dump(mode="json")
        for field in updates:
            document[field] = dumped[field]

        self._write(user_id, json.dumps(document))
        return UserProfileData.model_validate(document)

    def delete(self, user_id: str) -> bool:
        """
        Delete a user's profile.

        Returns:
            True if deleted, False if not found
        """
        result = self.db.query(UserProfile).filter(
            UserProfile.UserId == user_id
        ).delete()
        self.db.commit()
        return result > 0

    def _write(self, user_id: str, document: str) -> UserProfile:
        record = self.get_record(user_id)

        if record:
            record.Document = document
            record.UpdatedAt = datetime.utcnow()
        else:
            record = UserProfile(UserId=user_id, Document=document)
            self.db.add(record)

        self.db.commit()
        self.db.refresh(record)
        return record
