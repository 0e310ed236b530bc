"""
Authentication Utilities

The app runs behind a hosting provider's sign-in proxy (Azure Container
Apps Easy Auth). The proxy injects the signed-in user's identity into the
request headers, which Streamlit exposes through st.context.headers.

Headers used:
- X-MS-CLIENT-PRINCIPAL-ID: stable user ID, keys the profile document
- X-MS-CLIENT-PRINCIPAL-NAME: user's principal name (usually the email)
- X-MS-CLIENT-PRINCIPAL: Base64-encoded JSON with the full claim set

For local development set DEV_USER_ID (and optionally DEV_USER_NAME,
DEV_USER_EMAIL) to simulate a signed-in user.
"""

import base64
import json
import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

import streamlit as st

logger = logging.getLogger(__name__)

EMAIL_CLAIM_TYPES = ("email", "preferred_username")


@dataclass
class UserContext:
    """Represents the authenticated user."""
    user_id: str
    name: str
    email: Optional[str] = None


def _email_from_principal(principal_b64: str) -> Optional[str]:
    """Pull the email claim out of the encoded client principal."""
    try:
        principal = json.loads(base64.b64decode(principal_b64).decode("utf-8"))
    except (ValueError, json.JSONDecodeError):
        logger.warning("Ignoring malformed client principal header")
        return None

    for claim in principal.get("claims", []):
        if claim.get("typ") in EMAIL_CLAIM_TYPES:
            return claim.get("val")
    return None


def user_from_headers(headers: Mapping[str, str]) -> Optional[UserContext]:
    """
    Build a UserContext from sign-in proxy headers.

    Args:
        headers: Request headers (lookups are done with lowercase names)

    Returns:
        UserContext if the user ID header is present, None otherwise
    """
    user_id = headers.get("x-ms-client-principal-id")
    if not user_id:
        return None

    name = headers.get("x-ms-client-principal-name")
    principal_b64 = headers.get("x-ms-client-principal")
    email = _email_from_principal(principal_b64) if principal_b64 else None

    return UserContext(
        user_id=user_id,
        name=name or email or "User",
        email=email or name,
    )


def user_from_environment() -> Optional[UserContext]:
    """Build a UserContext from DEV_USER_* variables, if set."""
    user_id = os.environ.get("DEV_USER_ID")
    if not user_id:
        return None
    return UserContext(
        user_id=user_id,
        name=os.environ.get("DEV_USER_NAME", "Dev User"),
        email=os.environ.get("DEV_USER_EMAIL"),
    )


def get_current_user() -> Optional[UserContext]:
    """
    Resolve the signed-in user.

    Returns:
        UserContext if authenticated, None otherwise
    """
    try:
        headers = st.context.headers
    except AttributeError:
        # Older Streamlit versions have no st.context
        headers = None

    if headers:
        user = user_from_headers({k.lower(): v for k, v in headers.items()})
        if user:
            return user

    return user_from_environment()


def require_auth() -> UserContext:
    """
    Require authentication - stops the script run if not signed in.

    Returns:
        UserContext for the authenticated user
    """
    user = get_current_user()

    if not user:
        st.warning("Please sign in to use your grocery list and meal planner.")
        if os.environ.get("STREAMLIT_ENV") == "development":
            with st.expander("Development Mode"):
                st.code(
                    "# Set these environment variables to simulate a user:\n"
                    "export DEV_USER_ID='your-test-user-id'\n"
                    "export DEV_USER_NAME='Test User'\n"
                    "export DEV_USER_EMAIL='test@example.com'",
                    language="bash"
                )
        st.stop()

    return user


def get_user_display_name() -> str:
    """Get the current user's display name, or 'Guest' if not authenticated."""
    user = get_current_user()
    return user.name if user else "Guest"


def is_authenticated() -> bool:
    """Check if a user is currently authenticated."""
    return get_current_user() is not None
