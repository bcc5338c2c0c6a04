"""Credential manager for the admin account."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy import select
from sqlalchemy.orm import Session

from microblog.core import security
from microblog.core.errors import AuthError, UserNotFoundError, ValidationError, store_errors
from microblog.core.settings import settings
from microblog.models.user import User

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass(frozen=True)
class ProfileChange:
    """Requested credential change as submitted by the admin."""

    current_username: str | None
    current_password: str | None
    new_username: str | None = None
    new_password: str | None = None
    confirm_password: str | None = None


class CredentialManager:
    """Service verifying and updating admin credentials."""

    def __init__(self, db: Session, min_password_length: int | None = None) -> None:
        self.db = db
        self.min_password_length = min_password_length or settings.min_password_length

    def get_by_username(self, username: str) -> User | None:
        """Return the user with ``username`` if one exists."""
        with store_errors(self.db, "Failed to look up user"):
            return self.db.scalars(select(User).where(User.username == username)).first()

    def authenticate(self, username: str | None, password: str | None) -> User:
        """Verify a login attempt.

        The same error is raised for an unknown user and a wrong password so
        callers cannot probe for valid usernames.

        Raises:
            AuthError: If the credentials do not match.
        """
        if not username or not password:
            raise AuthError(INVALID_CREDENTIALS)

        user = self.get_by_username(username)
        if user is None or not security.verify_password(password, user.password_hash):
            logger.warning("Failed login attempt")
            raise AuthError(INVALID_CREDENTIALS)

        logger.info("Admin %s logged in", user.username)
        return user

    def update_profile(self, change: ProfileChange) -> str:
        """Apply a username and/or password change.

        Every check runs before anything is written, so a rejected request
        leaves the stored credentials untouched.

        Args:
            change: Current credentials plus the requested new values.

        Returns:
            The effective username after the update.

        Raises:
            ValidationError: If required fields are missing, the new username
                is taken, or the new password is unacceptable.
            UserNotFoundError: If no user has the current username.
            AuthError: If the current password is wrong.
        """
        if not change.current_username or not change.current_password:
            raise ValidationError("Current username and password are required")

        user = self.get_by_username(change.current_username)
        if user is None:
            raise UserNotFoundError("User not found")

        if not security.verify_password(change.current_password, user.password_hash):
            raise AuthError("Current password is incorrect")

        new_username = (change.new_username or "").strip() or None
        rename = new_username is not None and new_username != change.current_username
        if rename and self.get_by_username(new_username) is not None:
            raise ValidationError("Username already exists")

        if change.new_password:
            self._check_new_password(change.new_password, change.confirm_password)

        with store_errors(self.db, "Failed to update profile"):
            if rename:
                user.username = new_username
            if change.new_password:
                user.password_hash = security.hash_password(change.new_password)
            self.db.commit()

        effective = new_username if rename else change.current_username
        logger.info(
            "Profile updated for %s (username changed: %s, password changed: %s)",
            effective,
            rename,
            bool(change.new_password),
        )
        return effective

    def _check_new_password(self, new_password: str, confirm_password: str | None) -> None:
        if confirm_password is not None and confirm_password != new_password:
            raise ValidationError("New passwords do not match")
        if len(new_password) < self.min_password_length:
            raise ValidationError(
                f"Password must be at least {self.min_password_length} characters long"
            )

    def count_users(self) -> int:
        """Return the number of login identities."""
        with store_errors(self.db, "Failed to fetch stats"):
            return self.db.query(User).count()
