"""Domain service: User lifecycle.

Deliberately simple validation and state flips.  Invalid input is
reported through ``None`` / ``False`` return values, never exceptions.
"""

from __future__ import annotations

from orderpricing.domain.model.user import User

MIN_USERNAME_LENGTH = 3
MAX_USERNAME_LENGTH = 50


class UserService:

    def is_valid_email(self, email: str | None) -> bool:
        if email is None or not email.strip():
            return False
        return "@" in email and "." in email

    def is_valid_username(self, username: str | None) -> bool:
        if username is None or not username.strip():
            return False
        return MIN_USERNAME_LENGTH <= len(username.strip()) <= MAX_USERNAME_LENGTH

    def create_user(self, username: str | None, email: str | None) -> User | None:
        """Return a new active user, or ``None`` if either field is invalid."""
        if not self.is_valid_username(username):
            return None
        if not self.is_valid_email(email):
            return None
        return User(username=username.strip(), email=email.strip())

    def update_email(self, user: User | None, new_email: str | None) -> bool:
        if user is None or not self.is_valid_email(new_email):
            return False
        user.email = new_email.strip()
        return True

    def activate(self, user: User | None) -> bool:
        if user is None:
            return False
        user.active = True
        return True

    def deactivate(self, user: User | None) -> bool:
        if user is None:
            return False
        user.active = False
        return True

    def is_active(self, user: User | None) -> bool:
        if user is None:
            return False
        return user.active
