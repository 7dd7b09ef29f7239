"""User dispatch shim: null-guarding passthroughs to the UserService."""

from __future__ import annotations

from orderpricing.domain.exceptions import ValidationError
from orderpricing.domain.model.user import User
from orderpricing.domain.service.user_service import UserService


class UserDispatcher:

    def __init__(self, user_service: UserService) -> None:
        if user_service is None:
            raise ValidationError("UserService cannot be None")
        self._user_service = user_service

    def create_user(self, username: str | None, email: str | None) -> User | None:
        if username is None or email is None:
            return None
        return self._user_service.create_user(username, email)

    def update_email(self, user: User | None, new_email: str | None) -> bool:
        if user is None or new_email is None:
            return False
        return self._user_service.update_email(user, new_email)

    def activate(self, user: User | None) -> bool:
        if user is None:
            return False
        return self._user_service.activate(user)

    def deactivate(self, user: User | None) -> bool:
        if user is None:
            return False
        return self._user_service.deactivate(user)

    def is_active(self, user: User | None) -> bool:
        if user is None:
            return False
        return self._user_service.is_active(user)

    def validate_email(self, email: str | None) -> bool:
        if email is None:
            return False
        return self._user_service.is_valid_email(email)

    def validate_username(self, username: str | None) -> bool:
        if username is None:
            return False
        return self._user_service.is_valid_username(username)
