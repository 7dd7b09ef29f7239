"""Tests for the UserDispatcher shim."""

import pytest

from orderpricing.application.user_dispatch import UserDispatcher
from orderpricing.domain.exceptions import ValidationError
from orderpricing.domain.model.user import User
from orderpricing.domain.service.user_service import UserService


def _dispatcher() -> UserDispatcher:
    return UserDispatcher(UserService())


class TestNullGuards:

    def test_create_user(self):
        assert _dispatcher().create_user(None, "a@b.c") is None
        assert _dispatcher().create_user("alice", None) is None

    def test_update_email(self):
        assert not _dispatcher().update_email(None, "a@b.c")
        assert not _dispatcher().update_email(User(user_id=1), None)

    def test_state_flips(self):
        d = _dispatcher()
        assert not d.activate(None)
        assert not d.deactivate(None)
        assert not d.is_active(None)

    def test_validators(self):
        assert not _dispatcher().validate_email(None)
        assert not _dispatcher().validate_username(None)


class TestPassthrough:

    def test_create_and_toggle(self):
        d = _dispatcher()
        user = d.create_user("alice", "alice@example.com")
        assert d.is_active(user)
        assert d.deactivate(user)
        assert not d.is_active(user)
        assert d.update_email(user, "new@example.com")
        assert user.email == "new@example.com"

    def test_validators(self):
        assert _dispatcher().validate_email("alice@example.com")
        assert _dispatcher().validate_username("alice")

    def test_service_required(self):
        with pytest.raises(ValidationError, match="cannot be None"):
            UserDispatcher(None)
