"""Unit tests for the User aggregate."""

import pytest

from ims.domain.exceptions import ValidationError
from ims.domain.model.user import User
from ims.domain.model.value_objects import Email


def _user() -> User:
    return User.create("Ana", "Hoxha", Email.create("ana@example.com"), "hash")


class TestUser:

    def test_create(self):
        u = _user()
        assert u.full_name == "Ana Hoxha"
        assert u.email.value == "ana@example.com"
        assert u.is_active
        assert u.created_at == u.updated_at

    def test_empty_hash_rejected(self):
        with pytest.raises(ValidationError, match="Password hash"):
            User.create("Ana", "Hoxha", Email.create("ana@example.com"), " ")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="First name"):
            User.create("", "Hoxha", Email.create("ana@example.com"), "hash")

    def test_update_information(self):
        u = _user()
        u.update_information("Ana", "Dervishi", Email.create("ana.d@example.com"))
        assert u.full_name == "Ana Dervishi"
        assert u.email.value == "ana.d@example.com"

    def test_change_password(self):
        u = _user()
        u.change_password("other")
        assert u.password_hash == "other"

    def test_deactivate_is_idempotent(self):
        u = _user()
        u.deactivate()
        stamp = u.updated_at
        u.deactivate()
        assert not u.is_active
        assert u.updated_at == stamp

    def test_activate(self):
        u = _user()
        u.deactivate()
        u.activate()
        assert u.is_active
