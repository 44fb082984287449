"""Tests for shared/models.py."""

import pytest

from shared.models import User


class TestUser:
    def test_create_user(self):
        """Should create a user with the three identity fields."""
        user = User(id="1", email="student@example.com", name="Alex Student")
        assert user.id == "1"
        assert user.email == "student@example.com"
        assert user.name == "Alex Student"

    def test_user_is_immutable(self):
        """User should be immutable."""
        user = User(id="1", email="student@example.com", name="Alex Student")
        with pytest.raises(Exception):  # Pydantic ValidationError
            user.name = "Someone Else"

    def test_extra_fields_ignored(self):
        """Extra persisted fields (like a stray password) should be dropped."""
        user = User(id="1", email="a@b.c", name="Al", password="secret")
        assert "password" not in user.model_dump()

    def test_missing_field_rejected(self):
        """User should require every identity field."""
        with pytest.raises(Exception):  # Pydantic ValidationError
            User(id="1", email="a@b.c")
