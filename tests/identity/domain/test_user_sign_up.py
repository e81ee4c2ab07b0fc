"""Tests for the User aggregate and its sign-up factory."""

from datetime import UTC, datetime

import pytest
from protean.exceptions import ValidationError
from protean.utils import DomainObjects

from storefront.identity.events import UserSignedUp
from storefront.identity.user import User


def _sign_up(**overrides):
    defaults = {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "password": "s3cret",
    }
    defaults.update(overrides)
    return User.sign_up(**defaults)


class TestUserSignUp:
    def test_sign_up_sets_fields(self):
        user = _sign_up()
        assert user.id is not None
        assert user.name == "Ada Lovelace"
        assert user.email == "ada@example.com"
        assert user.created_at is not None

    def test_password_is_kept_as_given(self):
        user = _sign_up(password="  Spaces Kept  ")
        assert user.password == "  Spaces Kept  "

    def test_sign_up_raises_user_signed_up_event(self):
        user = _sign_up()
        assert len(user._events) == 1
        event = user._events[0]
        assert isinstance(event, UserSignedUp)
        assert event.user_id == user.id
        assert event.email == "ada@example.com"
        assert event.signed_up_at is not None

    def test_event_does_not_carry_password(self):
        event = _sign_up()._events[0]
        assert "password" not in event.to_dict()

    def test_name_is_required(self):
        with pytest.raises(ValidationError) as exc:
            _sign_up(name=None)
        assert "name" in exc.value.messages

    def test_email_is_required(self):
        with pytest.raises(ValidationError) as exc:
            _sign_up(email=None)
        assert "email" in exc.value.messages


class TestPasswordMatching:
    def test_exact_password_matches(self):
        assert _sign_up(password="s3cret").password_matches("s3cret") is True

    def test_different_password_does_not_match(self):
        assert _sign_up(password="s3cret").password_matches("S3CRET") is False

    def test_empty_password_does_not_match(self):
        assert _sign_up(password="s3cret").password_matches("") is False


class TestUserSignedUpEvent:
    def test_element_type(self):
        assert UserSignedUp.element_type == DomainObjects.EVENT

    def test_version(self):
        event = UserSignedUp(user_id="u-1", name="Ada", email="ada@example.com", signed_up_at=datetime.now(UTC))
        assert event.__version__ == 1
