from datetime import datetime

import pytest

from moviejournal.shared.core.exceptions import InvalidInputError
from moviejournal.shared.entities import User
from moviejournal.shared.utils.security import SecurityUtils


def test_plaintext_password_is_hashed_on_construction():
    user = User("john", "john@x.com", "password123")

    assert user.password != "password123"
    assert user.is_password_hashed()
    assert user.verify_password("password123")
    assert not user.verify_password("wrong-password")
    assert not user.verify_password(None)


def test_hashed_password_is_kept_as_is():
    digest = SecurityUtils.hash_password("password123")
    user = User("john", "john@x.com", digest, password_is_hashed=True)

    assert user.password == digest
    assert user.verify_password("password123")
    assert user.is_valid_password()


def test_defaults():
    user = User("john", "john@x.com", "password123")

    assert user.id is None
    assert user.is_active
    assert user.last_login is None
    assert isinstance(user.created_at, datetime)


@pytest.mark.parametrize("plain", [None, "", "  "])
def test_set_plain_text_password_rejects_blank(plain):
    user = User("john", "john@x.com")

    with pytest.raises(InvalidInputError):
        user.set_plain_text_password(plain)


def test_set_plain_text_password_replaces_digest():
    user = User("john", "john@x.com", "password123")
    old_digest = user.password

    user.set_plain_text_password("another-secret")

    assert user.password != old_digest
    assert user.verify_password("another-secret")


@pytest.mark.parametrize(
    "username, expected",
    [
        ("abc", True),
        ("a" * 50, True),
        ("ab", False),
        ("a" * 51, False),
        ("  ab  ", False),
        ("", False),
        (None, False),
    ],
)
def test_is_valid_username(username, expected):
    assert User(username, "john@x.com", "password123").is_valid_username() is expected


@pytest.mark.parametrize(
    "email, expected",
    [
        ("john@x.com", True),
        ("first.last@mail.example.org", True),
        ("johnx.com", False),
        ("john@@x.com", False),
        ("jo@hn@x.com", False),
        ("@x.com", False),
        ("john@", False),
        ("john@com", False),
        ("jo.hn@com", False),
        (None, False),
    ],
)
def test_is_valid_email(email, expected):
    assert User("john", email, "password123").is_valid_email() is expected


@pytest.mark.parametrize("password, expected", [("123456", True), ("12345", False)])
def test_is_valid_password_checks_plaintext_length(password, expected):
    assert User("john", "john@x.com", password).is_valid_password() is expected


def test_is_valid_user_needs_every_field():
    assert User("john", "john@x.com", "password123").is_valid_user()
    assert not User("jo", "john@x.com", "password123").is_valid_user()
    assert not User("john", "john.x.com", "password123").is_valid_user()
    assert not User("john", "john@x.com", "short").is_valid_user()
    assert not User("john", "john@x.com").is_valid_user()


def test_update_last_login():
    user = User("john", "john@x.com", "password123")
    user.update_last_login()

    assert user.last_login is not None


def test_activate_and_deactivate_only_toggle_the_flag():
    user = User("john", "john@x.com", "password123")
    digest = user.password

    user.deactivate()
    assert user.is_active is False
    user.activate()
    assert user.is_active is True
    assert user.password == digest


def test_equality_is_username_and_email():
    a = User("john", "john@x.com", "password123")
    b = User("john", "john@x.com", "different-password", id=9)
    c = User("john", "other@x.com", "password123")

    assert a == b
    assert hash(a) == hash(b)
    assert a != c
