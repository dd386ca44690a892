import pytest

from moviejournal.config.settings import settings
from moviejournal.shared.core.exceptions import InvalidInputError
from moviejournal.shared.utils.security import SecurityUtils


def test_hash_then_verify():
    digest = SecurityUtils.hash_password("password123")

    assert digest != "password123"
    assert SecurityUtils.verify_password("password123", digest)
    assert not SecurityUtils.verify_password("password124", digest)


def test_hashing_is_salted_per_call():
    first = SecurityUtils.hash_password("password123")
    second = SecurityUtils.hash_password("password123")

    assert first != second
    assert SecurityUtils.verify_password("password123", first)
    assert SecurityUtils.verify_password("password123", second)


@pytest.mark.parametrize("plain", [None, "", "   "])
def test_hash_rejects_blank_input(plain):
    with pytest.raises(InvalidInputError) as exc_info:
        SecurityUtils.hash_password(plain)

    assert exc_info.value.error_code == "INVALID_INPUT"
    assert isinstance(exc_info.value, ValueError)


def test_verify_rejects_missing_digest():
    with pytest.raises(InvalidInputError):
        SecurityUtils.verify_password("password123", None)


def test_verify_none_plaintext_is_false():
    digest = SecurityUtils.hash_password("password123")
    assert SecurityUtils.verify_password(None, digest) is False


@pytest.mark.parametrize("digest", ["not-a-hash", "", "$2b$04$tooshort"])
def test_verify_malformed_digest_is_false(digest):
    assert SecurityUtils.verify_password("password123", digest) is False


def test_looks_like_digest():
    digest = SecurityUtils.hash_password("password123")

    assert SecurityUtils.looks_like_digest(digest)
    assert not SecurityUtils.looks_like_digest("password123")
    assert not SecurityUtils.looks_like_digest(None)
    assert not SecurityUtils.looks_like_digest("$1$" + "x" * 57)


def test_work_factor_comes_from_settings():
    digest = SecurityUtils.hash_password("password123")

    assert SecurityUtils.work_factor() == settings.BCRYPT_ROUNDS
    assert digest[4:7] == f"{settings.BCRYPT_ROUNDS:02d}$"
