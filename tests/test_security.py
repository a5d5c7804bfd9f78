from users import security

from .conftest import password_matches


def test_hash_is_salted_and_verifies():
    first = security.hash_password("secret")
    second = security.hash_password("secret")

    assert first != second
    assert password_matches("secret", first)
    assert not password_matches("wrong", first)


def test_garbage_hash_never_matches():
    assert not password_matches("secret", "")
    assert not password_matches("secret", "not-a-bcrypt-hash")


def test_long_passwords_are_accepted():
    password = "p" * 100
    assert password_matches(password, security.hash_password(password))


def test_bytes_past_72_still_change_the_hash():
    prefix = "x" * 72
    stored = security.hash_password(prefix + "-first")

    assert password_matches(prefix + "-first", stored)
    assert not password_matches(prefix + "-second", stored)
    assert not password_matches(prefix, stored)


def test_digest_fits_bcrypt_limit():
    assert len(security.password_digest("é" * 500)) <= 72
