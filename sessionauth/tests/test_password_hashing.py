from __future__ import annotations

import string

import pytest

from sessionauth.application.services.password_hashing import HmacPasswordHasher


@pytest.fixture()
def hasher() -> HmacPasswordHasher:
    return HmacPasswordHasher()


def test_salt_is_256_random_bytes_as_hex(hasher: HmacPasswordHasher) -> None:
    salt = hasher.generate_salt()

    assert len(salt) == 512
    assert set(salt) <= set(string.hexdigits.lower())


def test_salts_are_unique(hasher: HmacPasswordHasher) -> None:
    salts = {hasher.generate_salt() for _ in range(20)}
    assert len(salts) == 20


def test_hash_is_deterministic(hasher: HmacPasswordHasher) -> None:
    salt = hasher.generate_salt()
    assert hasher.hash("pw1", salt) == hasher.hash("pw1", salt)


def test_hash_never_equals_plaintext(hasher: HmacPasswordHasher) -> None:
    salt = hasher.generate_salt()
    digest = hasher.hash("pw1", salt)

    assert digest != "pw1"
    assert len(digest) == 64


@pytest.mark.parametrize(
    ("first", "second"),
    [("pw1", "pw2"), ("secret", "Secret"), ("", " "), ("pässwört", "passwort")],
)
def test_different_passwords_give_different_digests(
    hasher: HmacPasswordHasher, first: str, second: str
) -> None:
    salt = hasher.generate_salt()
    assert hasher.hash(first, salt) != hasher.hash(second, salt)


def test_same_password_with_different_salts_differs(hasher: HmacPasswordHasher) -> None:
    assert hasher.hash("pw1", hasher.generate_salt()) != hasher.hash(
        "pw1", hasher.generate_salt()
    )


def test_verify(hasher: HmacPasswordHasher) -> None:
    salt = hasher.generate_salt()
    digest = hasher.hash("pw1", salt)

    assert hasher.verify("pw1", salt, digest) is True
    assert hasher.verify("pw2", salt, digest) is False
    assert hasher.verify("pw1", hasher.generate_salt(), digest) is False


def test_custom_salt_size() -> None:
    hasher = HmacPasswordHasher(salt_bytes=16)
    assert len(hasher.generate_salt()) == 32
