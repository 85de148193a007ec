"""Unit tests for the Key Derivation Function (KDF) module."""

from unittest.mock import patch

import pytest
from argon2.exceptions import HashingError
from argon2.low_level import Type, hash_secret_raw

from encrypto.core.exceptions import (
    InvalidInputError,
    ResourceExhaustionError,
    UnsupportedVersionError,
)
from encrypto.security.kdf import generate_salt, derive_key


def test_generate_salt_defaults():
    """Salt for the current version is 16 random bytes."""
    salt = generate_salt()
    assert isinstance(salt, bytes)
    assert len(salt) == 16


def test_generate_salt_is_random():
    assert generate_salt() != generate_salt()


def test_generate_salt_unknown_version():
    with pytest.raises(UnsupportedVersionError):
        generate_salt(version=9)


def test_derive_key_matches_argon2id_with_version_2_costs():
    """
    The real version-2 parameters: Argon2id v1.3, t=4, m=64 MiB, p=2, 32 bytes.
    """
    salt = b"\x01" * 16
    key = derive_key("correct horse battery staple", salt)

    expected = hash_secret_raw(
        secret=b"correct horse battery staple",
        salt=salt,
        time_cost=4,
        memory_cost=65536,
        parallelism=2,
        hash_len=32,
        type=Type.ID,
        version=0x13,
    )
    assert key == expected
    assert len(key) == 32


def test_derive_key_deterministic(fast_kdf):
    salt = generate_salt()
    assert derive_key("password123", salt) == derive_key("password123", salt)


def test_derive_key_str_and_bytes_agree(fast_kdf):
    """Passing the same password as string or bytes yields the same key."""
    salt = generate_salt()
    assert derive_key("pässword", salt) == derive_key("pässword".encode("utf-8"), salt)


def test_derive_key_differs_by_salt(fast_kdf):
    assert derive_key("pw", b"\x00" * 16) != derive_key("pw", b"\xff" * 16)


def test_derive_key_empty_password_allowed(fast_kdf):
    key = derive_key("", generate_salt())
    assert len(key) == 32


@pytest.mark.parametrize("salt", [b"", b"short", b"\x00" * 17, None])
def test_derive_key_rejects_bad_salt(salt):
    with pytest.raises(InvalidInputError):
        derive_key("pw", salt)


def test_derive_key_rejects_non_text_password():
    with pytest.raises(InvalidInputError):
        derive_key(None, b"\x00" * 16)


def test_derive_key_memory_error_is_resource_exhaustion():
    with patch("encrypto.security.kdf.hash_secret_raw", side_effect=MemoryError):
        with pytest.raises(ResourceExhaustionError):
            derive_key("pw", b"\x00" * 16)


def test_derive_key_argon2_allocation_failure_is_resource_exhaustion():
    err = HashingError("Memory allocation error")
    with patch("encrypto.security.kdf.hash_secret_raw", side_effect=err):
        with pytest.raises(ResourceExhaustionError):
            derive_key("pw", b"\x00" * 16)


def test_derive_key_other_argon2_errors_propagate():
    err = HashingError("Threads exceeded")
    with patch("encrypto.security.kdf.hash_secret_raw", side_effect=err):
        with pytest.raises(HashingError):
            derive_key("pw", b"\x00" * 16)
