"""Key derivation for Encrypto envelopes."""
import os

from argon2.exceptions import HashingError
from argon2.low_level import hash_secret_raw

from encrypto.core.exceptions import InvalidInputError, ResourceExhaustionError
from .params import CURRENT_VERSION, get_suite


def generate_salt(version: int = CURRENT_VERSION) -> bytes:
    """Return a cryptographically secure random salt sized for ``version``."""
    return os.urandom(get_suite(version).salt_len)


def derive_key(password, salt: bytes, version: int = CURRENT_VERSION) -> bytes:
    """
    Derive a symmetric key from a password using Argon2id.

    The costs come from the cipher suite of ``version`` and are never taken
    from the caller. An empty password is valid. Returns raw key bytes.
    """
    suite = get_suite(version)

    if isinstance(password, str):
        password = password.encode("utf-8")
    if not isinstance(password, (bytes, bytearray)):
        raise InvalidInputError("Password must be str or bytes")
    if not isinstance(salt, (bytes, bytearray)) or len(salt) != suite.salt_len:
        raise InvalidInputError(f"Salt must be {suite.salt_len} bytes")

    try:
        return hash_secret_raw(
            secret=bytes(password),
            salt=bytes(salt),
            time_cost=suite.time_cost,
            memory_cost=suite.memory_cost,
            parallelism=suite.parallelism,
            hash_len=suite.key_len,
            type=suite.kdf_type,
            version=suite.kdf_version,
        )
    except MemoryError as exc:
        raise ResourceExhaustionError("Not enough memory for key derivation") from exc
    except HashingError as exc:
        if "memory" in str(exc).lower():
            raise ResourceExhaustionError("Not enough memory for key derivation") from exc
        raise
