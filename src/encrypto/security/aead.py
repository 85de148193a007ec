"""AES-256-GCM seal/open for envelope payloads.

The sealed payload is ``ciphertext || tag`` exactly as AESGCM produces it.
No associated data is bound in version 2.
"""
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from encrypto.core.exceptions import IntegrityError, InvalidInputError
from .params import CURRENT_VERSION, get_suite


def generate_nonce(version: int = CURRENT_VERSION) -> bytes:
    """Return a fresh random nonce; never reuse one under the same key."""
    return os.urandom(get_suite(version).nonce_len)


def _cipher(key: bytes, nonce: bytes, version: int) -> AESGCM:
    suite = get_suite(version)
    if len(key) != suite.key_len:
        raise InvalidInputError(f"Key must be {suite.key_len} bytes")
    if len(nonce) != suite.nonce_len:
        raise InvalidInputError(f"Nonce must be {suite.nonce_len} bytes")
    return AESGCM(key)


def seal(key: bytes, nonce: bytes, plaintext: bytes, version: int = CURRENT_VERSION) -> bytes:
    """Encrypt ``plaintext`` and append the 16-byte authentication tag."""
    return _cipher(key, nonce, version).encrypt(nonce, plaintext, None)


def open_sealed(key: bytes, nonce: bytes, sealed: bytes, version: int = CURRENT_VERSION) -> bytes:
    """
    Verify and decrypt a sealed payload.

    AESGCM checks the tag before releasing any plaintext, so a failure
    never leaks partial output. Wrong key, wrong nonce and tampered bytes
    all surface as the same IntegrityError.
    """
    aead = _cipher(key, nonce, version)
    try:
        return aead.decrypt(nonce, sealed, None)
    except InvalidTag:
        raise IntegrityError("Authentication failed: wrong password or corrupted data") from None
