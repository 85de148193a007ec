"""Encrypto: password-based encryption of short text messages."""

from encrypto.core.exceptions import (
    EncryptoError,
    InvalidInputError,
    UnsupportedAlgorithmError,
    MalformedEnvelopeError,
    UnsupportedVersionError,
    IntegrityError,
    EncodingError,
    ResourceExhaustionError,
)
from encrypto.core.hashing import hash_text
from encrypto.security.crypto import encrypt, decrypt

__version__ = "2.0.0"

__all__ = [
    "encrypt",
    "decrypt",
    "hash_text",
    "EncryptoError",
    "InvalidInputError",
    "UnsupportedAlgorithmError",
    "MalformedEnvelopeError",
    "UnsupportedVersionError",
    "IntegrityError",
    "EncodingError",
    "ResourceExhaustionError",
]
