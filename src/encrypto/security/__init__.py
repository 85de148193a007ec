"""Security helpers: password-based authenticated encryption for Encrypto.

This package provides:
- Argon2id key derivation from a password and per-message salt
- AES-256-GCM sealing with a per-message nonce
- a versioned binary envelope carried as Base64 text

Every call is self-contained; no key material outlives the call that made it.
"""

from .kdf import generate_salt, derive_key
from .aead import generate_nonce, seal, open_sealed
from .envelope import Envelope, encode_envelope, decode_envelope
from .params import CURRENT_VERSION, SUITES, CipherSuite, get_suite
from .crypto import encrypt, decrypt

__all__ = [
    "generate_salt",
    "derive_key",
    "generate_nonce",
    "seal",
    "open_sealed",
    "Envelope",
    "encode_envelope",
    "decode_envelope",
    "CURRENT_VERSION",
    "SUITES",
    "CipherSuite",
    "get_suite",
    "encrypt",
    "decrypt",
]
