"""Versioned binary envelope with Base64 transport encoding.

Layout (before Base64):
- 1 byte: version (0x02)
- 16 bytes: Argon2id salt
- 12 bytes: AES-GCM nonce
- N bytes: ciphertext || 16-byte tag

The header is fixed width for a given version, so the decoder slices it
without a length field.
"""
from __future__ import annotations

import base64
import binascii
import struct
from dataclasses import dataclass

from encrypto.core.exceptions import InvalidInputError, MalformedEnvelopeError
from .params import CURRENT_VERSION, SUITES, get_suite


@dataclass(frozen=True)
class Envelope:
    version: int
    salt: bytes
    nonce: bytes
    sealed_payload: bytes

    def to_bytes(self) -> bytes:
        suite = get_suite(self.version)
        if len(self.salt) != suite.salt_len or len(self.nonce) != suite.nonce_len:
            raise InvalidInputError("Salt or nonce has the wrong length for this version")
        buf = bytearray()
        buf += struct.pack("B", self.version)
        buf += self.salt
        buf += self.nonce
        buf += self.sealed_payload
        return bytes(buf)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Envelope":
        # Length gate uses the smallest envelope any known version accepts,
        # then the version gate runs before anything else is sliced.
        min_len = min(s.min_envelope_len for s in SUITES.values())
        if len(data) < min_len:
            raise MalformedEnvelopeError(
                f"Encrypted data too short: {len(data)} bytes, need at least {min_len}"
            )
        suite = get_suite(data[0])
        if len(data) < suite.min_envelope_len:
            raise MalformedEnvelopeError("Encrypted data too short for its version")

        pos = 1
        salt = data[pos:pos + suite.salt_len]
        pos += suite.salt_len
        nonce = data[pos:pos + suite.nonce_len]
        pos += suite.nonce_len
        return cls(version=suite.version, salt=bytes(salt), nonce=bytes(nonce), sealed_payload=bytes(data[pos:]))


def b64encode(data: bytes) -> str:
    """Standard alphabet, padded, single line."""
    return base64.b64encode(data).decode("ascii")


def b64decode(text: str) -> bytes:
    """
    Decode standard Base64, ignoring line breaks and other whitespace.

    Mobile clients wrap their output at 76 columns; anything else outside
    the alphabet is rejected.
    """
    compact = "".join(text.split())
    try:
        return base64.b64decode(compact, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise MalformedEnvelopeError("Encrypted data is not valid Base64") from exc


def encode_envelope(version: int, salt: bytes, nonce: bytes, sealed_payload: bytes) -> str:
    return b64encode(Envelope(version, salt, nonce, sealed_payload).to_bytes())


def decode_envelope(blob: str) -> Envelope:
    return Envelope.from_bytes(b64decode(blob))


__all__ = [
    "CURRENT_VERSION",
    "Envelope",
    "b64encode",
    "b64decode",
    "encode_envelope",
    "decode_envelope",
]
