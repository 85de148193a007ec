"""Unit tests for the binary envelope and its Base64 transport."""

import base64

import pytest

from encrypto.core.exceptions import (
    InvalidInputError,
    MalformedEnvelopeError,
    UnsupportedVersionError,
)
from encrypto.security.envelope import (
    Envelope,
    b64decode,
    decode_envelope,
    encode_envelope,
)

SALT = bytes(range(16))
NONCE = bytes(range(100, 112))
SEALED = b"\xaa" * 16 + b"\xbb" * 5


def test_to_bytes_layout():
    raw = Envelope(2, SALT, NONCE, SEALED).to_bytes()
    assert raw[0] == 0x02
    assert raw[1:17] == SALT
    assert raw[17:29] == NONCE
    assert raw[29:] == SEALED
    assert len(raw) == 29 + len(SEALED)


def test_from_bytes_slices_fields():
    raw = b"\x02" + SALT + NONCE + SEALED
    env = Envelope.from_bytes(raw)
    assert env == Envelope(2, SALT, NONCE, SEALED)


def test_encode_is_padded_standard_base64_on_one_line():
    blob = encode_envelope(2, SALT, NONCE, SEALED)
    assert "\n" not in blob
    assert len(blob) % 4 == 0
    assert base64.b64decode(blob, validate=True) == b"\x02" + SALT + NONCE + SEALED


def test_decode_envelope_accepts_wrapped_base64():
    """Base64 wrapped at 76 columns, as Android's default encoder emits."""
    raw = b"\x02" + SALT + NONCE + b"\xcc" * 64
    wrapped = base64.encodebytes(raw).decode("ascii")
    assert "\n" in wrapped.strip()
    assert decode_envelope(wrapped).sealed_payload == b"\xcc" * 64


@pytest.mark.parametrize("blob", ["not base64!!", "AAAA*AAA", "é" * 8, "AAA"])
def test_decode_envelope_rejects_invalid_base64(blob):
    with pytest.raises(MalformedEnvelopeError):
        decode_envelope(blob)


def test_length_gate_minimum_is_45_bytes():
    # header (29) + tag-only payload (16)
    Envelope.from_bytes(b"\x02" + SALT + NONCE + b"\x00" * 16)
    with pytest.raises(MalformedEnvelopeError, match="too short"):
        Envelope.from_bytes(b"\x02" + SALT + NONCE + b"\x00" * 15)


def test_length_gate_empty_blob():
    with pytest.raises(MalformedEnvelopeError):
        decode_envelope("")


@pytest.mark.parametrize("version", [0x00, 0x01, 0x03, 0xFF])
def test_version_gate(version):
    raw = bytes([version]) + SALT + NONCE + SEALED
    with pytest.raises(UnsupportedVersionError) as exc_info:
        Envelope.from_bytes(raw)
    assert exc_info.value.version == version


def test_to_bytes_rejects_wrong_field_sizes():
    with pytest.raises(InvalidInputError):
        Envelope(2, b"short", NONCE, SEALED).to_bytes()
    with pytest.raises(UnsupportedVersionError):
        Envelope(7, SALT, NONCE, SEALED).to_bytes()


def test_b64decode_strips_whitespace():
    assert b64decode(" AAEC\r\nAw==\n") == b"\x00\x01\x02\x03"
