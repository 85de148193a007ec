"""Password-based authenticated encryption of text messages.

``encrypt`` turns (plaintext, password) into a Base64 envelope string and
``decrypt`` reverses it. Every call derives a fresh key from a fresh salt
and seals under a fresh nonce; nothing is cached between calls.
"""
from encrypto.core.exceptions import EncodingError, InvalidInputError
from .aead import generate_nonce, open_sealed, seal
from .envelope import Envelope, b64encode, decode_envelope
from .kdf import derive_key, generate_salt
from .params import CURRENT_VERSION


def _require_text(value, name: str) -> str:
    if value is None:
        raise InvalidInputError(f"{name} must not be None")
    if not isinstance(value, str):
        raise InvalidInputError(f"{name} must be str, got {type(value).__name__}")
    return value


def encrypt(plaintext: str, password: str) -> str:
    """
    Encrypt ``plaintext`` with a key derived from ``password``.

    Output: Base64 of ``version(1) | salt(16) | nonce(12) | ciphertext | tag(16)``.
    """
    _require_text(plaintext, "Plaintext")
    _require_text(password, "Password")

    salt = generate_salt(CURRENT_VERSION)
    nonce = generate_nonce(CURRENT_VERSION)

    key = derive_key(password, salt, CURRENT_VERSION)
    try:
        sealed = seal(key, nonce, plaintext.encode("utf-8"), CURRENT_VERSION)
    finally:
        del key

    return b64encode(Envelope(CURRENT_VERSION, salt, nonce, sealed).to_bytes())


def decrypt(blob: str, password: str) -> str:
    """
    Decrypt a Base64 envelope produced by :func:`encrypt`.

    Raises MalformedEnvelopeError or UnsupportedVersionError before any key
    is derived, IntegrityError when the password is wrong or the data was
    altered (the two cannot be told apart), and EncodingError if the
    authenticated bytes are not UTF-8.
    """
    _require_text(blob, "Encrypted data")
    _require_text(password, "Password")

    envelope = decode_envelope(blob)

    key = derive_key(password, envelope.salt, envelope.version)
    try:
        plaintext = open_sealed(key, envelope.nonce, envelope.sealed_payload, envelope.version)
    finally:
        del key

    try:
        return plaintext.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise EncodingError("Decrypted data is not valid UTF-8") from exc
