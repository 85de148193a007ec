"""
Exceptions for Encrypto
Every failure of the cryptographic core derives from EncryptoError so callers
have one general error catcher
"""


class EncryptoError(Exception):
    # general container for errors
    pass


class InvalidInputError(EncryptoError):
    # raised on None / non-text plaintext, password or blob (caller bug)
    pass


class UnsupportedAlgorithmError(InvalidInputError):
    # raised when a digest name is unknown to hashlib
    pass


class MalformedEnvelopeError(EncryptoError):
    # raised on bad Base64 or a decoded buffer too short to be an envelope
    pass


class UnsupportedVersionError(EncryptoError):
    # raised when the envelope version byte is not recognised

    def __init__(self, version: int):
        super().__init__(f"Unsupported envelope version: {version}")
        self.version = version


class IntegrityError(EncryptoError):
    # raised when the AEAD tag does not verify (tampering or wrong password)
    pass


class EncodingError(EncryptoError):
    # raised when decrypted bytes are not valid UTF-8
    pass


class ResourceExhaustionError(EncryptoError):
    # raised when key derivation cannot allocate its working memory
    pass
