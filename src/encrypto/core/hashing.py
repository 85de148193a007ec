""" Utility for text hashing operations. """

import hashlib

from encrypto.core.exceptions import InvalidInputError, UnsupportedAlgorithmError


DEFAULT_ALGORITHM = "SHA-256"


def _hashlib_name(algorithm: str) -> str:
    # Accept "SHA-256" / "SHA3-256" / "SHA-512/256" / "MD5" as well as hashlib's own names.
    name = algorithm.strip().lower().replace("/", "_")
    candidates = (name, name.replace("-", ""), name.replace("-", "_"))
    for candidate in candidates:
        if candidate.startswith("shake"):
            # variable-length digests have no fixed hexdigest
            break
        if candidate in hashlib.algorithms_available:
            return candidate
    raise UnsupportedAlgorithmError(f"Unsupported hash algorithm: {algorithm}")


def hash_text(text: str, algorithm: str = DEFAULT_ALGORITHM) -> str:
    """
    Return the lowercase hex digest of the UTF-8 encoding of ``text``.

    Shares nothing with the encryption path.
    """
    if text is None or not isinstance(text, str):
        raise InvalidInputError("Text must be str")
    if not isinstance(algorithm, str):
        raise UnsupportedAlgorithmError(f"Unsupported hash algorithm: {algorithm!r}")

    digest = hashlib.new(_hashlib_name(algorithm))
    digest.update(text.encode("utf-8"))
    return digest.hexdigest()
