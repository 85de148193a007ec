"""Cipher suite parameters, keyed by envelope version.

Each envelope version pins one immutable parameter set, so a blob written
under version 2 is decryptable by any implementation that knows version 2.
New tuning means a new version entry, never an edit of an existing one.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from argon2.low_level import ARGON2_VERSION, Type

from encrypto.core.exceptions import UnsupportedVersionError


@dataclass(frozen=True)
class CipherSuite:
    """Argon2id + AES-GCM sizes and costs for one envelope version."""

    version: int
    kdf_type: Type
    kdf_version: int
    time_cost: int
    memory_cost: int  # KiB
    parallelism: int
    key_len: int
    salt_len: int
    nonce_len: int
    tag_len: int

    @property
    def header_len(self) -> int:
        return 1 + self.salt_len + self.nonce_len

    @property
    def min_envelope_len(self) -> int:
        # header plus an empty plaintext's tag
        return self.header_len + self.tag_len


CURRENT_VERSION = 0x02

SUITES: Dict[int, CipherSuite] = {
    0x02: CipherSuite(
        version=0x02,
        kdf_type=Type.ID,
        kdf_version=ARGON2_VERSION,  # 0x13
        time_cost=4,
        memory_cost=64 * 1024,
        parallelism=2,
        key_len=32,
        salt_len=16,
        nonce_len=12,
        tag_len=16,
    ),
}


def get_suite(version: int = CURRENT_VERSION) -> CipherSuite:
    """Return the suite for ``version`` or raise UnsupportedVersionError."""
    try:
        return SUITES[version]
    except KeyError:
        raise UnsupportedVersionError(version) from None
