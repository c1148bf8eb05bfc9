"""
Turn a caller-supplied key or password into algorithm-specific key bytes.

AES treats the input as a seed and expands it to a 128-bit key; every
other algorithm takes the caller's bytes as-is and only checks them
against the profile's length rule. Nothing is truncated or padded.
"""

import logging

from config.settings import Settings
from utils.random_gen import SeededRandom
from .exceptions import InvalidKeyLength
from .profiles import Algorithm, CipherProfile, profile_for

logger = logging.getLogger("LegacyCipher.KeyDerivation")


class KeyMaterial:
    """
    Derived secret for one encrypt/decrypt call.

    Not shared between calls. ``wipe()`` (or leaving a ``with`` block)
    overwrites the bytes with zeros. Only this buffer is wiped: ``key``
    hands out an immutable copy, and the backend objects built from it
    (cipher contexts, the RC5 round-key table) keep their own state until
    they are garbage collected. The engine drops its cipher as soon as the
    transform finishes so nothing outlives the call.
    """

    __slots__ = ("algorithm", "_key")

    def __init__(self, algorithm: Algorithm, key: bytes):
        self.algorithm = algorithm
        self._key      = bytearray(key)

    @property
    def key(self) -> bytes:
        return bytes(self._key)

    def __len__(self) -> int:
        return len(self._key)

    def wipe(self):
        for i in range(len(self._key)):
            self._key[i] = 0

    def __enter__(self) -> "KeyMaterial":
        return self

    def __exit__(self, *exc):
        self.wipe()
        return False

    def __repr__(self) -> str:
        return f"KeyMaterial({self.algorithm.name}, {len(self._key)} bytes)"


def _to_bytes(key_source: str | bytes) -> bytes:
    if isinstance(key_source, str):
        return key_source.encode(Settings.TEXT_ENCODING)
    if isinstance(key_source, (bytes, bytearray, memoryview)):
        return bytes(key_source)
    raise TypeError(
        f"key must be str or bytes, not {type(key_source).__name__}"
    )


def derive(algorithm: "Algorithm | str | CipherProfile",
           key_source: str | bytes) -> KeyMaterial:
    """
    Return :class:`KeyMaterial` for *algorithm*.

    Raises
    ------
    InvalidKeyLength
        The key does not satisfy the algorithm's length rule.
    UnsupportedAlgorithm
        *algorithm* is not a known algorithm name.
    """
    if isinstance(algorithm, CipherProfile):
        profile = algorithm
    else:
        profile = profile_for(algorithm)
    raw  = _to_bytes(key_source)
    rule = profile.key_rule

    if rule.is_derived:
        return KeyMaterial(
            profile.algorithm,
            SeededRandom.derive(raw, rule.derived_bytes),
        )

    if not rule.allows(len(raw)):
        logger.warning(
            "Rejected %s key: %d bytes, need %s",
            profile.name, len(raw), rule.describe(),
        )
        raise InvalidKeyLength(profile.name, rule.describe(), len(raw))

    return KeyMaterial(profile.algorithm, raw)
