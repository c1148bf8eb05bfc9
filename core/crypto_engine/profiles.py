"""
Static cipher profiles — one read-only entry per supported algorithm.

A profile fixes everything an algorithm needs apart from the key:
key-length rule, block/stream mode, padding, IV policy and how the
ciphertext is represented once it leaves the core.

    profile = profile_for(Algorithm.DES)
    profile.transformation        # "DES/ECB/PKCS5Padding"
    profile.key_rule.allows(8)    # True
"""

import enum
from dataclasses import dataclass
from types import MappingProxyType

from config.settings import Settings
from .exceptions import UnsupportedAlgorithm


class Algorithm(enum.Enum):
    AES        = "AES"
    DES        = "DES"
    TRIPLE_DES = "DESede"
    RC4        = "RC4"
    RC5        = "RC5"

    @classmethod
    def from_name(cls, name: "str | Algorithm") -> "Algorithm":
        """Parse a case-insensitive name or alias (``"3des"``, ``"arcfour"``)."""
        if isinstance(name, cls):
            return name
        if not isinstance(name, str):
            raise UnsupportedAlgorithm(f"not an algorithm name: {name!r}")
        key = name.strip().upper().replace("-", "").replace("_", "")
        try:
            return _ALIASES[key]
        except KeyError:
            raise UnsupportedAlgorithm(
                f"unknown algorithm {name!r}. "
                f"Available: {[a.name for a in cls]}"
            ) from None


_ALIASES = {
    "AES":       Algorithm.AES,
    "DES":       Algorithm.DES,
    "DESEDE":    Algorithm.TRIPLE_DES,
    "TRIPLEDES": Algorithm.TRIPLE_DES,
    "3DES":      Algorithm.TRIPLE_DES,
    "RC4":       Algorithm.RC4,
    "ARCFOUR":   Algorithm.RC4,
    "ARC4":      Algorithm.RC4,
    "RC5":       Algorithm.RC5,
}


class Mode(enum.Enum):
    STREAM = "stream"
    ECB    = "ECB"
    CBC    = "CBC"


class Padding(enum.Enum):
    NONE  = "NoPadding"
    PKCS5 = "PKCS5Padding"
    PKCS7 = "PKCS7Padding"


class OutputEncoding(enum.Enum):
    RAW    = "raw"          # bytes handed back untouched
    BASE64 = "base64"       # ASCII-safe text


@dataclass(frozen=True)
class KeyLengthRule:
    """
    Accepted key lengths in bytes.

    ``derived_bytes`` is set when the caller's key is only a seed and the
    real key is generated from it (any seed length is fine then).
    """
    min_bytes:     int = 0
    max_bytes:     int | None = None
    derived_bytes: int | None = None

    @property
    def is_derived(self) -> bool:
        return self.derived_bytes is not None

    def allows(self, length: int) -> bool:
        if self.is_derived:
            return True
        if length < self.min_bytes:
            return False
        return self.max_bytes is None or length <= self.max_bytes

    def describe(self) -> str:
        if self.is_derived:
            return f"any length (expanded to {self.derived_bytes * 8} bits)"
        if self.min_bytes == self.max_bytes:
            return f"exactly {self.min_bytes} bytes"
        if self.max_bytes is None:
            unit = "byte" if self.min_bytes == 1 else "bytes"
            return f"at least {self.min_bytes} {unit}"
        return f"{self.min_bytes}–{self.max_bytes} bytes"


@dataclass(frozen=True)
class CipherProfile:
    algorithm:  Algorithm
    key_rule:   KeyLengthRule
    mode:       Mode
    padding:    Padding
    block_size: int                     # bytes; 1 for stream ciphers
    encoding:   OutputEncoding
    requires_iv: bool = False
    fixed_iv:    bytes | None = None
    rounds:      int | None = None

    def __post_init__(self):
        if self.requires_iv and (
            self.fixed_iv is None or len(self.fixed_iv) != self.block_size
        ):
            raise ValueError(
                f"{self.algorithm.name} profile needs a "
                f"{self.block_size}-byte IV"
            )
        if self.mode is Mode.STREAM and self.padding is not Padding.NONE:
            raise ValueError("stream ciphers are never padded")

    @property
    def name(self) -> str:
        return self.algorithm.name

    @property
    def is_stream(self) -> bool:
        return self.mode is Mode.STREAM

    @property
    def transformation(self) -> str:
        """JCE-style transformation string, e.g. ``RC5/CBC/PKCS7Padding``."""
        if self.is_stream:
            return self.algorithm.value
        return f"{self.algorithm.value}/{self.mode.value}/{self.padding.value}"


# ── Registry ─────────────────────────────────────────────────────
# Built once at import; MappingProxyType keeps it read-only afterwards.

def _build_profiles() -> dict[Algorithm, CipherProfile]:
    aes_key_bytes = Settings.AES_KEY_BITS // 8
    return {
        Algorithm.AES: CipherProfile(
            algorithm=Algorithm.AES,
            key_rule=KeyLengthRule(derived_bytes=aes_key_bytes),
            mode=Mode.ECB,
            padding=Padding.PKCS5,
            block_size=16,
            encoding=OutputEncoding.RAW,
        ),
        Algorithm.DES: CipherProfile(
            algorithm=Algorithm.DES,
            key_rule=KeyLengthRule(min_bytes=8, max_bytes=8),
            mode=Mode.ECB,
            padding=Padding.PKCS5,
            block_size=8,
            encoding=OutputEncoding.BASE64,
        ),
        Algorithm.TRIPLE_DES: CipherProfile(
            algorithm=Algorithm.TRIPLE_DES,
            key_rule=KeyLengthRule(min_bytes=24, max_bytes=24),
            mode=Mode.ECB,
            padding=Padding.PKCS5,
            block_size=8,
            encoding=OutputEncoding.BASE64,
        ),
        Algorithm.RC4: CipherProfile(
            algorithm=Algorithm.RC4,
            key_rule=KeyLengthRule(min_bytes=1),
            mode=Mode.STREAM,
            padding=Padding.NONE,
            block_size=1,
            encoding=OutputEncoding.BASE64,
        ),
        Algorithm.RC5: CipherProfile(
            algorithm=Algorithm.RC5,
            key_rule=KeyLengthRule(min_bytes=8),
            mode=Mode.CBC,
            padding=Padding.PKCS7,
            block_size=8,
            encoding=OutputEncoding.BASE64,
            requires_iv=True,
            fixed_iv=bytes(Settings.RC5_IV),
            rounds=Settings.RC5_ROUNDS,
        ),
    }


_PROFILES = MappingProxyType(_build_profiles())


def profile_for(algorithm: "Algorithm | str") -> CipherProfile:
    """Return the profile for *algorithm* (an :class:`Algorithm` or its name)."""
    return _PROFILES[Algorithm.from_name(algorithm)]


def all_profiles() -> list[CipherProfile]:
    return [_PROFILES[a] for a in Algorithm]
