"""
CipherFactory — provider registration, cipher creation and discovery.

Usage:
    CipherFactory.initialize()                 # once per process
    key    = derive(Algorithm.DES, "12345678")
    cipher = CipherFactory.create(profile_for(Algorithm.DES), key)
    ct     = cipher.encrypt(b"hello")

    for info in CipherFactory.get_all_info():
        print(info)

``initialize()`` binds every algorithm to the class that implements it.
It is idempotent and thread-safe; the package calls it on import so
normal callers never have to.
"""

import logging
import threading

from .symmetric_base import SymmetricCipher
from .aes_crypto     import AESECBCipher
from .des_crypto     import DESECBCipher, TripleDESECBCipher
from .rc4_crypto     import RC4Cipher
from .rc5_crypto     import RC5CBCCipher
from .exceptions     import TransformFailure, UnsupportedAlgorithm
from .key_derivation import KeyMaterial
from .profiles       import Algorithm, CipherProfile, all_profiles, profile_for

logger = logging.getLogger("LegacyCipher.CipherFactory")


class CipherFactory:
    """
    Create the cipher that implements a profile.

    The factory handles:
    - One-time provider registration
    - Checking that the key was derived for the same algorithm
    - Passing the profile's fixed IV / round count to the cipher
    """

    # ── Providers ────────────────────────────────────────────────
    _DEFAULT_PROVIDERS: dict[Algorithm, type[SymmetricCipher]] = {
        Algorithm.AES:        AESECBCipher,
        Algorithm.DES:        DESECBCipher,
        Algorithm.TRIPLE_DES: TripleDESECBCipher,
        Algorithm.RC4:        RC4Cipher,
        Algorithm.RC5:        RC5CBCCipher,
    }

    _providers: dict[Algorithm, type[SymmetricCipher]] = {}
    _lock = threading.Lock()

    @classmethod
    def initialize(cls) -> None:
        """Register every built-in provider. Safe to call repeatedly."""
        with cls._lock:
            if cls._providers:
                return
            cls._providers = dict(cls._DEFAULT_PROVIDERS)
        logger.info(
            "Registered cipher providers: %s",
            ", ".join(a.name for a in cls._providers),
        )

    @classmethod
    def is_initialized(cls) -> bool:
        return bool(cls._providers)

    # ── Factory method ───────────────────────────────────────────

    @classmethod
    def create(cls, profile: CipherProfile,
               key: KeyMaterial) -> SymmetricCipher:
        """
        Create a cipher instance for *profile* keyed with *key*.

        Raises
        ------
        UnsupportedAlgorithm
            No provider registered for the profile's algorithm.
        TransformFailure
            The key was derived for a different algorithm, or the
            provider refused the key.
        """
        provider = cls._providers.get(profile.algorithm)
        if provider is None:
            raise UnsupportedAlgorithm(
                "no cipher provider registered", algorithm=profile.name,
            )
        if key.algorithm is not profile.algorithm:
            raise TransformFailure(
                f"key was derived for {key.algorithm.name}",
                algorithm=profile.name,
            )

        try:
            if profile.requires_iv:
                cipher = provider(key.key, profile.fixed_iv,
                                  profile.rounds or 12)
            else:
                cipher = provider(key.key)
        except ValueError as exc:
            raise TransformFailure(str(exc), algorithm=profile.name) from exc

        logger.debug(
            "Created cipher: %s (key=%d bits)",
            cipher.cipher_name, cipher.key_size_bits,
        )
        return cipher

    # ── Discovery ────────────────────────────────────────────────

    @classmethod
    def list_ciphers(cls) -> list[str]:
        """Return the names of all algorithms with a registered provider."""
        return [a.name for a in Algorithm if a in cls._providers]

    @classmethod
    def is_available(cls, algorithm: "Algorithm | str") -> bool:
        try:
            return profile_for(algorithm).algorithm in cls._providers
        except UnsupportedAlgorithm:
            return False

    @classmethod
    def get_info(cls, algorithm: "Algorithm | str") -> dict:
        """Return metadata for an algorithm."""
        profile = profile_for(algorithm)
        return {
            "name":           profile.name,
            "transformation": profile.transformation,
            "key":            profile.key_rule.describe(),
            "mode":           profile.mode.value,
            "padding":        profile.padding.value,
            "block_size":     profile.block_size,
            "iv":             "fixed" if profile.requires_iv else "none",
            "output":         profile.encoding.value,
            "available":      profile.algorithm in cls._providers,
        }

    @classmethod
    def get_all_info(cls) -> list[dict]:
        """Return metadata for all algorithms (for the CLI table)."""
        return [cls.get_info(p.algorithm) for p in all_profiles()]
