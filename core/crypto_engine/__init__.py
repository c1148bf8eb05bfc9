"""
LegacyCipher Crypto Engine — AES, DES, 3DES, RC4 and RC5 behind one
encrypt/decrypt interface.
"""

# ── Profiles & errors ────────────────────────────────────────────
from .exceptions import (
    CipherError, InvalidKeyLength, BadPadding, InvalidEncoding,
    UnsupportedAlgorithm, TransformFailure,
)
from .profiles import (
    Algorithm, CipherProfile, KeyLengthRule, Mode, Padding,
    OutputEncoding, profile_for, all_profiles,
)
from .key_derivation import KeyMaterial, derive

# ── Ciphers ──────────────────────────────────────────────────────
from .symmetric_base import SymmetricCipher, BlockCipher
from .aes_crypto     import AESECBCipher
from .des_crypto     import DESECBCipher, TripleDESECBCipher
from .rc4_crypto     import RC4Cipher
from .rc5_crypto     import RC5CBCCipher, RC5Block
from .cipher_factory import CipherFactory
from .cipher_engine  import Direction, transform
from .encoding       import TextCodec

# ── Public API ───────────────────────────────────────────────────
from .symmetric_crypto import (
    Ciphertext, SymmetricCrypto,
    AESCrypto, DESCrypto, TripleDESCrypto, RC4Crypto, RC5Crypto,
)

# process-wide provider registration
CipherFactory.initialize()

__all__ = [
    # Errors
    "CipherError", "InvalidKeyLength", "BadPadding", "InvalidEncoding",
    "UnsupportedAlgorithm", "TransformFailure",
    # Profiles & keys
    "Algorithm", "CipherProfile", "KeyLengthRule", "Mode", "Padding",
    "OutputEncoding", "profile_for", "all_profiles",
    "KeyMaterial", "derive",
    # Engine
    "SymmetricCipher", "BlockCipher", "CipherFactory",
    "Direction", "transform", "TextCodec",
    # Individual ciphers
    "AESECBCipher", "DESECBCipher", "TripleDESECBCipher",
    "RC4Cipher", "RC5CBCCipher", "RC5Block",
    # Public API
    "Ciphertext", "SymmetricCrypto",
    "AESCrypto", "DESCrypto", "TripleDESCrypto", "RC4Crypto", "RC5Crypto",
]
