"""
RC4 (ARCFOUR) stream cipher.

Key: 1 byte or more. No IV, no padding; output length equals input length.
The keystream restarts from the key on every call, so the same key and
plaintext always give the same ciphertext.

The ``cryptography`` ARC4 only accepts a handful of key sizes, so the
keystream comes from pycryptodome, which accepts 1–256 bytes.
"""

from Crypto.Cipher import ARC4

from .symmetric_base import SymmetricCipher

# The key schedule only reads key[i % len] for i < 256
_KSA_BYTES = 256


class RC4Cipher(SymmetricCipher):
    """
    RC4 keystream XOR.

    Output format:  [ciphertext]  (same length as plaintext)
    """
    MIN_KEY = 1

    def __init__(self, key: bytes):
        if len(key) < self.MIN_KEY:
            raise ValueError(
                f"RC4 key must be at least {self.MIN_KEY} byte, "
                f"got {len(key)}"
            )
        self._key = key

    def _stream(self):
        # longer keys give the same keystream as their first 256 bytes
        return ARC4.new(self._key[:_KSA_BYTES])

    def encrypt(self, plaintext: bytes) -> bytes:
        return self._stream().encrypt(plaintext)

    def decrypt(self, data: bytes) -> bytes:
        return self._stream().decrypt(data)

    @property
    def cipher_name(self) -> str:
        return "RC4"

    @property
    def key_size(self) -> int:
        return len(self._key)

    def info(self) -> dict:
        base = super().info()
        base["security_note"] = (
            "RC4 keystream biases are practically exploitable. "
            "Kept for reading legacy data only."
        )
        return base
