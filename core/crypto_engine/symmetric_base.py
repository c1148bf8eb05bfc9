"""
Abstract base classes for the symmetric ciphers in LegacyCipher.

Every cipher (AES, DES, 3DES, RC4, RC5) implements this interface so the
engine can drive them uniformly. Stream ciphers return output of the
same length as the input; block ciphers pad on encrypt and strip the
padding on decrypt.
"""

from abc import ABC, abstractmethod

from cryptography.hazmat.primitives import padding as sym_padding

from .exceptions import BadPadding


class SymmetricCipher(ABC):
    """
    Unified interface for symmetric encryption.

    encrypt() returns the bare ciphertext (no IV or tag prefix); the IV,
    when there is one, is fixed by the algorithm's profile.
    """

    @abstractmethod
    def encrypt(self, plaintext: bytes) -> bytes:
        """Encrypt plaintext → ciphertext."""

    @abstractmethod
    def decrypt(self, data: bytes) -> bytes:
        """Decrypt ciphertext produced by encrypt() → plaintext."""

    @property
    @abstractmethod
    def cipher_name(self) -> str:
        """Transformation name, e.g. 'DES/ECB/PKCS5Padding'."""

    @property
    @abstractmethod
    def key_size(self) -> int:
        """Encryption key size in bytes."""

    @property
    def iv_size(self) -> int:
        return 0

    @property
    def block_size(self) -> int:
        return 1

    @property
    def key_size_bits(self) -> int:
        return self.key_size * 8

    def info(self) -> dict:
        """Return cipher metadata for display."""
        return {
            "name":       self.cipher_name,
            "key_bits":   self.key_size_bits,
            "block_size": self.block_size,
            "iv_bytes":   self.iv_size,
        }


class BlockCipher(SymmetricCipher):
    """
    Block cipher with PKCS#7 padding (PKCS#5 for 8-byte blocks).

    Subclasses provide the raw block-aligned transform.
    """
    BLOCK_SIZE = 8

    @property
    def block_size(self) -> int:
        return self.BLOCK_SIZE

    @abstractmethod
    def _encrypt_blocks(self, data: bytes) -> bytes:
        """Encrypt block-aligned data."""

    @abstractmethod
    def _decrypt_blocks(self, data: bytes) -> bytes:
        """Decrypt block-aligned data."""

    def encrypt(self, plaintext: bytes) -> bytes:
        padder = sym_padding.PKCS7(self.BLOCK_SIZE * 8).padder()
        padded = padder.update(plaintext) + padder.finalize()
        return self._encrypt_blocks(padded)

    def decrypt(self, data: bytes) -> bytes:
        if not data or len(data) % self.BLOCK_SIZE:
            raise BadPadding(
                f"ciphertext length {len(data)} is not a positive "
                f"multiple of the {self.BLOCK_SIZE}-byte block",
            )
        padded = self._decrypt_blocks(data)
        unpad  = sym_padding.PKCS7(self.BLOCK_SIZE * 8).unpadder()
        try:
            return unpad.update(padded) + unpad.finalize()
        except ValueError:
            raise BadPadding(
                "padding check failed — wrong key or corrupted data"
            ) from None
