"""
AES block cipher — ECB mode with PKCS#7 padding.

Key: 16 bytes, expanded from a password by the key-derivation layer.
Block: 128 bits (16 bytes). No IV.
"""

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from .symmetric_base import BlockCipher


class AESECBCipher(BlockCipher):
    """
    AES-ECB, matching ``AES/ECB/PKCS5Padding`` on the JVM.

    Output format:  [ciphertext padded]
    """
    BLOCK_SIZE = 16

    def __init__(self, key: bytes):
        if len(key) not in (16, 24, 32):
            raise ValueError(
                f"AES key must be 16, 24, or 32 bytes, got {len(key)}"
            )
        self._key = key

    def _encrypt_blocks(self, data: bytes) -> bytes:
        enc = Cipher(algorithms.AES(self._key), modes.ECB()).encryptor()
        return enc.update(data) + enc.finalize()

    def _decrypt_blocks(self, data: bytes) -> bytes:
        dec = Cipher(algorithms.AES(self._key), modes.ECB()).decryptor()
        return dec.update(data) + dec.finalize()

    @property
    def cipher_name(self) -> str:
        return "AES/ECB/PKCS5Padding"

    @property
    def key_size(self) -> int:
        return len(self._key)
