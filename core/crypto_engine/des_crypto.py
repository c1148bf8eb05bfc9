"""
DES and Triple DES (DESede) — ECB mode with PKCS#5 padding.

3DES applies DES three times with a 168-bit key (24 bytes). Single DES
is run through the same primitive with its 8-byte key repeated three
times, which reduces EDE to one DES pass.
Block size: 64 bits (8 bytes).
"""

from cryptography.hazmat.primitives.ciphers import Cipher, modes
from cryptography.hazmat.decrepit.ciphers import algorithms

from .symmetric_base import BlockCipher


class TripleDESECBCipher(BlockCipher):
    """
    3DES-ECB, matching ``DESede/ECB/PKCS5Padding``.

    Output format:  [ciphertext padded]

    Key: 24 bytes (three 8-byte DES keys)
    """
    BLOCK_SIZE = 8
    KEY_SIZE   = 24

    def __init__(self, key: bytes):
        if len(key) != self.KEY_SIZE:
            raise ValueError(
                f"3DES key must be exactly {self.KEY_SIZE} bytes, "
                f"got {len(key)}"
            )
        self._key = key

    def _ede_key(self) -> bytes:
        return self._key

    def _encrypt_blocks(self, data: bytes) -> bytes:
        enc = Cipher(
            algorithms.TripleDES(self._ede_key()), modes.ECB()
        ).encryptor()
        return enc.update(data) + enc.finalize()

    def _decrypt_blocks(self, data: bytes) -> bytes:
        dec = Cipher(
            algorithms.TripleDES(self._ede_key()), modes.ECB()
        ).decryptor()
        return dec.update(data) + dec.finalize()

    @property
    def cipher_name(self) -> str:
        return "DESede/ECB/PKCS5Padding"

    @property
    def key_size(self) -> int:
        return self.KEY_SIZE

    def info(self) -> dict:
        base = super().info()
        base["security_note"] = (
            "3DES is considered legacy. Effective security is ~112 bits."
        )
        return base


class DESECBCipher(TripleDESECBCipher):
    """
    Single DES-ECB, matching ``DES/ECB/PKCS5Padding``.

    Key: 8 bytes (parity bits ignored)
    """
    KEY_SIZE = 8

    def _ede_key(self) -> bytes:
        return self._key * 3             # K1 = K2 = K3  →  plain DES

    @property
    def cipher_name(self) -> str:
        return "DES/ECB/PKCS5Padding"

    def info(self) -> dict:
        base = super().info()
        base["security_note"] = (
            "DES has a 56-bit key and is broken. Legacy decryption only."
        )
        return base
