"""
RC5-32/12/b block cipher — CBC mode with PKCS#7 padding.

Designed by Ron Rivest (1994). Neither ``cryptography`` nor pycryptodome
ships RC5, so the block transform lives here; chaining and padding
follow ``RC5/CBC/PKCS7Padding`` as produced by Bouncy Castle.

Word:   32 bits, little-endian
Block:  64 bits (8 bytes)
Rounds: 12 (default)
Key:    8 bytes or more
IV:     fixed, all zero by default — every message reuses it
"""

import struct

from .symmetric_base import BlockCipher

_MASK = 0xFFFFFFFF
_P32  = 0xB7E15163
_Q32  = 0x9E3779B9


def _rotl(x: int, n: int) -> int:
    n &= 31
    return ((x << n) | (x >> (32 - n))) & _MASK


def _rotr(x: int, n: int) -> int:
    n &= 31
    return ((x >> n) | (x << (32 - n))) & _MASK


class RC5Block:
    """The bare RC5-32 block transform (one 8-byte block at a time)."""

    def __init__(self, key: bytes, rounds: int = 12):
        if not (0 <= rounds <= 255):
            raise ValueError(f"RC5 rounds must be 0–255, got {rounds}")
        self.rounds = rounds
        self._s     = self._expand_key(key, rounds)

    @staticmethod
    def _expand_key(key: bytes, rounds: int) -> list[int]:
        c = max(1, (len(key) + 3) // 4)
        L = [0] * c
        for i in range(len(key) - 1, -1, -1):
            L[i // 4] = ((L[i // 4] << 8) + key[i]) & _MASK

        t = 2 * (rounds + 1)
        S = [0] * t
        S[0] = _P32
        for i in range(1, t):
            S[i] = (S[i - 1] + _Q32) & _MASK

        a = b = i = j = 0
        for _ in range(3 * max(t, c)):
            a = S[i] = _rotl((S[i] + a + b) & _MASK, 3)
            b = L[j] = _rotl((L[j] + a + b) & _MASK, a + b)
            i = (i + 1) % t
            j = (j + 1) % c
        return S

    def encrypt_block(self, block: bytes) -> bytes:
        S    = self._s
        a, b = struct.unpack("<2I", block)
        a = (a + S[0]) & _MASK
        b = (b + S[1]) & _MASK
        for r in range(1, self.rounds + 1):
            a = (_rotl(a ^ b, b) + S[2 * r]) & _MASK
            b = (_rotl(b ^ a, a) + S[2 * r + 1]) & _MASK
        return struct.pack("<2I", a, b)

    def decrypt_block(self, block: bytes) -> bytes:
        S    = self._s
        a, b = struct.unpack("<2I", block)
        for r in range(self.rounds, 0, -1):
            b = _rotr((b - S[2 * r + 1]) & _MASK, a) ^ a
            a = _rotr((a - S[2 * r]) & _MASK, b) ^ b
        b = (b - S[1]) & _MASK
        a = (a - S[0]) & _MASK
        return struct.pack("<2I", a, b)


def _xor(x: bytes, y: bytes) -> bytes:
    return bytes(p ^ q for p, q in zip(x, y))


class RC5CBCCipher(BlockCipher):
    """
    RC5-CBC with a caller-fixed IV.

    Output format:  [ciphertext padded]   (IV is not transmitted)
    """
    BLOCK_SIZE = 8
    MIN_KEY    = 8

    def __init__(self, key: bytes, iv: bytes, rounds: int = 12):
        if len(key) < self.MIN_KEY:
            raise ValueError(
                f"RC5 key must be at least {self.MIN_KEY} bytes, "
                f"got {len(key)}"
            )
        if len(iv) != self.BLOCK_SIZE:
            raise ValueError(
                f"RC5 IV must be {self.BLOCK_SIZE} bytes, got {len(iv)}"
            )
        self._key   = key
        self._iv    = bytes(iv)
        self._block = RC5Block(key, rounds)

    def _encrypt_blocks(self, data: bytes) -> bytes:
        out  = bytearray()
        prev = self._iv
        for off in range(0, len(data), self.BLOCK_SIZE):
            prev = self._block.encrypt_block(
                _xor(data[off:off + self.BLOCK_SIZE], prev)
            )
            out += prev
        return bytes(out)

    def _decrypt_blocks(self, data: bytes) -> bytes:
        out  = bytearray()
        prev = self._iv
        for off in range(0, len(data), self.BLOCK_SIZE):
            block = data[off:off + self.BLOCK_SIZE]
            out  += _xor(self._block.decrypt_block(block), prev)
            prev  = block
        return bytes(out)

    @property
    def cipher_name(self) -> str:
        return "RC5/CBC/PKCS7Padding"

    @property
    def key_size(self) -> int:
        return len(self._key)

    @property
    def iv_size(self) -> int:
        return self.BLOCK_SIZE

    def info(self) -> dict:
        base = super().info()
        base["rounds"] = self._block.rounds
        base["security_note"] = (
            "The IV is fixed, so equal plaintexts give equal ciphertexts."
        )
        return base
