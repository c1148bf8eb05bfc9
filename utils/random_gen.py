"""
Deterministic seeded byte generator compatible with Java's SHA1PRNG.

AES keys are expanded from a password by seeding this generator and
drawing the key bytes from it, so the same password always yields the
same key, and keys match those produced on the JVM side.
"""

from cryptography.hazmat.primitives import hashes


def _sha1(data: bytes) -> bytes:
    d = hashes.Hash(hashes.SHA1())
    d.update(data)
    return d.finalize()


def _signed(b: int) -> int:
    return b - 256 if b > 127 else b


class SeededRandom:
    """SHA1PRNG: ``state = SHA1(seed)``, output block ``SHA1(state)``."""

    DIGEST_SIZE = 20

    def __init__(self, seed: bytes):
        self._state     = bytearray(_sha1(bytes(seed)))
        self._remainder = b""

    def _update_state(self, output: bytes):
        # state += output + 1, byte-wise with Java signed-byte carries
        last    = 1
        changed = False
        for i in range(len(self._state)):
            v = _signed(self._state[i]) + _signed(output[i]) + last
            t = v & 0xFF
            changed |= self._state[i] != t
            self._state[i] = t
            last = v >> 8
        if not changed:
            self._state[0] = (self._state[0] + 1) & 0xFF

    def generate_bytes(self, length: int) -> bytes:
        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")
        out = bytearray(self._remainder[:length])
        self._remainder = self._remainder[length:]
        while len(out) < length:
            block = _sha1(bytes(self._state))
            self._update_state(block)
            need = length - len(out)
            out.extend(block[:need])
            self._remainder = block[need:]
        return bytes(out)

    @classmethod
    def derive(cls, seed: bytes, length: int) -> bytes:
        """One-shot: seed a fresh generator and draw *length* bytes."""
        return cls(seed).generate_bytes(length)
