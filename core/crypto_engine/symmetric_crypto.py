"""
Public encrypt/decrypt API.

One uniform entry point for every algorithm:

    ct = SymmetricCrypto.encrypt("DES", b"Hello, World!", "12345678")
    SymmetricCrypto.decrypt("DES", ct, "12345678")      # b"Hello, World!"

plus per-algorithm helpers that keep each algorithm's external contract:

    AESCrypto.encrypt("123456", "000")           -> bytes   (raw)
    DESCrypto.encrypt("Hello", "12345678")       -> str     (Base64)
    DESCrypto.decrypt(ciphertext, "12345678")    -> str
"""

from dataclasses import dataclass

from . import cipher_engine
from .encoding       import TextCodec
from .exceptions     import InvalidEncoding, TransformFailure
from .key_derivation import derive
from .profiles       import Algorithm, OutputEncoding, profile_for


@dataclass(frozen=True)
class Ciphertext:
    """
    Encrypted output tagged with how it is represented.

    ``value`` is ``bytes`` for RAW and ``str`` for BASE64.
    """
    algorithm: Algorithm
    encoding:  OutputEncoding
    value:     bytes | str

    def to_bytes(self) -> bytes:
        if self.encoding is OutputEncoding.BASE64:
            return TextCodec.decode(self.value)
        return bytes(self.value)

    def __str__(self) -> str:
        if self.encoding is OutputEncoding.BASE64:
            return self.value
        return TextCodec.encode(self.value)


class SymmetricCrypto:
    """Uniform ``encrypt(data, key)`` / ``decrypt(ciphertext, key)``."""

    @staticmethod
    def encrypt(algorithm: "Algorithm | str", plaintext: str | bytes,
                key: str | bytes) -> Ciphertext:
        profile = profile_for(algorithm)
        data    = TextCodec.text_to_bytes(plaintext)
        with derive(profile, key) as key_material:
            raw = cipher_engine.encrypt(profile, key_material, data)

        if profile.encoding is OutputEncoding.BASE64:
            value = TextCodec.encode(raw)
        else:
            value = raw
        return Ciphertext(profile.algorithm, profile.encoding, value)

    @staticmethod
    def decrypt(algorithm: "Algorithm | str",
                ciphertext: "Ciphertext | str | bytes",
                key: str | bytes) -> bytes:
        """
        Decrypt *ciphertext* and return the plaintext bytes.

        A bare ``str``/``bytes`` value is read with the algorithm's own
        output encoding (raw for AES, Base64 for the others).
        """
        profile = profile_for(algorithm)
        if isinstance(ciphertext, Ciphertext):
            if ciphertext.algorithm is not profile.algorithm:
                raise TransformFailure(
                    f"ciphertext was produced by {ciphertext.algorithm.name}",
                    algorithm=profile.name,
                )
            raw = ciphertext.to_bytes()
        elif not isinstance(ciphertext, (str, bytes, bytearray, memoryview)):
            raise TypeError(
                f"ciphertext must be Ciphertext, str or bytes, "
                f"not {type(ciphertext).__name__}"
            )
        elif profile.encoding is OutputEncoding.BASE64:
            raw = TextCodec.decode(ciphertext)
        elif isinstance(ciphertext, str):
            raise InvalidEncoding(
                "expected raw ciphertext bytes, got text",
                algorithm=profile.name,
            )
        else:
            raw = bytes(ciphertext)

        with derive(profile, key) as key_material:
            return cipher_engine.decrypt(profile, key_material, raw)


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Per-algorithm helpers
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class AESCrypto:
    """AES-128-ECB from a password. Raw bytes in both directions."""

    @staticmethod
    def encrypt(content: str | bytes, password: str | bytes) -> bytes:
        return SymmetricCrypto.encrypt(Algorithm.AES, content, password).value

    @staticmethod
    def decrypt(content: bytes, password: str | bytes) -> bytes:
        return SymmetricCrypto.decrypt(Algorithm.AES, content, password)


class _TextCipherCrypto:
    """Text plaintext in, Base64 ciphertext out (and back)."""

    ALGORITHM: Algorithm

    @classmethod
    def encrypt(cls, data: str, key: str | bytes) -> str:
        return SymmetricCrypto.encrypt(cls.ALGORITHM, data, key).value

    @classmethod
    def decrypt(cls, encrypted_data: str, key: str | bytes) -> str:
        plain = SymmetricCrypto.decrypt(cls.ALGORITHM, encrypted_data, key)
        try:
            return TextCodec.bytes_to_text(plain)
        except InvalidEncoding as exc:
            exc.algorithm = cls.ALGORITHM.name
            raise


class DESCrypto(_TextCipherCrypto):
    """DES-ECB, key exactly 8 bytes."""
    ALGORITHM = Algorithm.DES


class TripleDESCrypto(_TextCipherCrypto):
    """3DES-ECB, key exactly 24 bytes."""
    ALGORITHM = Algorithm.TRIPLE_DES


class RC4Crypto(_TextCipherCrypto):
    """RC4 stream cipher, key of at least 1 byte."""
    ALGORITHM = Algorithm.RC4


class RC5Crypto(_TextCipherCrypto):
    """RC5-CBC with the fixed all-zero IV, key of at least 8 bytes."""
    ALGORITHM = Algorithm.RC5
