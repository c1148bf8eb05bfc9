"""
Typed errors raised by the cipher core.

    CipherError (ValueError)
    ├── InvalidKeyLength     – key shape does not match the algorithm
    ├── BadPadding           – ciphertext corrupted, or the wrong key
    ├── InvalidEncoding      – text layer fed something it cannot decode
    ├── UnsupportedAlgorithm – no profile / provider for the request
    └── TransformFailure     – the primitive itself rejected the call

Messages never carry key bytes, IVs or plaintext.
"""


class CipherError(ValueError):
    """Base class for every failure surfaced by the cipher core."""

    def __init__(self, message: str, algorithm: str | None = None):
        super().__init__(message)
        self.message   = message
        self.algorithm = algorithm

    def __str__(self) -> str:
        if self.algorithm:
            return f"[{self.algorithm}] {self.message}"
        return self.message


class InvalidKeyLength(CipherError):
    """Key length violates the algorithm's key-length rule."""

    def __init__(self, algorithm: str, expected: str, actual: int):
        super().__init__(
            f"key must be {expected}, got {actual} bytes",
            algorithm=algorithm,
        )
        self.expected = expected
        self.actual   = actual


class BadPadding(CipherError):
    """
    Ciphertext is not block-aligned or its padding is inconsistent.

    After the fact a wrong key and corrupted input look the same.
    """


class InvalidEncoding(CipherError):
    """Text could not be mapped back to bytes (or bytes to text)."""


class UnsupportedAlgorithm(CipherError):
    """No profile or provider is registered for the requested algorithm."""


class TransformFailure(CipherError):
    """Any other rejection from the underlying primitive."""
