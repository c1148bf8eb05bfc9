from .crypto_engine import (
    Algorithm, SymmetricCrypto, Ciphertext,
    AESCrypto, DESCrypto, TripleDESCrypto, RC4Crypto, RC5Crypto,
)

__all__ = [
    "Algorithm", "SymmetricCrypto", "Ciphertext",
    "AESCrypto", "DESCrypto", "TripleDESCrypto", "RC4Crypto", "RC5Crypto",
]
