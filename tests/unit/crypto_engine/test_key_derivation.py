import hashlib

import pytest

from core.crypto_engine import (
    Algorithm,
    InvalidKeyLength,
    KeyMaterial,
    UnsupportedAlgorithm,
    derive,
)


def test_aes_key_is_128_bits_and_reproducible() -> None:
    k1 = derive(Algorithm.AES, "000")
    k2 = derive(Algorithm.AES, "000")
    assert len(k1) == 16
    assert k1.key == k2.key
    assert derive(Algorithm.AES, "001").key != k1.key


@pytest.mark.parametrize("password", ["000", "", "a much longer passphrase ✓"])
def test_aes_key_matches_sha1prng_first_block(password: str) -> None:
    seed = password.encode("utf-8")
    expected = hashlib.sha1(hashlib.sha1(seed).digest()).digest()[:16]
    assert derive(Algorithm.AES, password).key == expected


def test_str_and_bytes_keys_are_equivalent() -> None:
    assert derive("des", "12345678").key == derive("des", b"12345678").key


@pytest.mark.parametrize(
    "algorithm, key",
    [
        (Algorithm.DES, b"12345678"),
        (Algorithm.TRIPLE_DES, b"123456789012345678901234"),
        (Algorithm.RC4, b"k"),
        (Algorithm.RC4, b"x" * 256),
        (Algorithm.RC4, b"x" * 300),
        (Algorithm.RC5, b"12345678"),
        (Algorithm.RC5, b"x" * 255),
        (Algorithm.RC5, b"x" * 256),
    ],
)
def test_valid_keys_pass_through_unchanged(algorithm: Algorithm, key: bytes) -> None:
    material = derive(algorithm, key)
    assert material.algorithm is algorithm
    assert material.key == key


@pytest.mark.parametrize(
    "algorithm, key",
    [
        (Algorithm.DES, b"1234567"),
        (Algorithm.DES, b"123456789"),
        (Algorithm.TRIPLE_DES, b"12345678"),
        (Algorithm.TRIPLE_DES, b"x" * 25),
        (Algorithm.RC4, b""),
        (Algorithm.RC5, b"1234567"),
    ],
)
def test_bad_key_lengths_rejected(algorithm: Algorithm, key: bytes) -> None:
    with pytest.raises(InvalidKeyLength) as excinfo:
        derive(algorithm, key)
    assert excinfo.value.actual == len(key)
    assert excinfo.value.algorithm == algorithm.name


def test_key_length_counts_encoded_bytes() -> None:
    # 4 characters, 8 UTF-8 bytes
    assert len(derive(Algorithm.DES, "éééé")) == 8


def test_invalid_key_error_does_not_leak_key() -> None:
    with pytest.raises(InvalidKeyLength) as excinfo:
        derive(Algorithm.DES, "secret!")
    assert "secret" not in str(excinfo.value)


def test_unknown_algorithm() -> None:
    with pytest.raises(UnsupportedAlgorithm):
        derive("idea", b"12345678")


def test_non_bytes_key_is_type_error() -> None:
    with pytest.raises(TypeError):
        derive(Algorithm.DES, 12345678)  # type: ignore[arg-type]


def test_key_material_wipe() -> None:
    with derive(Algorithm.DES, b"12345678") as material:
        assert material.key == b"12345678"
    assert material.key == bytes(8)
    assert "12345678" not in repr(material)


def test_key_material_is_not_shared() -> None:
    a = derive(Algorithm.RC4, b"shared-key")
    b = derive(Algorithm.RC4, b"shared-key")
    a.wipe()
    assert b.key == b"shared-key"
    assert isinstance(b, KeyMaterial)
