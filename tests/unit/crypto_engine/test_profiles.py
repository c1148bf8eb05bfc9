import dataclasses

import pytest

from core.crypto_engine import (
    Algorithm,
    CipherFactory,
    CipherProfile,
    KeyLengthRule,
    Mode,
    OutputEncoding,
    Padding,
    UnsupportedAlgorithm,
    all_profiles,
    profile_for,
)


def test_every_algorithm_has_a_profile() -> None:
    profiles = all_profiles()
    assert [p.algorithm for p in profiles] == list(Algorithm)
    for algorithm in Algorithm:
        assert profile_for(algorithm).algorithm is algorithm


@pytest.mark.parametrize(
    "algorithm, transformation",
    [
        (Algorithm.AES, "AES/ECB/PKCS5Padding"),
        (Algorithm.DES, "DES/ECB/PKCS5Padding"),
        (Algorithm.TRIPLE_DES, "DESede/ECB/PKCS5Padding"),
        (Algorithm.RC4, "RC4"),
        (Algorithm.RC5, "RC5/CBC/PKCS7Padding"),
    ],
)
def test_transformation_strings(algorithm: Algorithm, transformation: str) -> None:
    assert profile_for(algorithm).transformation == transformation


def test_only_aes_output_is_raw() -> None:
    for profile in all_profiles():
        expected = (
            OutputEncoding.RAW
            if profile.algorithm is Algorithm.AES
            else OutputEncoding.BASE64
        )
        assert profile.encoding is expected


def test_rc5_profile_uses_fixed_zero_iv() -> None:
    profile = profile_for(Algorithm.RC5)
    assert profile.mode is Mode.CBC
    assert profile.requires_iv
    assert profile.fixed_iv == bytes(8)
    assert profile.rounds == 12


def test_rc4_is_stream_without_padding() -> None:
    profile = profile_for(Algorithm.RC4)
    assert profile.is_stream
    assert profile.padding is Padding.NONE
    assert profile.block_size == 1


def test_profiles_are_immutable() -> None:
    profile = profile_for(Algorithm.DES)
    with pytest.raises(dataclasses.FrozenInstanceError):
        profile.block_size = 16  # type: ignore[misc]


@pytest.mark.parametrize(
    "name, expected",
    [
        ("aes", Algorithm.AES),
        ("DES", Algorithm.DES),
        ("3des", Algorithm.TRIPLE_DES),
        ("DESede", Algorithm.TRIPLE_DES),
        ("triple-des", Algorithm.TRIPLE_DES),
        ("TRIPLE_DES", Algorithm.TRIPLE_DES),
        ("arcfour", Algorithm.RC4),
        (" rc5 ", Algorithm.RC5),
    ],
)
def test_algorithm_from_name(name: str, expected: Algorithm) -> None:
    assert Algorithm.from_name(name) is expected
    assert profile_for(name).algorithm is expected


def test_unknown_algorithm_rejected() -> None:
    with pytest.raises(UnsupportedAlgorithm):
        Algorithm.from_name("blowfish")
    with pytest.raises(UnsupportedAlgorithm):
        profile_for("RC6")
    with pytest.raises(UnsupportedAlgorithm):
        profile_for(42)  # type: ignore[arg-type]


def test_key_length_rules() -> None:
    exact = KeyLengthRule(min_bytes=8, max_bytes=8)
    assert exact.allows(8)
    assert not exact.allows(7)
    assert not exact.allows(9)
    assert exact.describe() == "exactly 8 bytes"

    open_ended = KeyLengthRule(min_bytes=8)
    assert open_ended.allows(1000)
    assert not open_ended.allows(7)
    assert open_ended.describe() == "at least 8 bytes"

    derived = KeyLengthRule(derived_bytes=16)
    assert derived.is_derived
    assert derived.allows(0)
    assert "128 bits" in derived.describe()


def test_profile_with_iv_requires_iv_bytes() -> None:
    with pytest.raises(ValueError):
        CipherProfile(
            algorithm=Algorithm.RC5,
            key_rule=KeyLengthRule(min_bytes=8),
            mode=Mode.CBC,
            padding=Padding.PKCS7,
            block_size=8,
            encoding=OutputEncoding.BASE64,
            requires_iv=True,
            fixed_iv=b"\x00" * 4,
        )


def test_stream_profile_cannot_be_padded() -> None:
    with pytest.raises(ValueError):
        CipherProfile(
            algorithm=Algorithm.RC4,
            key_rule=KeyLengthRule(min_bytes=1),
            mode=Mode.STREAM,
            padding=Padding.PKCS7,
            block_size=1,
            encoding=OutputEncoding.BASE64,
        )


def test_factory_discovery() -> None:
    assert CipherFactory.is_initialized()
    assert CipherFactory.list_ciphers() == [a.name for a in Algorithm]
    assert CipherFactory.is_available("des")
    assert not CipherFactory.is_available("blowfish")

    info = CipherFactory.get_info(Algorithm.TRIPLE_DES)
    assert info["name"] == "TRIPLE_DES"
    assert info["key"] == "exactly 24 bytes"
    assert info["iv"] == "none"
    assert info["output"] == "base64"
    assert len(CipherFactory.get_all_info()) == len(Algorithm)


@pytest.mark.parametrize(
    "algorithm, minimum",
    [(Algorithm.RC4, 1), (Algorithm.RC5, 8)],
)
def test_variable_length_keys_have_no_upper_bound(
    algorithm: Algorithm, minimum: int
) -> None:
    rule = profile_for(algorithm).key_rule
    assert rule.max_bytes is None
    assert not rule.allows(minimum - 1)
    assert rule.allows(minimum)
    assert rule.allows(4096)
    assert rule.describe() == f"at least {minimum} byte{'s' if minimum > 1 else ''}"
