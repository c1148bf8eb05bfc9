"""
LegacyCipher — Cipher Verification Script

Run this to verify every cipher works correctly:
    python verify_ciphers.py
"""

import os
import sys
import time

from core.crypto_engine import (
    Algorithm, CipherError, CipherFactory, SymmetricCrypto, profile_for,
)

# A valid key for each algorithm, and a second one of the same shape
KEYS = {
    Algorithm.AES:        (b"correct horse", b"battery staple"),
    Algorithm.DES:        (b"12345678", b"87654321"),
    Algorithm.TRIPLE_DES: (b"123456789012345678901234",
                           b"abcdefghijklmnopqrstuvwx"),
    Algorithm.RC4:        (b"12345678", b"87654321"),
    Algorithm.RC5:        (b"12345678", b"87654321"),
}


def main() -> int:
    print("╔══════════════════════════════════════════════════╗")
    print("║    LegacyCipher — Cipher Verification Suite      ║")
    print("╚══════════════════════════════════════════════════╝")
    print()

    all_pass = True

    # ── Test 1: Basic encrypt/decrypt ────────────────────────────
    print("━━━ Test 1: Encrypt → Decrypt Round-Trip ━━━━━━━━━━")
    for algorithm, (key, _) in KEYS.items():
        profile = profile_for(algorithm)
        test_messages = [
            b"Hello, World!",
            b"",                                     # empty
            b"B" * profile.block_size,               # exactly one block
            b"\x00" * 100,                           # null bytes
            b"A" * 10_000,                           # 10 KB
        ]
        ok = True
        for msg in test_messages:
            try:
                ct = SymmetricCrypto.encrypt(algorithm, msg, key)
                if SymmetricCrypto.decrypt(algorithm, ct, key) != msg:
                    ok = False
                    break
            except CipherError as exc:
                print(f"  ❌ {algorithm.name:<12s} ERROR: {exc}")
                ok = False
                break

        if ok:
            print(f"  ✅ {algorithm.name:<12s} {profile.transformation}")
        else:
            print(f"  ❌ {algorithm.name:<12s} FAILED")
            all_pass = False

    print()

    # ── Test 2: Different keys cannot decrypt ────────────────────
    print("━━━ Test 2: Wrong Key Rejection ━━━━━━━━━━━━━━━━━━━")
    message = b"Secret message"
    for algorithm, (key1, key2) in KEYS.items():
        ct = SymmetricCrypto.encrypt(algorithm, message, key1)
        try:
            recovered = SymmetricCrypto.decrypt(algorithm, ct, key2)
        except CipherError as exc:
            print(f"  ✅ {algorithm.name:<12s} Wrong key rejected "
                  f"({type(exc).__name__})")
            continue
        if recovered == message:
            print(f"  ⚠️  {algorithm.name:<12s} Decrypted with wrong key!")
            all_pass = False
        else:
            print(f"  ✅ {algorithm.name:<12s} Wrong key gave garbage")

    print()

    # ── Test 3: Benchmark ────────────────────────────────────────
    print("━━━ Test 3: Performance Benchmark (1 MB) ━━━━━━━━━━")
    data_1mb = os.urandom(1024 * 1024)
    for algorithm, (key, _) in KEYS.items():
        t0  = time.perf_counter()
        ct  = SymmetricCrypto.encrypt(algorithm, data_1mb, key)
        t_enc = time.perf_counter() - t0

        t0 = time.perf_counter()
        SymmetricCrypto.decrypt(algorithm, ct, key)
        t_dec = time.perf_counter() - t0

        enc_speed = 1.0 / t_enc if t_enc > 0 else 9999
        dec_speed = 1.0 / t_dec if t_dec > 0 else 9999
        print(
            f"  {algorithm.name:<12s}  "
            f"enc={enc_speed:>7.1f} MB/s  "
            f"dec={dec_speed:>7.1f} MB/s"
        )

    print()
    print("━━━ Summary ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")
    print(f"  Total ciphers tested: {len(CipherFactory.list_ciphers())}")
    if all_pass:
        print("  Result:               🎉 ALL TESTS PASSED")
    else:
        print("  Result:               ⚠️  SOME TESTS FAILED")
    print()
    return 0 if all_pass else 1


if __name__ == "__main__":
    sys.exit(main())
