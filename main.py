"""
LegacyCipher — command-line entry point

Commands
────────
encrypt   – encrypt TEXT with ALG and KEY, print Base64 ciphertext
decrypt   – decrypt Base64 CIPHERTEXT with ALG and KEY, print plaintext
list      – show every algorithm with its key rule, mode and padding
demo      – run the sample round-trips for all five algorithms

AES ciphertext is raw bytes; at the terminal it is shown (and read back)
as Base64 so it can be copied around.

Exit codes: 0 ok, 1 cipher error, 2 bad usage.
"""

import sys
import argparse
import logging

from config.settings import Settings
from core.crypto_engine import (
    Algorithm, CipherError, CipherFactory, SymmetricCrypto, TextCodec,
    AESCrypto, DESCrypto, TripleDESCrypto, RC4Crypto, RC5Crypto,
)
from utils.logger import setup_logging

logger = logging.getLogger("LegacyCipher.Main")


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Commands
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def cmd_encrypt(args) -> int:
    ct = SymmetricCrypto.encrypt(args.algorithm, args.text, args.key)
    print(str(ct))
    return 0


def cmd_decrypt(args) -> int:
    algorithm = Algorithm.from_name(args.algorithm)
    if algorithm is Algorithm.AES:
        raw = TextCodec.decode(args.ciphertext)
        plain = SymmetricCrypto.decrypt(algorithm, raw, args.key)
    else:
        plain = SymmetricCrypto.decrypt(algorithm, args.ciphertext, args.key)
    print(TextCodec.bytes_to_text(plain))
    return 0


def cmd_list(args) -> int:
    print(f"  {'NAME':<12s} {'TRANSFORMATION':<26s} {'KEY':<34s} OUTPUT")
    for info in CipherFactory.get_all_info():
        print(
            f"  {info['name']:<12s} "
            f"{info['transformation']:<26s} "
            f"{info['key']:<34s} "
            f"{info['output']}"
        )
    return 0


def cmd_demo(args) -> int:
    data = "Hello, World!"
    samples = [
        (DESCrypto,       "12345678"),
        (TripleDESCrypto, "123456789012345678901234"),
        (RC4Crypto,       "12345678"),
        (RC5Crypto,       "12345678"),
    ]
    for util, key in samples:
        encrypted = util.encrypt(data, key)
        decrypted = util.decrypt(encrypted, key)
        print(f"  {util.ALGORITHM.name:<12s} {encrypted}  →  {decrypted}")

    encrypted = AESCrypto.encrypt("123456", "000")
    decrypted = AESCrypto.decrypt(encrypted, "000")
    print(
        f"  {'AES':<12s} {TextCodec.encode(encrypted)}  →  "
        f"{decrypted.decode(Settings.TEXT_ENCODING)}"
    )
    return 0


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
#  Entry Point
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="legacycipher",
        description=f"{Settings.APP_NAME} — legacy symmetric ciphers",
    )
    parser.add_argument("--log-level", default=Settings.LOG_LEVEL)
    parser.add_argument("--log-file", default=None)
    parser.add_argument(
        "--version", action="version",
        version=f"{Settings.APP_NAME} {Settings.APP_VERSION}",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_enc = sub.add_parser("encrypt", help="encrypt text")
    p_enc.add_argument("-a", "--algorithm",
                       default=Settings.DEFAULT_ALGORITHM)
    p_enc.add_argument("-k", "--key", required=True)
    p_enc.add_argument("text")
    p_enc.set_defaults(func=cmd_encrypt)

    p_dec = sub.add_parser("decrypt", help="decrypt Base64 ciphertext")
    p_dec.add_argument("-a", "--algorithm",
                       default=Settings.DEFAULT_ALGORITHM)
    p_dec.add_argument("-k", "--key", required=True)
    p_dec.add_argument("ciphertext")
    p_dec.set_defaults(func=cmd_decrypt)

    p_list = sub.add_parser("list", help="list algorithms")
    p_list.set_defaults(func=cmd_list)

    p_demo = sub.add_parser("demo", help="run sample round-trips")
    p_demo.set_defaults(func=cmd_demo)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)
    logger.debug("%s v%s: %s", Settings.APP_NAME,
                 Settings.APP_VERSION, args.command)
    try:
        return args.func(args)
    except CipherError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
