import os


class Settings:
    """Centralised application configuration."""

    # ── application ──────────────────────────────────────────────
    APP_NAME    = "LegacyCipher"
    APP_VERSION = "1.0.0"

    # ── paths ────────────────────────────────────────────────────
    BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    LOG_FILE = os.path.join(BASE_DIR, "legacycipher.log")

    # ── crypto defaults ──────────────────────────────────────────
    DEFAULT_ALGORITHM = "AES"
    TEXT_ENCODING     = "utf-8"
    AES_KEY_BITS      = 128
    RC5_ROUNDS        = 12
    RC5_IV            = bytes(8)        # all-zero, shared by every call

    # ── logging ──────────────────────────────────────────────────
    LOG_LEVEL = os.environ.get("LEGACYCIPHER_LOG_LEVEL", "INFO")
