"""
Binary ↔ text boundary for ciphertext that has to travel as text.

Standard Base64 alphabet with padding (same output as
``java.util.Base64.getEncoder()``). Decoding is strict: characters
outside the alphabet or a bad length raise ``InvalidEncoding`` instead
of being silently dropped.
"""

import base64
import binascii

from config.settings import Settings
from .exceptions import InvalidEncoding


class TextCodec:

    @staticmethod
    def encode(data: bytes) -> str:
        return base64.b64encode(data).decode("ascii")

    @staticmethod
    def decode(text: str | bytes) -> bytes:
        if isinstance(text, str):
            try:
                text = text.encode("ascii")
            except UnicodeEncodeError:
                raise InvalidEncoding("Base64 text must be ASCII") from None
        try:
            return base64.b64decode(text, validate=True)
        except binascii.Error as exc:
            raise InvalidEncoding(f"malformed Base64 input: {exc}") from exc

    # ── plaintext text ↔ bytes ───────────────────────────────────
    @staticmethod
    def text_to_bytes(text: str | bytes,
                      encoding: str | None = None) -> bytes:
        if isinstance(text, (bytes, bytearray)):
            return bytes(text)
        return text.encode(encoding or Settings.TEXT_ENCODING)

    @staticmethod
    def bytes_to_text(data: bytes, encoding: str | None = None) -> str:
        encoding = encoding or Settings.TEXT_ENCODING
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as exc:
            raise InvalidEncoding(
                f"decrypted data is not valid {encoding} text"
            ) from exc
