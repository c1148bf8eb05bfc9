"""
The transform step: profile + derived key + bytes → bytes.

Either the full output is produced or a typed ``CipherError`` is raised;
partial output is never returned.
"""

import enum
import logging

from .cipher_factory import CipherFactory
from .exceptions     import BadPadding, CipherError, TransformFailure
from .key_derivation import KeyMaterial
from .profiles       import CipherProfile

logger = logging.getLogger("LegacyCipher.Engine")


class Direction(enum.Enum):
    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


def transform(direction: Direction, profile: CipherProfile,
              key: KeyMaterial, data: bytes) -> bytes:
    cipher = CipherFactory.create(profile, key)
    try:
        if direction is Direction.ENCRYPT:
            out = cipher.encrypt(bytes(data))
        else:
            out = cipher.decrypt(bytes(data))
    except BadPadding as exc:
        exc.algorithm = profile.name
        logger.warning("%s decrypt failed: %s", profile.name, exc.message)
        raise
    except CipherError:
        raise
    except (ValueError, TypeError) as exc:
        logger.warning("%s %s failed: %s",
                       profile.name, direction.value, exc)
        raise TransformFailure(str(exc), algorithm=profile.name) from exc
    finally:
        del cipher

    logger.debug(
        "%s %s: %d → %d bytes",
        profile.transformation, direction.value, len(data), len(out),
    )
    return out


def encrypt(profile: CipherProfile, key: KeyMaterial, data: bytes) -> bytes:
    return transform(Direction.ENCRYPT, profile, key, data)


def decrypt(profile: CipherProfile, key: KeyMaterial, data: bytes) -> bytes:
    return transform(Direction.DECRYPT, profile, key, data)
