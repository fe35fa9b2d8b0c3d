"""Random password generation from a fixed printable alphabet."""

from __future__ import annotations

import logging
import secrets
import string

from credkit.config import get_settings
from credkit.core.errors import InvalidLengthError
from credkit.core.protocols import RandomSource

logger = logging.getLogger(__name__)

# 69 symbols; 2**32 % 69 != 0 leaves a negligible modulo bias.
ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits + "!@-_#$*"
WORD_BYTES = 4


class PasswordGenerator:
    """Maps independent random 32-bit words onto :data:`ALPHABET`."""

    def __init__(self, random_source: RandomSource = secrets.token_bytes):
        self._random = random_source

    def generate(self, length: int | None = None) -> str:
        """Generate a random password.

        Args:
            length: Number of characters. Defaults to the configured
                ``PASSWORD_DEFAULT_LENGTH`` (24).

        Raises:
            InvalidLengthError: If ``length`` is not a positive integer.
        """
        if length is None:
            length = get_settings().password_default_length
        if isinstance(length, bool) or not isinstance(length, int) or length <= 0:
            raise InvalidLengthError(
                f"Password length must be a positive integer, got {length!r}", length=length
            )

        raw = self._random(length * WORD_BYTES)
        words = (
            int.from_bytes(raw[i:i + WORD_BYTES], "little")
            for i in range(0, length * WORD_BYTES, WORD_BYTES)
        )
        password = "".join(ALPHABET[word % len(ALPHABET)] for word in words)

        logger.debug(f"Generated password of length {length}")
        return password


def generate_password(length: int | None = None) -> str:
    return PasswordGenerator().generate(length)
