"""AES-256-CBC text encryption with a static key and a per-call random IV."""

from __future__ import annotations

import logging
import secrets

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

from credkit.config import ENCRYPTION_KEY_LENGTH, get_settings
from credkit.core.errors import (
    ConfigurationError,
    DecryptionError,
    EncryptionError,
    MalformedInputError,
)
from credkit.core.models import CipherEnvelope
from credkit.core.protocols import RandomSource

logger = logging.getLogger(__name__)

IV_LENGTH = 16
BLOCK_SIZE_BITS = algorithms.AES.block_size


def _as_key_bytes(key: bytes | str) -> bytes:
    if isinstance(key, str):
        return key.encode("utf-8")
    return bytes(key)


class TextCipher:
    """Encrypts text to ``ivHex:ciphertextHex`` envelopes and back.

    The key is held for the lifetime of the instance and never mutated,
    so a single instance can be shared across threads.
    """

    def __init__(self, key: bytes | str, random_source: RandomSource = secrets.token_bytes):
        self._key = _as_key_bytes(key)
        self._random = random_source

    def encrypt(self, plaintext: str) -> str:
        """Encrypt UTF-8 text under a fresh IV.

        Raises:
            EncryptionError: If the key is not 32 bytes.
            MalformedInputError: If the plaintext is not encodable as UTF-8.
        """
        if len(self._key) != ENCRYPTION_KEY_LENGTH:
            raise EncryptionError(
                f"Encryption key must be {ENCRYPTION_KEY_LENGTH} bytes, got {len(self._key)}"
            )

        try:
            data = plaintext.encode("utf-8")
        except UnicodeEncodeError:
            raise MalformedInputError(
                "plaintext is not encodable as UTF-8", field="plaintext"
            ) from None

        iv = self._random(IV_LENGTH)
        padder = padding.PKCS7(BLOCK_SIZE_BITS).padder()
        padded = padder.update(data) + padder.finalize()

        encryptor = Cipher(algorithms.AES(self._key), modes.CBC(iv)).encryptor()
        ciphertext = encryptor.update(padded) + encryptor.finalize()

        logger.debug(f"Encrypted {len(ciphertext)} bytes")
        return CipherEnvelope(iv=iv, ciphertext=ciphertext).serialize()

    def decrypt(self, envelope: str) -> str:
        """Decrypt an envelope produced by :meth:`encrypt`.

        Every failure after the envelope is split raises the same
        :class:`DecryptionError`; the reason is only logged.

        Raises:
            MalformedEnvelopeError: If the envelope has no separator.
            DecryptionError: On invalid hex, IV or key length, block
                alignment, padding, or UTF-8.
        """
        parsed = CipherEnvelope.parse(envelope)

        reason = self._check(parsed)
        if reason is not None:
            logger.debug(f"Decryption rejected: {reason}")
            raise DecryptionError()

        decryptor = Cipher(algorithms.AES(self._key), modes.CBC(parsed.iv)).decryptor()
        padded = decryptor.update(parsed.ciphertext) + decryptor.finalize()

        unpadder = padding.PKCS7(BLOCK_SIZE_BITS).unpadder()
        try:
            data = unpadder.update(padded) + unpadder.finalize()
            plaintext = data.decode("utf-8")
        except ValueError:
            # UnicodeDecodeError is a ValueError too
            logger.debug("Decryption rejected: bad padding or encoding")
            raise DecryptionError() from None

        logger.debug(f"Decrypted {len(parsed.ciphertext)} bytes")
        return plaintext

    def _check(self, envelope: CipherEnvelope) -> str | None:
        if len(self._key) != ENCRYPTION_KEY_LENGTH:
            return "key length"
        if len(envelope.iv) != IV_LENGTH:
            return "iv length"
        block_bytes = BLOCK_SIZE_BITS // 8
        if not envelope.ciphertext or len(envelope.ciphertext) % block_bytes:
            return "ciphertext not block aligned"
        return None


def get_cipher() -> TextCipher:
    """Build a cipher from the configured ``ENCRYPTION_KEY``.

    Raises:
        ConfigurationError: If no key is configured.
    """
    settings = get_settings()
    if not settings.has_encryption_key:
        raise ConfigurationError("ENCRYPTION_KEY is not configured")
    return TextCipher(settings.encryption_key)


def encrypt(plaintext: str, key: bytes | str) -> str:
    return TextCipher(key).encrypt(plaintext)


def decrypt(envelope: str, key: bytes | str) -> str:
    return TextCipher(key).decrypt(envelope)
