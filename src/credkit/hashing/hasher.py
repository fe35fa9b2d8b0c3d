"""Salted scrypt password hashing and constant-time verification."""

from __future__ import annotations

import asyncio
import hmac
import logging
import secrets
from dataclasses import dataclass

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.kdf.scrypt import Scrypt

from credkit.config import get_settings
from credkit.core.errors import ConfigurationError, DerivationError, MalformedInputError
from credkit.core.models import StoredHash
from credkit.core.protocols import RandomSource

logger = logging.getLogger(__name__)


def _encode(value: str, field: str) -> bytes:
    try:
        return value.encode("utf-8")
    except UnicodeEncodeError:
        # the codec message quotes the offending character of the secret
        raise MalformedInputError(f"{field} is not encodable as UTF-8", field=field) from None


@dataclass(frozen=True)
class ScryptParams:
    """Cost parameters for scrypt.

    Attributes:
        n: CPU/memory cost, a power of two greater than 1.
        r: Block size.
        p: Parallelization factor.
        salt_bytes: Random bytes per salt (hex-encoded, so twice as many chars).
        key_length: Derived key length in bytes.
    """
    n: int = 16384
    r: int = 8
    p: int = 1
    salt_bytes: int = 8
    key_length: int = 64

    def __post_init__(self) -> None:
        if self.n <= 1 or self.n & (self.n - 1):
            raise ConfigurationError(f"n must be a power of two greater than 1, got {self.n}")
        for name in ("r", "p", "salt_bytes", "key_length"):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} must be positive")

    @classmethod
    def from_settings(cls) -> "ScryptParams":
        settings = get_settings()
        return cls(
            n=settings.scrypt_n,
            r=settings.scrypt_r,
            p=settings.scrypt_p,
            salt_bytes=settings.salt_bytes,
            key_length=settings.derived_key_length,
        )


class PasswordHasher:
    """Hashes passwords as ``salt:derivedKeyHex`` and verifies them.

    Derivation is deliberately slow and blocks the calling thread; use
    :meth:`hash_async` / :meth:`verify_async` from an event loop.
    """

    def __init__(
        self,
        params: ScryptParams | None = None,
        random_source: RandomSource = secrets.token_bytes,
    ):
        self.params = params or ScryptParams.from_settings()
        self._random = random_source

    def _derive(self, password: str, salt: str) -> bytes:
        secret = _encode(password, "password")
        salt_bytes = _encode(salt, "stored_hash")
        try:
            kdf = Scrypt(
                salt=salt_bytes,
                length=self.params.key_length,
                n=self.params.n,
                r=self.params.r,
                p=self.params.p,
            )
            return kdf.derive(secret)
        except (ValueError, MemoryError, UnsupportedAlgorithm) as e:
            logger.error(f"Key derivation failed: {type(e).__name__}")
            raise DerivationError("Key derivation failed", cause=e) from e

    def hash(self, password: str) -> str:
        """Hash a password with a fresh random salt.

        Args:
            password: Plaintext password.

        Returns:
            Stored hash string ``<saltHex>:<derivedKeyHex>``.

        Raises:
            MalformedInputError: If the password is not encodable as UTF-8.
            DerivationError: If scrypt fails.
        """
        salt = self._random(self.params.salt_bytes).hex()
        stored = StoredHash(salt=salt, derived_key=self._derive(password, salt))
        logger.debug(f"Created password hash with {self.params.salt_bytes}-byte salt")
        return stored.serialize()

    def verify(self, password: str, stored_hash: str) -> bool:
        """Check a password against a stored hash in constant time.

        Args:
            password: Plaintext password to check.
            stored_hash: Value previously returned by :meth:`hash`.

        Returns:
            True only if the re-derived key matches byte for byte.

        Raises:
            MalformedInputError: If ``stored_hash`` has no separator or a
                non-hex key part, or either input is not
                encodable as UTF-8.
            DerivationError: If scrypt fails.
        """
        if not isinstance(stored_hash, str):
            raise MalformedInputError("Stored hash must be a string", field="stored_hash")
        expected = StoredHash.parse(stored_hash)
        derived = self._derive(password, expected.salt)

        if len(derived) != len(expected.derived_key):
            logger.debug("Stored hash key length does not match derived key length")
            return False

        matched = hmac.compare_digest(derived, expected.derived_key)
        logger.debug(f"Password verification {'succeeded' if matched else 'failed'}")
        return matched

    async def hash_async(self, password: str) -> str:
        return await asyncio.to_thread(self.hash, password)

    async def verify_async(self, password: str, stored_hash: str) -> bool:
        return await asyncio.to_thread(self.verify, password, stored_hash)


def hash_password(password: str) -> str:
    return PasswordHasher().hash(password)


def verify_password(password: str, stored_hash: str) -> bool:
    return PasswordHasher().verify(password, stored_hash)
