"""Structured forms of the two colon-separated wire formats."""

from __future__ import annotations

from dataclasses import dataclass

from credkit.core.errors import DecryptionError, MalformedEnvelopeError, MalformedInputError

SEPARATOR = ":"


@dataclass(frozen=True)
class StoredHash:
    """A salted scrypt hash as persisted by callers.

    Attributes:
        salt: Hex salt string. Used as-is (UTF-8) as the scrypt salt input.
        derived_key: Raw derived key bytes.
    """

    salt: str
    derived_key: bytes

    def serialize(self) -> str:
        return f"{self.salt}{SEPARATOR}{self.derived_key.hex()}"

    @classmethod
    def parse(cls, value: str) -> "StoredHash":
        """Parse ``<salt>:<derivedKeyHex>``, splitting on the first separator.

        Raises:
            MalformedInputError: If the separator is missing or the key part
                is not valid hex.
        """
        salt, sep, key_hex = value.partition(SEPARATOR)
        if not sep:
            raise MalformedInputError("Stored hash is missing the separator", field="stored_hash")
        try:
            derived_key = bytes.fromhex(key_hex)
        except ValueError as e:
            raise MalformedInputError(
                "Stored hash key is not valid hex", field="stored_hash", cause=e
            ) from e
        return cls(salt=salt, derived_key=derived_key)

    def __str__(self) -> str:
        return self.serialize()


@dataclass(frozen=True)
class CipherEnvelope:
    """An IV and its AES-CBC ciphertext."""

    iv: bytes
    ciphertext: bytes

    def serialize(self) -> str:
        return f"{self.iv.hex()}{SEPARATOR}{self.ciphertext.hex()}"

    @classmethod
    def parse(cls, value: str) -> "CipherEnvelope":
        """Parse ``<ivHex>:<ciphertextHex>``.

        Only the first separator delimits the IV; everything after it is
        the ciphertext.

        Raises:
            MalformedEnvelopeError: If the separator is missing.
            DecryptionError: If either part is not valid hex.
        """
        iv_hex, sep, ciphertext_hex = value.partition(SEPARATOR)
        if not sep:
            raise MalformedEnvelopeError()
        try:
            return cls(iv=bytes.fromhex(iv_hex), ciphertext=bytes.fromhex(ciphertext_hex))
        except ValueError:
            raise DecryptionError() from None

    def __str__(self) -> str:
        return self.serialize()
