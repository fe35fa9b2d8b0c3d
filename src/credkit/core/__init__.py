"""Core abstractions and shared types for credkit."""

from credkit.core.errors import (
    ConfigurationError,
    CredKitError,
    DecryptionError,
    DerivationError,
    EncryptionError,
    InvalidLengthError,
    MalformedEnvelopeError,
    MalformedInputError,
)
from credkit.core.models import SEPARATOR, CipherEnvelope, StoredHash
from credkit.core.protocols import RandomSource

__all__ = [
    "CipherEnvelope",
    "RandomSource",
    "SEPARATOR",
    "StoredHash",
    "ConfigurationError",
    "CredKitError",
    "DecryptionError",
    "DerivationError",
    "EncryptionError",
    "InvalidLengthError",
    "MalformedEnvelopeError",
    "MalformedInputError",
]
