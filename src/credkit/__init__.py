"""credkit - password hashing, text encryption and password generation."""

__version__ = "0.1.0"

from credkit.cipher import TextCipher, decrypt, encrypt, get_cipher
from credkit.config import Settings, get_settings
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
from credkit.hashing import PasswordHasher, ScryptParams, hash_password, verify_password
from credkit.logging_config import configure_logging
from credkit.passwords import ALPHABET, PasswordGenerator, generate_password

__all__ = [
    "ALPHABET",
    "configure_logging",
    "decrypt",
    "encrypt",
    "generate_password",
    "get_cipher",
    "get_settings",
    "hash_password",
    "PasswordGenerator",
    "PasswordHasher",
    "ScryptParams",
    "Settings",
    "TextCipher",
    "verify_password",
    "ConfigurationError",
    "CredKitError",
    "DecryptionError",
    "DerivationError",
    "EncryptionError",
    "InvalidLengthError",
    "MalformedEnvelopeError",
    "MalformedInputError",
]
