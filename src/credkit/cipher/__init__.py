"""Symmetric text encryption for credkit."""

from credkit.cipher.cipher import (
    IV_LENGTH,
    TextCipher,
    decrypt,
    encrypt,
    get_cipher,
)

__all__ = [
    "IV_LENGTH",
    "TextCipher",
    "decrypt",
    "encrypt",
    "get_cipher",
]
