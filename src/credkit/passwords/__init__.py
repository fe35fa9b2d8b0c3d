"""Random password generation for credkit."""

from credkit.passwords.generator import ALPHABET, PasswordGenerator, generate_password

__all__ = [
    "ALPHABET",
    "PasswordGenerator",
    "generate_password",
]
