"""Password hashing for credkit."""

from credkit.hashing.hasher import (
    PasswordHasher,
    ScryptParams,
    hash_password,
    verify_password,
)

__all__ = [
    "PasswordHasher",
    "ScryptParams",
    "hash_password",
    "verify_password",
]
