"""Configuration module for credkit."""

from credkit.config.settings import (
    ENCRYPTION_KEY_LENGTH,
    CipherSettings,
    HashingSettings,
    LoggingSettings,
    PasswordSettings,
    Settings,
    get_settings,
)

__all__ = [
    "ENCRYPTION_KEY_LENGTH",
    "CipherSettings",
    "HashingSettings",
    "LoggingSettings",
    "PasswordSettings",
    "Settings",
    "get_settings",
]
