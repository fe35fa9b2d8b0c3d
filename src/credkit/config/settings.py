from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENCRYPTION_KEY_LENGTH = 32


class CipherSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    encryption_key: SecretStr = Field(default=SecretStr(""))

    @field_validator("encryption_key")
    @classmethod
    def validate_encryption_key(cls, v: SecretStr) -> SecretStr:
        raw = v.get_secret_value()
        if raw and len(raw.encode("utf-8")) != ENCRYPTION_KEY_LENGTH:
            raise ValueError(
                f"Encryption key must be exactly {ENCRYPTION_KEY_LENGTH} bytes"
            )
        return v

    @property
    def key_bytes(self) -> bytes:
        return self.encryption_key.get_secret_value().encode("utf-8")


class HashingSettings(BaseSettings):
    """Scrypt cost parameters. Defaults match the common N=2^14, r=8, p=1."""

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    scrypt_n: int = Field(default=16384, gt=1)
    scrypt_r: int = Field(default=8, gt=0)
    scrypt_p: int = Field(default=1, gt=0)
    salt_bytes: int = Field(default=8, gt=0)
    derived_key_length: int = Field(default=64, gt=0)

    @field_validator("scrypt_n")
    @classmethod
    def validate_scrypt_n(cls, v: int) -> int:
        if v & (v - 1):
            raise ValueError(f"scrypt_n must be a power of two: {v}")
        return v


class PasswordSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    password_default_length: int = Field(default=24, gt=0, le=1024)


class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Settings(BaseSettings):
    """Composed settings with shortcut property access."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cipher: CipherSettings = Field(default_factory=CipherSettings)
    hashing: HashingSettings = Field(default_factory=HashingSettings)
    passwords: PasswordSettings = Field(default_factory=PasswordSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @property
    def encryption_key(self) -> bytes:
        return self.cipher.key_bytes

    @property
    def has_encryption_key(self) -> bool:
        return bool(self.cipher.encryption_key.get_secret_value())

    @property
    def scrypt_n(self) -> int:
        return self.hashing.scrypt_n

    @property
    def scrypt_r(self) -> int:
        return self.hashing.scrypt_r

    @property
    def scrypt_p(self) -> int:
        return self.hashing.scrypt_p

    @property
    def salt_bytes(self) -> int:
        return self.hashing.salt_bytes

    @property
    def derived_key_length(self) -> int:
        return self.hashing.derived_key_length

    @property
    def password_default_length(self) -> int:
        return self.passwords.password_default_length

    @property
    def log_level(self) -> str:
        return self.logging.log_level


@lru_cache
def get_settings() -> Settings:
    return Settings()
