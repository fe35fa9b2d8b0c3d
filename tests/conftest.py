"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path
from dotenv import load_dotenv

from credkit.config import get_settings
from credkit.hashing import ScryptParams

# Load .env file at test collection time
load_dotenv(Path(__file__).parent.parent / ".env")


@pytest.fixture
def encryption_key() -> bytes:
    """A fixed 32-byte test key."""
    return b"a-key-with-exactly-32-characters"


@pytest.fixture
def fast_params() -> ScryptParams:
    """Cheap scrypt parameters for property-style tests."""
    return ScryptParams(n=1024, r=8, p=1)


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Make every test see a freshly loaded Settings."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


class FixedRandom:
    """Deterministic random source that hands out a fixed byte pattern."""

    def __init__(self, data: bytes):
        self.data = data
        self.calls: list[int] = []

    def __call__(self, size: int) -> bytes:
        self.calls.append(size)
        return (self.data * (size // max(len(self.data), 1) + 1))[:size]


@pytest.fixture
def fixed_random():
    """Factory for deterministic random sources."""
    return FixedRandom
