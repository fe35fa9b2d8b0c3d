"""Tests for logging configuration and secret redaction."""

import logging

import pytest

from credkit.cipher import TextCipher
from credkit.logging_config import SecretRedactionFilter, configure_logging, redact_secrets


class TestRedaction:
    """Tests for redact_secrets."""

    @pytest.mark.parametrize(
        "message,secret",
        [
            ("login password=hunter2 ok", "hunter2"),
            ("ENCRYPTION_KEY: abcdef", "abcdef"),
            ("token = xyz123", "xyz123"),
            ("secret=s3cr3t;", "s3cr3t"),
        ],
    )
    def test_masks_values(self, message, secret):
        """Test secret-looking values are masked."""
        redacted = redact_secrets(message)

        assert secret not in redacted
        assert "[REDACTED]" in redacted

    def test_leaves_plain_messages(self):
        """Test ordinary messages pass through unchanged."""
        assert redact_secrets("Encrypted 16 bytes") == "Encrypted 16 bytes"

    def test_filter_formats_args(self):
        """Test the filter renders args before masking."""
        record = logging.LogRecord(
            "credkit", logging.INFO, __file__, 1, "user %s password=%s", ("bob", "pw"), None
        )

        assert SecretRedactionFilter().filter(record) is True
        assert record.msg == "user bob password=[REDACTED]"
        assert record.args == ()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_attaches_filter_once(self):
        """Test repeated configuration does not stack filters."""
        configure_logging("DEBUG")
        configure_logging("DEBUG")

        for handler in logging.getLogger().handlers:
            filters = [f for f in handler.filters if isinstance(f, SecretRedactionFilter)]
            assert len(filters) <= 1


class TestOperationLogging:
    """Tests that operations never log secrets."""

    def test_cipher_logs_no_plaintext(self, caplog, encryption_key):
        """Test encrypt/decrypt debug logs omit plaintext and key."""
        cipher = TextCipher(encryption_key)

        with caplog.at_level(logging.DEBUG, logger="credkit"):
            cipher.decrypt(cipher.encrypt("Password42!"))

        assert caplog.records
        assert "Password42!" not in caplog.text
        assert encryption_key.decode("utf-8") not in caplog.text

    def test_decryption_reason_only_logged(self, caplog, encryption_key):
        """Test the failure reason goes to the log, not the exception."""
        cipher = TextCipher(encryption_key)

        with caplog.at_level(logging.DEBUG, logger="credkit"):
            with pytest.raises(Exception) as exc_info:
                cipher.decrypt("00:00")

        assert "iv length" in caplog.text
        assert "iv length" not in str(exc_info.value)
