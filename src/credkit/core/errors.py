class CredKitError(Exception):
    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.args[0]} (caused by: {self.cause})"
        return str(self.args[0])


class ConfigurationError(CredKitError):
    pass


class DerivationError(CredKitError):
    pass


class MalformedInputError(CredKitError):
    def __init__(
        self,
        message: str,
        field: str | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message, cause)
        self.field = field


class EncryptionError(CredKitError):
    pass


class DecryptionError(CredKitError):
    """Raised for any decryption failure.

    The message is identical for every failed check so callers cannot
    tell a padding error from a length or key error.
    """

    MESSAGE = "Unable to decrypt envelope"

    def __init__(self, message: str = MESSAGE, cause: Exception | None = None):
        super().__init__(message, cause)


class MalformedEnvelopeError(MalformedInputError, DecryptionError):
    def __init__(self, message: str = "Envelope is missing the separator"):
        super().__init__(message, field="envelope")


class InvalidLengthError(CredKitError):
    def __init__(self, message: str, length: object = None):
        super().__init__(message)
        self.length = length
