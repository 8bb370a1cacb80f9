"""
Custom exceptions for the Yandex Disk SDK.

Provider answers (including provider error bodies) are never raised: they
come back as ``Ok``/``Error`` results. The classes below cover what cannot be
expressed as a result: a client that cannot be built, a transport that cannot
be reached, or a success body of a shape the SDK does not understand.
"""


class YandexDiskError(Exception):
    """
    Root of the SDK exception tree.

    ``error_code`` is a short SDK tag such as ``NETWORK_ERROR``; it is
    unrelated to provider error codes, which only appear in ``Error`` results.
    """

    def __init__(self, message: str, error_code: str = None, details: dict = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def __str__(self):
        return f"[{self.error_code}] {self.message}" if self.error_code else self.message


class AuthenticationError(YandexDiskError):
    """Raised when no OAuth token is available to build a client."""

    def __init__(self, message: str = "OAuth token is required", **kwargs):
        super().__init__(message, error_code="AUTH_ERROR", **kwargs)


class ConfigurationError(YandexDiskError):
    """Raised when SDK or CLI configuration is invalid."""

    def __init__(self, message: str = "Invalid configuration", config_key: str = None, **kwargs):
        super().__init__(message, error_code="CONFIG_ERROR", **kwargs)
        self.config_key = config_key


class NetworkError(YandexDiskError):
    """Raised when the API host cannot be reached at all."""

    def __init__(self, message: str = "Network operation failed", **kwargs):
        super().__init__(message, error_code="NETWORK_ERROR", **kwargs)


class TimeoutError(YandexDiskError):
    """Raised when an API call times out at the transport level."""

    def __init__(self, message: str = "Operation timed out", timeout_seconds: float = None, **kwargs):
        super().__init__(message, error_code="TIMEOUT_ERROR", **kwargs)
        self.timeout_seconds = timeout_seconds


class ResponseFormatError(YandexDiskError):
    """Raised when a success body lacks a key the operation depends on."""

    def __init__(self, message: str = "Unexpected response format", status_code: int = None, **kwargs):
        super().__init__(message, error_code="RESPONSE_FORMAT_ERROR", **kwargs)
        self.status_code = status_code
