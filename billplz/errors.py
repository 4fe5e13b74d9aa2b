from typing import Optional


class BillplzError(Exception):
    """Base class for every error raised by the client."""


class TransportError(BillplzError):
    """The HTTP call could not complete (connect, TLS, timeout, protocol)."""

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"HTTP error: {cause}")


class ApiError(BillplzError):
    """Upstream answered with a structured error envelope."""

    def __init__(self, error_type: str, message: str, status_code: Optional[int] = None):
        self.error_type = error_type
        self.message = message
        self.status_code = status_code
        super().__init__(f"API error ({error_type}): {message}")


class ParseError(BillplzError):
    """
    The response body could not be decoded into the expected shape.
    status_code tells a malformed success body (2xx) apart from an
    unrecognised error body (anything else).
    """

    def __init__(self, cause: Exception, status_code: Optional[int] = None):
        self.cause = cause
        self.status_code = status_code
        super().__init__(f"JSON parse error (HTTP {status_code}): {cause}")


class BuilderConsumedError(BillplzError):
    """send() was called on a builder that has already been sent."""


class ConfigError(BillplzError):
    pass
