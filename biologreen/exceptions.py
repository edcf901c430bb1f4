"""Exception hierarchy raised by the BioLogreen client."""

from __future__ import annotations


class BioLogreenError(RuntimeError):
    """Base class for every error raised by this package."""


class ConfigurationError(BioLogreenError):
    """Raised when the client is constructed with invalid settings."""


class ImageReadError(BioLogreenError):
    """Raised when the image file cannot be opened or fully read."""


class TransportError(BioLogreenError):
    """Raised when the request never produced a usable HTTP response."""


class RequestTimeoutError(TransportError):
    """Raised when the connect or read timeout is exceeded."""


class ApiError(BioLogreenError):
    """Raised when the BioLogreen API responds with a non-success status code."""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def __str__(self) -> str:
        return f"API Error (Status {self.status_code}): {self.message}"


class ResponseDecodeError(BioLogreenError):
    """Raised when a successful response body does not match the expected schema."""

    def __init__(self, message: str, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)
