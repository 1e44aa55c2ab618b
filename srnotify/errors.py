"""Error kinds raised by srnotify.

Every error carries a human-readable message suitable for printing as-is.
"""

from __future__ import annotations


class NotifyError(Exception):
    """Base class for srnotify failures."""


class ValidationError(NotifyError):
    """A required command line value is missing or invalid."""


class NetworkError(NotifyError):
    """Transport failure or timeout while talking to the API."""

    def __init__(self, cause: BaseException):
        super().__init__(f"sending request: {cause}")
        self.cause = cause


class APIError(NotifyError):
    """API answered with a non-success status."""

    def __init__(self, status_code: int, body: str):
        super().__init__(f"unexpected status code {status_code}: {body}")
        self.status_code = status_code
        self.body = body


class DecodeError(NotifyError):
    """Response body could not be decoded into a notification response."""

    def __init__(self, cause: BaseException):
        super().__init__(f"decoding response: {cause}")
        self.cause = cause


class PlatformError(NotifyError):
    """Operation is not supported on the running platform."""


class FormatError(NotifyError):
    """Output could not be serialized or written."""

    def __init__(self, cause: BaseException):
        super().__init__(f"formatting output: {cause}")
        self.cause = cause
