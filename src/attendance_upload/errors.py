"""Exception hierarchy for the attendance upload workflow."""

from __future__ import annotations


class AttendanceUploadError(Exception):
    """Base class for every error raised by this package."""


class ValidationError(AttendanceUploadError):
    """A required form field is missing or an input file is not accepted."""


class ProtocolError(AttendanceUploadError):
    """The processing endpoint rejected the request."""

    def __init__(self, message: str, *, http_status: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status


class NetworkError(AttendanceUploadError):
    """The request could not be completed at all."""


TransportError = NetworkError
