"""Exceptions raised by the Navitia API adapter."""

from idfm_transit.domain.models.error_details import ErrorDetails


class NavitiaError(Exception):
    """Base exception for all Navitia adapter errors."""

    def to_error_details(self) -> ErrorDetails:
        """Describe this error for display."""
        return ErrorDetails(reason=str(self))


class TransportError(NavitiaError):
    """Raised when the service cannot be reached (DNS, timeout, connection reset)."""


class HttpError(NavitiaError):
    """Raised when the service answers with a non-success HTTP status."""

    def __init__(self, status: int, reason: str) -> None:
        super().__init__(f"API Error: {status} {reason}")
        self.status = status
        self.reason = reason

    def to_error_details(self) -> ErrorDetails:
        return ErrorDetails(status_code=self.status, reason=self.reason or str(self))


class UpstreamError(NavitiaError):
    """Raised when the service returns a well-formed error envelope."""

    def __init__(self, message: str, error_id: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_id = error_id

    def to_error_details(self) -> ErrorDetails:
        return ErrorDetails(reason=self.message, error_id=self.error_id)


class DecodeError(NavitiaError):
    """Raised when a response body is not the JSON shape we expect."""
