"""
Domain errors for the Journey API.

Every client-facing failure is a JourneyError and is rendered by the
registered exception handler as ``{"message": ...}``. StorageError keeps the
underlying persistence detail apart from the message the client sees, and
NotificationError never leaves the background task that raised it.
"""

GENERIC_FAILURE_MESSAGE = "something went wrong, try again"


class JourneyError(Exception):
    """Base exception for all Journey errors."""

    status_code: int = 400

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidRequestError(JourneyError):
    """Malformed identifier or input that breaks a business rule."""

    pass


class NotFoundError(JourneyError):
    """The trip or participant referenced by the request does not exist."""

    pass


class ConflictError(JourneyError):
    """The requested state transition already happened."""

    pass


class StorageError(JourneyError):
    """Any persistence failure other than a missing row."""

    def __init__(self, detail: str, message: str = GENERIC_FAILURE_MESSAGE):
        super().__init__(message)
        self.detail = detail

    def __str__(self) -> str:
        return self.detail


class NotificationError(Exception):
    """Email could not be built or delivered."""

    pass
