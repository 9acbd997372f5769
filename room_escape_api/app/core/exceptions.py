"""
Domain errors raised by the service layer.

Every error carries a human readable ``message`` and the HTTP
``status_code`` of its category (not found, validation failure,
conflict, authentication, authorization).  The classes derive from
``ValueError`` so that callers which only care about "bad input" can
catch them generically.
"""


class RoomEscapeError(ValueError):
    """Base class for all errors surfaced to API clients."""

    status_code = 400

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(RoomEscapeError):
    status_code = 404


class ValidationFailureError(RoomEscapeError):
    status_code = 400


class ConflictError(RoomEscapeError):
    status_code = 409


class AuthenticationError(RoomEscapeError):
    status_code = 401


class ForbiddenError(RoomEscapeError):
    status_code = 403


class TimeNotFoundError(NotFoundError):
    def __init__(self, time_id: int) -> None:
        super().__init__(f"Reservation time {time_id} does not exist")


class ThemeNotFoundError(NotFoundError):
    def __init__(self, theme_id: int) -> None:
        super().__init__(f"Theme {theme_id} does not exist")


class MemberNotFoundError(NotFoundError):
    def __init__(self, member_id: int) -> None:
        super().__init__(f"Member {member_id} does not exist")


class PastDateError(ValidationFailureError):
    """Raised when a member tries to book a date before today."""


class DuplicateBookingError(ConflictError):
    """Raised when the requested theme/date/time slot is already taken."""


class DuplicateTimeError(ConflictError):
    pass


class DuplicateEmailError(ConflictError):
    pass


class TimeInUseError(ConflictError):
    pass


class ThemeInUseError(ConflictError):
    pass
