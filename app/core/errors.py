class BookingError(Exception):
    """Base class for errors raised by the booking services."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(BookingError):
    """Referenced venue or booking does not exist."""

    status_code = 404


class ConflictError(BookingError):
    """Date already booked or blocked."""

    status_code = 409


class InvalidInputError(BookingError):
    """Validation failure on caller-supplied data."""

    status_code = 400
