"""Domain errors raised by the store and services.

Routers let these propagate; ``rayzum.main`` turns them into JSON responses
using ``status_code``.
"""


class RayzumError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RayzumError):
    """Missing or empty required field."""

    status_code = 400


class NotFoundError(RayzumError):
    status_code = 404


class ConflictError(RayzumError):
    """Create or update would duplicate another record's unique fields."""

    status_code = 409
