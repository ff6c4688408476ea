"""Domain errors raised by the service layer.

Each error maps onto one HTTP status in ``frontdesk.main``. None of them is
fatal: the request fails, the application keeps serving.
"""


class FrontDeskError(Exception):
    """Base class for domain errors."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FrontDeskError):
    """A required field is missing or a value is outside the accepted set."""

    status_code = 422


class NotFoundError(FrontDeskError):
    """A referenced patient, professional or appointment does not exist."""

    status_code = 404


class ConflictError(FrontDeskError):
    """The candidate booking overlaps an existing one."""

    status_code = 409

    def __init__(self, message: str, result=None):
        super().__init__(message)
        self.result = result


class PersistenceError(FrontDeskError):
    """The storage layer rejected a read or write."""

    status_code = 500
