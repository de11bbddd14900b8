"""Directory and auth errors.

The service raises these; exception handlers in main.py map each one to a
fixed HTTP status and message.
"""

from typing import Optional


class DirectoryError(Exception):
    """Base class for all auth service errors."""

    status_code = 500
    default_message = "Internal server error."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(DirectoryError):
    """Required input is missing, blank or not valid text."""

    status_code = 400
    default_message = "Email and password are required."


class ConflictError(DirectoryError):
    """An account with the same email already exists."""

    status_code = 409
    default_message = "User already exists."


class AuthError(DirectoryError):
    """Unknown account or wrong password. The two are deliberately indistinguishable."""

    status_code = 401
    default_message = "Invalid credentials."


class NotFoundError(DirectoryError):
    status_code = 404
    default_message = "User not found"


class UnavailableError(DirectoryError):
    """The configured durable store could not be reached."""

    status_code = 503
    default_message = "Service temporarily unavailable."
