"""Error kinds raised by the account services.

Each kind is an HTTP exception so the application's JSON error handler can
render it directly.
"""

from werkzeug.exceptions import BadRequest, InternalServerError, NotFound, Unauthorized


class ValidationError(BadRequest):
    """Missing or malformed input."""


class EmailConflict(BadRequest):
    """The email address is already registered."""

    description = "A user with that email already exists."


class InvalidCredentials(Unauthorized):
    """Email/password or current password did not verify."""

    description = "Invalid email or password."


class UserNotFound(NotFound):
    """No user exists with the requested id."""

    description = "User not found."


class InternalError(InternalServerError):
    """Storage or hashing backend failure; details stay in the logs."""
