"""
Application error taxonomy.

Services raise these; the handlers registered in `apps.core.handlers`
turn them into `{success: false, error: ...}` responses with the
matching HTTP status.
"""
from typing import Optional


class AppError(Exception):
    status_code = 500
    default_message = "Something went wrong!"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or invalid required fields."""
    status_code = 400
    default_message = "Invalid request data"


class Conflict(AppError):
    """Uniqueness violation, e.g. an email already in use."""
    status_code = 400
    default_message = "Resource already exists"


class NotFound(AppError):
    status_code = 404
    default_message = "Not found"


class Unauthenticated(AppError):
    status_code = 401
    default_message = "Authentication required"


class Forbidden(AppError):
    status_code = 403
    default_message = "Permission denied"
