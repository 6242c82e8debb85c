"""Domain errors raised by the service layer.

Each error carries the HTTP status it maps to; ``app.main`` converts them into
``{"detail": message}`` responses so routers never build error bodies by hand.
"""


class AppError(Exception):
    """Base class for recoverable application errors."""

    status_code: int = 400
    default_message: str = "Request failed"

    def __init__(self, message: str | None = None, status_code: int | None = None):
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class UnauthorizedError(AppError):
    status_code = 401
    default_message = "Unauthorized"


class ForbiddenError(AppError):
    status_code = 403
    default_message = "Forbidden"


class ConflictError(AppError):
    """Raised when clocking in while a session is already active."""

    status_code = 400
    default_message = "You are already clocked in"


class NotFoundError(AppError):
    """Raised when the record an operation needs does not exist."""

    status_code = 400
    default_message = "No active session found"


class ValidationError(AppError):
    status_code = 400
    default_message = "Invalid request data"
