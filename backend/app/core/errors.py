"""
Error taxonomy for the API.

Every error raised by the service layer is an ``AppError`` subclass carrying
the HTTP status and a client-safe message. The handlers registered in
``app.main`` turn them into the ``{message, success: false}`` envelope.
"""

from typing import Any, Optional, Sequence


class AppError(Exception):
    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_payload(self) -> dict:
        return {"message": self.message, "success": False}


class ValidationError(AppError):
    status_code = 400
    message = "Invalid input"


class ConflictError(AppError):
    status_code = 400
    message = "Resource already exists"


class AuthenticationError(AppError):
    status_code = 400
    message = "Incorrect email or password."


class UnauthorizedError(AppError):
    status_code = 401
    message = "User not authenticated"


class NotFoundError(AppError):
    status_code = 404
    message = "Resource not found"


class UploadError(AppError):
    status_code = 500
    message = "Failed to upload file"


class InternalError(AppError):
    status_code = 500
    message = "Internal server error"


def first_error_message(errors: Sequence[dict[str, Any]]) -> str:
    """Pick a readable message out of a pydantic/FastAPI error list."""
    if not errors:
        return ValidationError.message
    msg = str(errors[0].get("msg") or ValidationError.message)
    prefix = "Value error, "
    if msg.startswith(prefix):
        msg = msg[len(prefix):]
    return msg
