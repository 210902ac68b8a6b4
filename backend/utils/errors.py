"""Application errors rendered as the JSON error envelope."""


class AppError(Exception):
    """Base error: HTTP status code, short code and human-readable message."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class BadRequest(AppError):
    """Validation against referenced entities failed (wrong role, missing image)."""

    status_code = 400
    code = "BAD_REQUEST"


class NotFound(AppError):
    status_code = 404
    code = "NOT_FOUND"


class Conflict(AppError):
    status_code = 409
    code = "CONFLICT"
