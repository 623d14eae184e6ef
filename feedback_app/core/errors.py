# feedback_app/core/errors.py
"""
Typed failures raised by the store and auth layers.

Routes let these propagate; ``create_app`` installs a handler that turns any
``AppError`` into a ``{"detail": ...}`` JSON body with the matching status.
"""


class AppError(Exception):
    status_code: int = 500
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class AuthError(AppError):
    status_code = 401
    default_detail = "Not authenticated"


class PermissionDeniedError(AuthError):
    status_code = 403
    default_detail = "Admin access required"


class NotFoundError(AppError):
    status_code = 404
    default_detail = "Survey not found"
