from __future__ import annotations

from .base import ApplicationError


class ResourceNotFoundError(ApplicationError):
    """Raised when a requested resource does not exist."""

    def __init__(self, message: str, *, error_code: str = "NOT_FOUND") -> None:
        super().__init__(message, error_code=error_code)
