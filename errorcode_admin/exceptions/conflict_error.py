from __future__ import annotations

from typing import Any, Dict, Optional

from .base import ApplicationError


class ConflictError(ApplicationError):
    """Raised when an operation conflicts with current system state."""

    def __init__(self, message: str, *, error_code: str = "CONFLICT", details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, error_code=error_code, details=details)
