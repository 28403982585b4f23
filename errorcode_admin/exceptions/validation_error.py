from __future__ import annotations

from typing import Any, Dict, Optional

from .base import ApplicationError


class ValidationError(ApplicationError):
    """Raised when request parameters are inconsistent with each other."""

    def __init__(self, message: str, *, field: Optional[str] = None, details: Optional[Dict[str, Any]] = None) -> None:
        merged = dict(details or {})
        if field:
            merged["field"] = field
        super().__init__(message, error_code="INVALID_PARAMETERS", details=merged)
