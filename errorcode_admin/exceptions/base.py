from __future__ import annotations

from typing import Any, Dict, Optional


class ApplicationError(Exception):
    """Base class for error code service errors.

    ``error_code`` is the machine-readable identifier returned to API clients,
    ``details`` carries structured context for the failure.
    """

    def __init__(self, message: str, *, error_code: str = "INTERNAL_ERROR", details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "success": False,
            "error": self.message,
            "error_code": self.error_code,
            "details": self.details,
        }
