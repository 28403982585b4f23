from __future__ import annotations

from .resource_not_found_error import ResourceNotFoundError


class ErrorCodeNotFoundError(ResourceNotFoundError):
    """Raised when an error code record id does not exist."""

    def __init__(self, error_code_id: int) -> None:
        super().__init__(f"Error code record {error_code_id} not found", error_code="ERROR_CODE_NOT_EXISTS")
        self.error_code_id = error_code_id
