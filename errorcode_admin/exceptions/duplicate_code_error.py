from __future__ import annotations

from .conflict_error import ConflictError


class DuplicateCodeError(ConflictError):
    """Raised when a create or update would reuse another record's code."""

    def __init__(self, code: int) -> None:
        super().__init__(
            f"Error code {code} already exists",
            error_code="ERROR_CODE_DUPLICATE",
            details={"code": code},
        )
        self.code = code
