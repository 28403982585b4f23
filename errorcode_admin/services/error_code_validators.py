"""Checks shared by the manual create, update and delete paths.

They take the repository explicitly so they can run against any session.
"""

from __future__ import annotations

from typing import Optional

from errorcode_admin.entities import ErrorCode
from errorcode_admin.exceptions import DuplicateCodeError, ErrorCodeNotFoundError
from errorcode_admin.repositories import ErrorCodeRepository


def validate_code_duplicate(repository: ErrorCodeRepository, code: int, exclude_id: Optional[int] = None) -> None:
    """Raise ``DuplicateCodeError`` if ``code`` belongs to a record other than ``exclude_id``.

    Pass the id of the record being updated as ``exclude_id`` so that a record
    keeping its own code does not count as a conflict.
    """
    existing = repository.find_by_code(code)
    if existing is None:
        return
    if exclude_id is None or existing.id != exclude_id:
        raise DuplicateCodeError(code)


def validate_error_code_exists(repository: ErrorCodeRepository, error_code_id: int) -> ErrorCode:
    error_code = repository.find(error_code_id)
    if error_code is None:
        raise ErrorCodeNotFoundError(error_code_id)
    return error_code
