from .base import ApplicationError
from .conflict_error import ConflictError
from .duplicate_code_error import DuplicateCodeError
from .error_code_not_found_error import ErrorCodeNotFoundError
from .resource_not_found_error import ResourceNotFoundError
from .validation_error import ValidationError

__all__ = [
    "ApplicationError",
    "ConflictError",
    "DuplicateCodeError",
    "ErrorCodeNotFoundError",
    "ResourceNotFoundError",
    "ValidationError",
]
