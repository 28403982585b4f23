from .base import Base
from .enums import ErrorCodeType
from .error_code import ErrorCode

__all__ = [
    "Base",
    "ErrorCode",
    "ErrorCodeType",
]
