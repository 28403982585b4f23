from .base import APIErrorResponse, APIResponse
from .error_code import (
    ErrorCodeAutoGenerateItem,
    ErrorCodeAutoGenerateRequest,
    ErrorCodeChangeItem,
    ErrorCodeChangesResponse,
    ErrorCodeCreateRequest,
    ErrorCodeCreateResponse,
    ErrorCodeFilter,
    ErrorCodeItem,
    ErrorCodeListResponse,
    ErrorCodePageResponse,
    ErrorCodeResponse,
    ErrorCodeUpdateRequest,
)

__all__ = [
    # Base
    "APIResponse",
    "APIErrorResponse",
    # Requests
    "ErrorCodeCreateRequest",
    "ErrorCodeUpdateRequest",
    "ErrorCodeFilter",
    "ErrorCodeAutoGenerateItem",
    "ErrorCodeAutoGenerateRequest",
    # Responses
    "ErrorCodeItem",
    "ErrorCodeChangeItem",
    "ErrorCodeCreateResponse",
    "ErrorCodeResponse",
    "ErrorCodePageResponse",
    "ErrorCodeListResponse",
    "ErrorCodeChangesResponse",
]
