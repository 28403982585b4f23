from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from errorcode_admin.entities import ErrorCodeType

from .base import APIResponse


class ErrorCodeCreateRequest(BaseModel):
    code: int
    application_name: str = Field(min_length=1, max_length=64)
    message: str = Field(min_length=1, max_length=512)
    memo: Optional[str] = Field(default=None, max_length=512)


class ErrorCodeUpdateRequest(ErrorCodeCreateRequest):
    pass


class ErrorCodeFilter(BaseModel):
    """Optional filters shared by the paged and unpaged listings."""

    application_name: Optional[str] = None
    code: Optional[int] = None
    message: Optional[str] = None
    type: Optional[ErrorCodeType] = None
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None


class ErrorCodeAutoGenerateItem(BaseModel):
    """An error code declared by an application, merged in by reconciliation."""

    code: int
    application_name: str = Field(min_length=1, max_length=64)
    message: str = Field(min_length=1, max_length=512)


class ErrorCodeAutoGenerateRequest(BaseModel):
    error_codes: List[ErrorCodeAutoGenerateItem] = Field(default_factory=list)


class ErrorCodeItem(BaseModel):
    id: int
    code: int
    application_name: str
    message: str
    type: ErrorCodeType
    memo: Optional[str]
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ErrorCodeChangeItem(BaseModel):
    code: int
    message: str
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ErrorCodeCreateResponse(APIResponse):
    id: int


class ErrorCodeResponse(APIResponse):
    record: ErrorCodeItem


class ErrorCodePageResponse(APIResponse):
    total: int
    page: int
    limit: int
    error_codes: List[ErrorCodeItem]


class ErrorCodeListResponse(APIResponse):
    error_codes: List[ErrorCodeItem]


class ErrorCodeChangesResponse(APIResponse):
    error_codes: List[ErrorCodeChangeItem]
