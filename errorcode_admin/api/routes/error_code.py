from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, Path, Query

from errorcode_admin.api.dependencies import get_error_code_service
from errorcode_admin.config import settings
from errorcode_admin.entities import ErrorCodeType
from errorcode_admin.exceptions import ErrorCodeNotFoundError
from errorcode_admin.models import (
    APIErrorResponse,
    APIResponse,
    ErrorCodeAutoGenerateRequest,
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
from errorcode_admin.services import ErrorCodeService

router = APIRouter(
    prefix="/error-codes",
    tags=["error-codes"],
    responses={
        400: {"model": APIErrorResponse},
        404: {"model": APIErrorResponse},
        409: {"model": APIErrorResponse},
    },
)


def get_error_code_filter(
    application_name: str | None = Query(default=None),
    code: int | None = Query(default=None),
    message: str | None = Query(default=None),
    type: ErrorCodeType | None = Query(default=None),
    created_from: datetime | None = Query(default=None),
    created_to: datetime | None = Query(default=None),
) -> ErrorCodeFilter:
    return ErrorCodeFilter(
        application_name=application_name,
        code=code,
        message=message,
        type=type,
        created_from=created_from,
        created_to=created_to,
    )


@router.post("", response_model=ErrorCodeCreateResponse)
def create_error_code(
    request: ErrorCodeCreateRequest, service: ErrorCodeService = Depends(get_error_code_service)
) -> ErrorCodeCreateResponse:
    error_code_id = service.create_error_code(request)
    return ErrorCodeCreateResponse(success=True, id=error_code_id)


@router.get("", response_model=ErrorCodePageResponse)
def get_error_code_page(
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=settings.app.default_page_size, ge=1, le=settings.app.max_page_size),
    query: ErrorCodeFilter = Depends(get_error_code_filter),
    service: ErrorCodeService = Depends(get_error_code_service),
) -> ErrorCodePageResponse:
    error_codes, total = service.get_error_code_page(query, page=page, limit=limit)
    return ErrorCodePageResponse(
        success=True,
        total=total,
        page=page,
        limit=limit,
        error_codes=[ErrorCodeItem.model_validate(item) for item in error_codes],
    )


@router.get("/list", response_model=ErrorCodeListResponse)
def get_error_code_list(
    query: ErrorCodeFilter = Depends(get_error_code_filter),
    service: ErrorCodeService = Depends(get_error_code_service),
) -> ErrorCodeListResponse:
    error_codes = service.get_error_code_list(query)
    return ErrorCodeListResponse(success=True, error_codes=[ErrorCodeItem.model_validate(item) for item in error_codes])


@router.post("/auto-generate", response_model=APIResponse)
def auto_generate_error_codes(
    request: ErrorCodeAutoGenerateRequest, service: ErrorCodeService = Depends(get_error_code_service)
) -> APIResponse:
    service.auto_generate_error_codes(request.error_codes)
    return APIResponse(success=True, message=f"Processed {len(request.error_codes)} error codes")


@router.get("/changes", response_model=ErrorCodeChangesResponse)
def get_changed_error_codes(
    application_name: str = Query(..., min_length=1),
    min_update_time: datetime | None = Query(default=None),
    service: ErrorCodeService = Depends(get_error_code_service),
) -> ErrorCodeChangesResponse:
    error_codes = service.get_changed_error_codes(application_name, min_update_time)
    return ErrorCodeChangesResponse(success=True, error_codes=error_codes)


@router.get("/{error_code_id}", response_model=ErrorCodeResponse)
def get_error_code(
    error_code_id: int = Path(..., description="Error code record identifier"),
    service: ErrorCodeService = Depends(get_error_code_service),
) -> ErrorCodeResponse:
    error_code = service.get_error_code(error_code_id)
    if error_code is None:
        raise ErrorCodeNotFoundError(error_code_id)
    return ErrorCodeResponse(success=True, record=ErrorCodeItem.model_validate(error_code))


@router.put("/{error_code_id}", response_model=APIResponse)
def update_error_code(
    request: ErrorCodeUpdateRequest,
    error_code_id: int = Path(..., description="Error code record identifier"),
    service: ErrorCodeService = Depends(get_error_code_service),
) -> APIResponse:
    service.update_error_code(error_code_id, request)
    return APIResponse(success=True, message="Error code updated successfully")


@router.delete("/{error_code_id}", response_model=APIResponse)
def delete_error_code(
    error_code_id: int = Path(..., description="Error code record identifier"),
    service: ErrorCodeService = Depends(get_error_code_service),
) -> APIResponse:
    service.delete_error_code(error_code_id)
    return APIResponse(success=True, message="Error code deleted successfully")
