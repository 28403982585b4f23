from __future__ import annotations

from datetime import datetime
from typing import List, Optional, Sequence, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from errorcode_admin.entities import ErrorCode, ErrorCodeType
from errorcode_admin.exceptions import DuplicateCodeError, ValidationError
from errorcode_admin.models import (
    ErrorCodeAutoGenerateItem,
    ErrorCodeChangeItem,
    ErrorCodeCreateRequest,
    ErrorCodeFilter,
    ErrorCodeUpdateRequest,
)
from errorcode_admin.repositories import ErrorCodeRepository, unit_of_work
from errorcode_admin.utils import to_naive_utc
from errorcode_admin.utils.logger import logger

from .error_code_reconciler import ErrorCodeReconciler
from .error_code_validators import validate_code_duplicate, validate_error_code_exists


class ErrorCodeService:
    def __init__(self, session: Session) -> None:
        self.session = session
        self.repository = ErrorCodeRepository(session)
        self.reconciler = ErrorCodeReconciler(session)

    def create_error_code(self, request: ErrorCodeCreateRequest) -> int:
        validate_code_duplicate(self.repository, request.code)

        try:
            with unit_of_work(self.session):
                error_code = self.repository.create(
                    {
                        "code": request.code,
                        "application_name": request.application_name,
                        "message": request.message,
                        "memo": request.memo,
                        "type": ErrorCodeType.MANUAL_OPERATION,
                    }
                )
        except IntegrityError as exc:
            # Another writer took the code between the pre-check and the insert.
            raise DuplicateCodeError(request.code) from exc

        logger.info("Created error code {} ({}) as id {}", error_code.code, error_code.application_name, error_code.id)
        return error_code.id

    def update_error_code(self, error_code_id: int, request: ErrorCodeUpdateRequest) -> None:
        validate_error_code_exists(self.repository, error_code_id)
        validate_code_duplicate(self.repository, request.code, error_code_id)

        try:
            with unit_of_work(self.session):
                self.repository.update(
                    error_code_id,
                    {
                        "code": request.code,
                        "application_name": request.application_name,
                        "message": request.message,
                        "memo": request.memo,
                        "type": ErrorCodeType.MANUAL_OPERATION,
                    },
                )
        except IntegrityError as exc:
            raise DuplicateCodeError(request.code) from exc

        logger.info("Updated error code record {}", error_code_id)

    def delete_error_code(self, error_code_id: int) -> None:
        validate_error_code_exists(self.repository, error_code_id)
        with unit_of_work(self.session):
            self.repository.delete(error_code_id)
        logger.info("Deleted error code record {}", error_code_id)

    def get_error_code(self, error_code_id: int) -> Optional[ErrorCode]:
        return self.repository.find(error_code_id)

    def get_error_code_page(self, query: ErrorCodeFilter, *, page: int, limit: int) -> Tuple[List[ErrorCode], int]:
        return self.repository.paginate(page=page, limit=limit, **self._filter_kwargs(query))

    def get_error_code_list(self, query: ErrorCodeFilter) -> List[ErrorCode]:
        return self.repository.find_list(**self._filter_kwargs(query))

    def auto_generate_error_codes(self, declared: Sequence[ErrorCodeAutoGenerateItem]) -> None:
        self.reconciler.reconcile(declared)

    def get_changed_error_codes(
        self, application_name: str, min_update_time: Optional[datetime] = None
    ) -> List[ErrorCodeChangeItem]:
        """Error codes of ``application_name`` updated strictly after ``min_update_time``."""
        error_codes = self.repository.find_by_application_updated_after(application_name, to_naive_utc(min_update_time))
        return [ErrorCodeChangeItem.model_validate(error_code) for error_code in error_codes]

    @staticmethod
    def _filter_kwargs(query: ErrorCodeFilter) -> dict:
        created_from = to_naive_utc(query.created_from)
        created_to = to_naive_utc(query.created_to)
        if created_from and created_to and created_from > created_to:
            raise ValidationError("created_from must not be later than created_to", field="created_from")
        return {
            "application_name": query.application_name,
            "code": query.code,
            "message": query.message,
            "type": query.type,
            "created_from": created_from,
            "created_to": created_to,
        }
