from __future__ import annotations

from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from errorcode_admin.repositories import get_session
from errorcode_admin.services import ErrorCodeService


def get_db() -> Generator[Session, None, None]:
    yield from get_session()


def get_error_code_service(db: Session = Depends(get_db)) -> ErrorCodeService:
    return ErrorCodeService(db)
