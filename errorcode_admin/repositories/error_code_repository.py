from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional, Tuple

from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from errorcode_admin.entities import ErrorCode, ErrorCodeType
from .base import BaseRepository


class ErrorCodeRepository(BaseRepository[ErrorCode]):
    def __init__(self, session: Session) -> None:
        super().__init__(session, ErrorCode)

    def find_by_code(self, code: int) -> Optional[ErrorCode]:
        stmt: Select[ErrorCode] = select(ErrorCode).where(ErrorCode.code == code)
        result = self.session.execute(stmt)
        return result.scalar_one_or_none()

    def find_many_by_codes(self, codes: Iterable[int]) -> List[ErrorCode]:
        """Load every record whose code is in ``codes`` with a single query."""
        code_set = set(codes)
        if not code_set:
            return []
        stmt: Select[ErrorCode] = select(ErrorCode).where(ErrorCode.code.in_(code_set))
        return list(self.session.execute(stmt).scalars().all())

    def paginate(
        self,
        *,
        page: int,
        limit: int,
        application_name: Optional[str] = None,
        code: Optional[int] = None,
        message: Optional[str] = None,
        type: Optional[ErrorCodeType] = None,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None,
    ) -> Tuple[List[ErrorCode], int]:
        offset = (page - 1) * limit
        conditions = self._conditions(
            application_name=application_name,
            code=code,
            message=message,
            type=type,
            created_from=created_from,
            created_to=created_to,
        )
        stmt: Select[ErrorCode] = select(ErrorCode).where(*conditions)
        stmt = stmt.order_by(ErrorCode.id.desc()).offset(offset).limit(limit)
        items = list(self.session.execute(stmt).scalars().all())

        count_stmt = select(func.count()).select_from(ErrorCode).where(*conditions)
        total = int(self.session.execute(count_stmt).scalar_one())
        return items, total

    def find_list(
        self,
        *,
        application_name: Optional[str] = None,
        code: Optional[int] = None,
        message: Optional[str] = None,
        type: Optional[ErrorCodeType] = None,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None,
    ) -> List[ErrorCode]:
        conditions = self._conditions(
            application_name=application_name,
            code=code,
            message=message,
            type=type,
            created_from=created_from,
            created_to=created_to,
        )
        stmt: Select[ErrorCode] = select(ErrorCode).where(*conditions).order_by(ErrorCode.id.desc())
        return list(self.session.execute(stmt).scalars().all())

    def find_by_application_updated_after(
        self, application_name: str, min_update_time: Optional[datetime] = None
    ) -> List[ErrorCode]:
        """Records of one application updated strictly after ``min_update_time``.

        When ``min_update_time`` is None every record of the application is returned.
        """
        stmt: Select[ErrorCode] = select(ErrorCode).where(ErrorCode.application_name == application_name)
        if min_update_time is not None:
            stmt = stmt.where(ErrorCode.updated_at > min_update_time)
        stmt = stmt.order_by(ErrorCode.updated_at.asc(), ErrorCode.id.asc())
        return list(self.session.execute(stmt).scalars().all())

    @staticmethod
    def _conditions(
        *,
        application_name: Optional[str],
        code: Optional[int],
        message: Optional[str],
        type: Optional[ErrorCodeType],
        created_from: Optional[datetime],
        created_to: Optional[datetime],
    ) -> list:
        conditions = []
        if application_name:
            conditions.append(ErrorCode.application_name.contains(application_name, autoescape=True))
        if code is not None:
            conditions.append(ErrorCode.code == code)
        if message:
            conditions.append(ErrorCode.message.contains(message, autoescape=True))
        if type:
            conditions.append(ErrorCode.type == type)
        if created_from:
            conditions.append(ErrorCode.created_at >= created_from)
        if created_to:
            conditions.append(ErrorCode.created_at <= created_to)
        return conditions
