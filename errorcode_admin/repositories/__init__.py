from .base import BaseRepository
from .database import (
    SessionLocal,
    create_test_session,
    engine,
    get_session,
    init_db,
    unit_of_work,
)
from .error_code_repository import ErrorCodeRepository

__all__ = [
    "BaseRepository",
    "ErrorCodeRepository",
    "SessionLocal",
    "engine",
    "init_db",
    "get_session",
    "unit_of_work",
    "create_test_session",
]
