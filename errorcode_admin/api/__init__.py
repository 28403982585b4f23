from .dependencies import get_db, get_error_code_service
from .routes import error_code

__all__ = [
    "get_db",
    "get_error_code_service",
    "error_code",
]
