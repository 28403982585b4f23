import sys

from loguru import logger

from errorcode_admin.config import settings

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function} | {message}"


def configure_logging() -> None:
    """Configure application-wide logging."""
    logger.remove()
    logger.add(
        settings.app.log_dir / "app.log",
        rotation="10 MB",
        retention="14 days",
        enqueue=True,
        level=settings.app.log_level,
        format=LOG_FORMAT,
    )
    logger.add(sys.stderr, level=settings.app.log_level, format=LOG_FORMAT)


configure_logging()

__all__ = ["configure_logging", "logger"]
