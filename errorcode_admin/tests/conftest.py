from __future__ import annotations

import os
from pathlib import Path
from typing import Generator, List

import pytest

os.environ.setdefault("APP_CONFIG_FILE", str(Path(__file__).resolve().parent / "config.test.yaml"))

from sqlalchemy.orm import sessionmaker  # noqa: E402

from errorcode_admin.repositories import create_test_session  # noqa: E402
from errorcode_admin.utils.logger import logger  # noqa: E402


@pytest.fixture
def session_factory(tmp_path: Path) -> Generator[sessionmaker, None, None]:
    session_factory, engine = create_test_session(f"sqlite:///{tmp_path / 'error_codes.db'}")
    try:
        yield session_factory
    finally:
        engine.dispose()


@pytest.fixture
def log_messages() -> Generator[List[str], None, None]:
    """Collect loguru messages at WARNING and above."""
    messages: List[str] = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="WARNING")
    try:
        yield messages
    finally:
        logger.remove(handler_id)
