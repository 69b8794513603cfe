from __future__ import annotations

from collections.abc import Generator

import pytest
from loguru import logger
from sqlmodel import Session

from src.catalog.core.services import DbSessionService
from src.catalog.runtime.config.config_data import (
    AppConfig,
    CacheConfig,
    ConfigData,
    DatabaseConfig,
)


class FakeClock:
    """Manually advanced monotonic clock for cache expiry tests."""

    def __init__(self, start: float = 0.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def test_config() -> ConfigData:
    """Configuration backed by a private in-memory SQLite database."""
    return ConfigData(
        app=AppConfig(environment="test"),
        database=DatabaseConfig(url="sqlite://", create_tables=True),
        cache=CacheConfig(ttl_seconds=300, max_size=128),
    )


@pytest.fixture
def db_service(test_config: ConfigData) -> Generator[DbSessionService]:
    """Database service with all tables created; each test gets a fresh database."""
    service = DbSessionService(test_config)
    service.create_all()
    try:
        yield service
    finally:
        service.dispose()


@pytest.fixture
def session(db_service: DbSessionService) -> Generator[Session]:
    """Create a fresh database session for testing."""
    db = db_service.get_session()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


@pytest.fixture
def log_messages() -> Generator[list[str]]:
    """Collect the messages logged through loguru during a test."""
    messages: list[str] = []
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="DEBUG"
    )
    try:
        yield messages
    finally:
        logger.remove(handler_id)
