"""Database initialization script."""

from src.catalog.core.services.database.db_session import DbSessionService
from src.catalog.runtime.context import get_config


def init_db() -> None:
    """Create all database tables."""
    db_service = DbSessionService(get_config())
    try:
        db_service.create_all()
    finally:
        db_service.dispose()


if __name__ == "__main__":
    init_db()
