"""Database engine and session factory used across the application."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlmodel import Session, SQLModel, create_engine

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.context import get_config


class DbSessionService:
    def __init__(self, config: ConfigData | None = None):
        """Initialize the shared database engine and session factory.

        The connection string is read once here; later configuration changes
        do not affect an existing service.
        """
        main_config = config or get_config()
        self._config = main_config
        db_config = main_config.database

        logger.info(
            "Configuring {} database engine for environment: {}",
            db_config.backend,
            main_config.app.environment,
        )
        engine_kwargs = self._get_engine_kwargs(main_config)
        self._engine = create_engine(db_config.url, **engine_kwargs)

        if main_config.app.environment == "production":
            logger.bind(
                pool_size=db_config.pool_size,
                max_overflow=db_config.max_overflow,
                pool_timeout=db_config.pool_timeout,
                pool_recycle=db_config.pool_recycle,
            ).info("Database engine initialized")

    @property
    def engine(self):
        return self._engine

    def _get_engine_kwargs(self, config: ConfigData) -> dict[str, Any]:
        db_config = config.database
        engine_kwargs: dict[str, Any] = {
            "echo": db_config.echo,
            "connect_args": self._get_connect_args(config),
        }

        if db_config.is_memory:
            # A private in-memory database lives in one connection; share it.
            engine_kwargs["poolclass"] = StaticPool
            return engine_kwargs

        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
                "pool_pre_ping": True,  # Validate connections before use
            }
        )
        return engine_kwargs

    def _get_connect_args(self, config: ConfigData) -> dict[str, Any]:
        """Get database-specific connection arguments."""
        connect_args: dict[str, Any] = {}

        if config.database.backend == "postgresql":
            connect_args.update(
                {
                    "application_name": f"{config.app.name}_{config.app.environment}",
                    "connect_timeout": 30,
                }
            )

        elif config.database.backend == "sqlite":
            connect_args.update(
                {
                    "check_same_thread": False,  # Sessions cross threadpool workers
                    "timeout": 20,  # Lock timeout
                }
            )

            if config.app.environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )

        return connect_args

    def create_all(self) -> None:
        """Create all database tables."""
        from src.catalog.entities.product import ProductTable  # noqa: F401

        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def get_session(self) -> Session:
        """Return a new SQLModel session bound to the shared engine."""
        return Session(
            self._engine,
            expire_on_commit=False,  # Entities are read after commit
            autoflush=True,
        )

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Context manager style helper for request handlers, scripts and tests."""
        db = self.get_session()
        try:
            yield db
            db.commit()
        except Exception as e:
            db.rollback()
            logger.bind(
                error_type=type(e).__name__,
                error_message=str(e),
            ).error("Database transaction failed")
            raise
        finally:
            db.close()

    def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            with self._engine.connect() as connection:
                connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.bind(
                error_type=type(e).__name__,
                error_message=str(e),
            ).error("Database health check failed")
            return False

    def dispose(self) -> None:
        """Close every pooled connection."""
        self._engine.dispose()
