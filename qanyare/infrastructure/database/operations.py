"""
Database engine and session management
"""

import logging
import time
from typing import Any, Dict, Optional

from sqlalchemy import Engine, create_engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from qanyare.infrastructure.configuration.config import Settings, get_config
from qanyare.infrastructure.database.models import Base
from qanyare.infrastructure.logging.logging_config import PerformanceLogger
from qanyare.infrastructure.utilities.constants import (
    DatabaseSettings,
    PerformanceSettings,
)
from qanyare.infrastructure.utilities.exceptions import DatabaseError

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns the engine and session factory for the relational backend"""

    def __init__(self, config: Optional[Settings] = None):
        """Initialize database manager with configuration"""
        self.config = config or get_config()
        self._engine: Optional[Engine] = None
        self._session_factory: Optional[sessionmaker] = None
        self.logger = logging.getLogger(__name__)

    def get_engine(self) -> Engine:
        """Get database engine with proper configuration"""
        if self._engine is None:
            self._engine = self._create_engine()
        return self._engine

    def _create_engine(self) -> Engine:
        """Create database engine with environment-specific settings"""
        database_url = self.config.database_url
        engine_kwargs: Dict[str, Any] = {"pool_pre_ping": True}

        if self.config.uses_sqlite:
            engine_kwargs["connect_args"] = {
                "check_same_thread": False,
                "timeout": DatabaseSettings.SQLITE_TIMEOUT_SECONDS,
            }
            if self._is_in_memory_sqlite(database_url):
                # One shared connection so the in-memory database survives across sessions
                engine_kwargs["poolclass"] = StaticPool
        else:
            if self.config.is_production:
                pool_size = DatabaseSettings.PRODUCTION_POOL_SIZE
                max_overflow = DatabaseSettings.PRODUCTION_MAX_OVERFLOW
            else:
                pool_size = DatabaseSettings.DEVELOPMENT_POOL_SIZE
                max_overflow = DatabaseSettings.DEVELOPMENT_MAX_OVERFLOW
            engine_kwargs.update({
                "pool_size": pool_size,
                "max_overflow": max_overflow,
                "pool_recycle": DatabaseSettings.POOL_RECYCLE_SECONDS,
            })

        engine = create_engine(database_url, **engine_kwargs)
        self._setup_engine_events(engine)
        return engine

    @staticmethod
    def _is_in_memory_sqlite(database_url: str) -> bool:
        return database_url in ("sqlite://", "sqlite:///") or ":memory:" in database_url

    def _setup_engine_events(self, engine: Engine) -> None:
        """Log statements slower than the configured threshold"""

        @event.listens_for(engine, "before_cursor_execute")
        def before_cursor_execute(conn, cursor, statement, parameters, context, executemany):
            context._query_start_time = time.perf_counter()

        @event.listens_for(engine, "after_cursor_execute")
        def after_cursor_execute(conn, cursor, statement, parameters, context, executemany):
            total_time_ms = (time.perf_counter() - context._query_start_time) * 1000

            if total_time_ms > PerformanceSettings.SLOW_QUERY_THRESHOLD_MS:
                self.logger.warning(
                    "Slow query detected",
                    extra={
                        "query_time_ms": total_time_ms,
                        "statement": statement[:200] + "..." if len(statement) > 200 else statement,
                    },
                )

    def get_session_factory(self) -> sessionmaker:
        """Get session factory"""
        if self._session_factory is None:
            self._session_factory = sessionmaker(
                bind=self.get_engine(),
                expire_on_commit=False,
            )
        return self._session_factory

    def get_session(self) -> Session:
        """Get database session"""
        return self.get_session_factory()()

    def create_tables(self) -> None:
        """Create all database tables"""
        try:
            with PerformanceLogger("create_tables", self.logger):
                Base.metadata.create_all(self.get_engine())
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to create database tables: {e}", "create_tables") from e

    def drop_tables(self) -> None:
        """Drop all database tables"""
        try:
            with PerformanceLogger("drop_tables", self.logger):
                Base.metadata.drop_all(self.get_engine())
        except SQLAlchemyError as e:
            raise DatabaseError(f"Failed to drop database tables: {e}", "drop_tables") from e

    def health_check(self) -> Dict[str, Any]:
        """Perform database health check"""
        try:
            with self.get_session() as session:
                result = session.execute(text("SELECT 1")).scalar()
        except SQLAlchemyError as e:
            self.logger.error("Database health check failed: %s", e, exc_info=True)
            return {"status": "unhealthy", "error": type(e).__name__}

        if result == 1:
            return {"status": "healthy"}
        return {"status": "unhealthy", "error": "Health check query returned unexpected result"}

    def close(self) -> None:
        """Close database connections"""
        if self._engine:
            self._engine.dispose()
            self._engine = None
        self._session_factory = None
        self.logger.info("Database connections closed")
