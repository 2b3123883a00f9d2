"""Database connection utilities."""
import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import Engine, create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.config.database import DatabaseConfig
from models.base import Base

logger = logging.getLogger(__name__)


class DatabaseManager:
    """Owns the engine and connection pool for one application instance.

    Created at startup, handed to request handlers through dependencies and
    disposed at shutdown.
    """

    def __init__(self, config: DatabaseConfig):
        """
        Initialize database manager.

        Args:
            config: Database configuration
        """
        self.config = config
        self._engine: Engine | None = None
        self._session_maker: sessionmaker | None = None

    def _engine_options(self) -> dict:
        options: dict = {"echo": self.config.DATABASE_ECHO}
        if self.config.is_sqlite:
            # Sessions are used from the threadpool
            options["connect_args"] = {"check_same_thread": False}
        else:
            options["pool_size"] = self.config.DATABASE_POOL_SIZE
            options["max_overflow"] = self.config.DATABASE_MAX_OVERFLOW
            options["pool_pre_ping"] = True
            options["connect_args"] = {"sslmode": self.config.DATABASE_SSL_MODE}
        return options

    @property
    def engine(self) -> Engine:
        """Get SQLAlchemy engine."""
        if self._engine is None:
            self._engine = create_engine(self.config.DATABASE_URL, **self._engine_options())
        return self._engine

    @property
    def session_maker(self) -> sessionmaker:
        """Get session maker."""
        if self._session_maker is None:
            self._session_maker = sessionmaker(
                autocommit=False,
                autoflush=False,
                expire_on_commit=False,
                bind=self.engine,
            )
        return self._session_maker

    def create_tables(self) -> None:
        """Create all tables that do not exist yet."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Created database tables")

    def drop_tables(self) -> None:
        """Drop all tables."""
        Base.metadata.drop_all(bind=self.engine)
        logger.info("Dropped all database tables")

    @contextmanager
    def session_scope(self) -> Iterator[Session]:
        """Check out a session for one unit of work.

        Commits on success, rolls back on error and always returns the
        connection to the pool.
        """
        session = self.session_maker()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def health_check(self) -> bool:
        """Check database connectivity."""
        try:
            with self.session_scope() as session:
                return session.execute(text("SELECT 1")).scalar() == 1
        except SQLAlchemyError as e:
            logger.error(f"Database health check failed: {e}")
            return False

    def close(self) -> None:
        """Close database connections."""
        if self._engine is not None:
            self._engine.dispose()
            logger.info("Database connections closed")
        self._engine = None
        self._session_maker = None
