import os
import logging
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)

Base = declarative_base()

DEFAULT_DB_URL = "sqlite:///./bet_tracker.db"


class DatabaseService:
    """
    Service for managing database connections and sessions.

    One instance is created by the application and passed to the
    repositories that need it.
    """

    def __init__(self, db_url: Optional[str] = None):
        # Priority: db_url param -> DATABASE_URL env -> sqlite fallback
        self.db_url = db_url or os.getenv("DATABASE_URL")

        if not self.db_url:
            self.db_url = DEFAULT_DB_URL
            logger.warning(f"DATABASE_URL not found. Falling back to SQLite: {self.db_url}")

        # Adjust URL for SQLAlchemy if it starts with postgres:// (old Heroku/Render format)
        if self.db_url.startswith("postgres://"):
            self.db_url = self.db_url.replace("postgres://", "postgresql://", 1)

        engine_kwargs = {"pool_pre_ping": True}
        if self.db_url.startswith("sqlite"):
            # SQLite doesn't support multiple threads by default in SQLAlchemy
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if self._is_in_memory(self.db_url):
                # Every session must see the same in-memory database
                engine_kwargs["poolclass"] = StaticPool

        try:
            self.engine = create_engine(self.db_url, **engine_kwargs)
            self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

            logger.info(f"DatabaseService initialized with {self.db_url.split('@')[-1] if '@' in self.db_url else 'local DB'}")

        except Exception as e:
            logger.error(f"Failed to initialize DatabaseService: {e}")
            raise e

    @staticmethod
    def _is_in_memory(db_url: str) -> bool:
        return db_url in ("sqlite://", "sqlite:///:memory:")

    def create_tables(self):
        """Create all tables defined in Base."""
        # Models register themselves on Base when imported
        from src.infrastructure.repositories import sql_repositories  # noqa: F401

        try:
            Base.metadata.create_all(bind=self.engine)
            logger.info("Database tables created successfully")
        except Exception as e:
            logger.error(f"Failed to create database tables: {e}")
            raise e

    def get_session(self):
        """Get a new database session."""
        return self.SessionLocal()

    def dispose(self):
        self.engine.dispose()
