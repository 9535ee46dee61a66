"""Database infrastructure setup."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from app.infrastructure.config.settings import settings

# Engine creation is deferred so the in-memory backend never needs DATABASE_URL
_engine = None
_SessionLocal = None


def get_engine() -> Engine:
    """
    Get or create the database engine.

    Returns:
        SQLAlchemy engine bound to DATABASE_URL

    Raises:
        ValueError: If DATABASE_URL is not configured
    """
    global _engine
    if _engine is None:
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required for database operations")
        connect_args = {}
        if settings.database_url.startswith("sqlite"):
            connect_args["check_same_thread"] = False
        _engine = create_engine(
            settings.database_url,
            pool_pre_ping=True,  # Verify connections before using
            echo=settings.debug_mode,  # Log SQL queries in debug mode
            connect_args=connect_args,
        )
    return _engine


def get_db_session() -> Session:
    """
    Get a database session.

    Returns:
        SQLAlchemy session instance
    """
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _SessionLocal()
