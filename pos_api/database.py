from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from pos_api.config import get_settings

settings = get_settings()


def build_database_url(url: str, sslmode: Optional[str] = None) -> str:
    """
    Append `sslmode` to a PostgreSQL URL unless it already carries one.

    Other backends are returned untouched.
    """
    if not sslmode or not url.startswith("postgres") or "sslmode=" in url:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}sslmode={sslmode}"


def engine_options(url: str) -> dict:
    """Connection pool options for the given URL (SQLite manages its own pool)."""
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": settings.DB_POOL_SIZE,
        "max_overflow": settings.DB_MAX_OVERFLOW,
        "pool_pre_ping": True,
    }


DATABASE_URL = build_database_url(settings.DATABASE_URL, settings.DB_SSLMODE)

# Create SQLAlchemy engine with connection pooling
engine = create_engine(DATABASE_URL, **engine_options(DATABASE_URL))

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Base class for models
Base = declarative_base()


def get_db():
    """
    Dependency to get database session.
    Yields a database session and closes it after use.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
