"""
Database engine and session factory construction with SQLAlchemy async
"""

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from core.config import Settings


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine with a small fixed-size connection pool"""
    url = settings.database_url
    options = {"echo": False}
    if not url.startswith("sqlite"):
        options["pool_size"] = settings.DB_POOL_SIZE
        options["pool_pre_ping"] = True

    return create_async_engine(url, **options)


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker:
    """Create session factory"""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False
    )
