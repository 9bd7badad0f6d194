"""
Database session management untuk UserAuth API.
Menggunakan SQLAlchemy dengan async support.
"""

import logging
import time

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    AsyncEngine,
    create_async_engine,
    async_sessionmaker
)
from sqlalchemy.pool import NullPool
from sqlalchemy import text

from app.core.config import settings
from app.db.base import Base

logger = logging.getLogger(__name__)


def create_engine() -> AsyncEngine:
    """
    Create async SQLAlchemy engine dengan konfigurasi sesuai environment.

    Returns:
        Configured AsyncEngine
    """
    engine_args = {
        "echo": settings.DEBUG,
        "pool_pre_ping": settings.DB_POOL_PRE_PING,
    }

    if settings.ENVIRONMENT == "test" or settings.is_sqlite:
        # NullPool untuk testing dan SQLite
        engine_args["poolclass"] = NullPool
    else:
        engine_args["pool_size"] = settings.DB_POOL_SIZE
        engine_args["max_overflow"] = settings.DB_MAX_OVERFLOW
        engine_args["pool_timeout"] = 30
        engine_args["pool_recycle"] = 3600

    return create_async_engine(settings.DATABASE_URL, **engine_args)


# Create global engine instance
engine = create_engine()

# Create session factory
SessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def init_db() -> None:
    """
    Initialize database.
    - Test connection
    - Create tables
    """
    # Import models agar terdaftar di metadata
    from app.models import user  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))
            logger.info("Database connection successful")
            await conn.run_sync(Base.metadata.create_all)

        logger.info("Database initialized successfully")

    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        raise


async def close_db() -> None:
    """
    Close database connections.
    Should be called on application shutdown.
    """
    await engine.dispose()
    logger.info("Database connections closed")


async def check_database_health(session: AsyncSession) -> dict:
    """
    Check database health dan return metrics.

    Args:
        session: Database session

    Returns:
        Dictionary dengan health metrics
    """
    health_info = {
        "connected": False,
        "response_time_ms": None,
        "error": None
    }

    try:
        start_time = time.time()
        result = await session.execute(text("SELECT 1"))
        result.scalar()
        response_time = (time.time() - start_time) * 1000

        health_info["connected"] = True
        health_info["response_time_ms"] = round(response_time, 2)

    except Exception as e:
        health_info["error"] = str(e)
        logger.error(f"Database health check failed: {e}")

    return health_info
