# app/adapters/outbound/persistence/database.py

"""
Async engine, session factory and the per-request session dependency.
"""

import logging
import ssl
from typing import AsyncGenerator, Any, Dict

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.adapters.configuration.config import Settings, settings

logger = logging.getLogger(__name__)


def build_engine(config: Settings) -> AsyncEngine:
    """
    Create the async engine.

    PostgreSQL gets a bounded pool (``DB_POOL_SIZE`` connections, recycled
    after ``DB_POOL_RECYCLE`` seconds). SQLite keeps SQLAlchemy's default pool.
    """
    url = make_url(config.DATABASE_URL)
    engine_kwargs: Dict[str, Any] = {"echo": config.DEBUG, "future": True}

    if url.get_backend_name() != "sqlite":
        engine_kwargs.update(
            pool_size=config.DB_POOL_SIZE,
            max_overflow=config.DB_MAX_OVERFLOW,
            pool_recycle=config.DB_POOL_RECYCLE,
            pool_pre_ping=True,
        )
        if config.DB_SSL:
            engine_kwargs["connect_args"] = {"ssl": ssl.create_default_context()}

    return create_async_engine(url, **engine_kwargs)


engine: AsyncEngine = build_engine(settings)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield one session per request."""
    async with AsyncSessionLocal() as session:
        yield session


async def check_database_connection(bind: AsyncEngine = engine) -> None:
    """Run ``SELECT 1``; raises if the database is unreachable."""
    async with bind.connect() as connection:
        await connection.execute(text("SELECT 1"))
    logger.info("Database connection established")


async def create_tables(bind: AsyncEngine = engine) -> None:
    from app.adapters.outbound.persistence.models import Base

    async with bind.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    logger.info("Database schema ensured")
