"""
Async database engine, session factory and declarative base.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from autodetail.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

engine_options = {"echo": settings.sql_echo, "future": True}
if settings.database_url.startswith("sqlite"):
    # SQLite file connections are cheap; don't pool them across event loops
    engine_options["poolclass"] = NullPool

engine = create_async_engine(settings.database_url, **engine_options)

SessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    autoflush=False,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Declarative base for all models."""


async def get_db():
    """
    Yield a database session for the duration of one request.
    """
    async with SessionLocal() as session:
        yield session


async def init_db():
    """Create all tables that don't exist yet."""
    # Import models so they register on Base.metadata
    import autodetail.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready (%s)", engine.url.render_as_string(hide_password=True))
