from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool
from medcase.core.config import settings
import logging
from typing import AsyncGenerator

logger = logging.getLogger(__name__)

def get_async_database_url(url: str) -> str:
    """
    Normalize a database URL to an async driver.
    """
    # If using postgresql:// or postgres://, convert to postgresql+asyncpg://
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    if url.startswith("postgres://"):
        return url.replace("postgres://", "postgresql+asyncpg://", 1)
    if url.startswith("sqlite://"):
        return url.replace("sqlite://", "sqlite+aiosqlite://", 1)
    return url

db_url = get_async_database_url(settings.DATABASE_URL)

if db_url.startswith("sqlite"):
    # SQLite connections are cheap and must not be shared across event loops
    engine = create_async_engine(
        db_url,
        echo=settings.SQL_ECHO,
        poolclass=NullPool,
    )
else:
    logger.info("Using async database connection with asyncpg")
    engine = create_async_engine(
        db_url,
        echo=settings.SQL_ECHO,
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        pool_recycle=settings.DB_POOL_RECYCLE,
    )

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,  # Don't expire objects after commit
    autoflush=False
)

Base = declarative_base()

# Dependency to use in FastAPI endpoints
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency that provides an async database session.
    """
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()

async def create_tables():
    # Importing the models registers them on Base.metadata
    import medcase.db.base  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

async def drop_tables():
    import medcase.db.base  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

async def initialize_db():
    """
    Initialize database connection and make sure the schema exists.
    """
    await create_tables()
    logger.info("Database connection initialized successfully")
    return True

async def close_db_connection():
    """
    Close database connection pool.
    """
    await engine.dispose()
    logger.info("Database connection pool closed")
