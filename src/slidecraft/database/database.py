"""
Database configuration and session management
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from ..core.config import app_config


def to_async_url(database_url: str) -> str:
    """Use the aiosqlite driver for plain sqlite URLs"""
    if database_url.startswith("sqlite:///"):
        return database_url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    return database_url


def create_engine_for(database_url: str) -> AsyncEngine:
    async_url = to_async_url(database_url)
    return create_async_engine(
        async_url,
        echo=False,
        pool_pre_ping=True,
        connect_args={"timeout": 30} if "sqlite" in async_url else {}
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async_engine = create_engine_for(app_config.database_url)
AsyncSessionLocal = create_session_factory(async_engine)


async def init_db(engine: Optional[AsyncEngine] = None):
    """Create all tables"""
    from .models import Base

    engine = engine or async_engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
