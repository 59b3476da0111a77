"""Database engine and session factory.

Vote transactions hold a row lock on their target for their whole duration,
so every connection is opened with a ``lock_timeout``. A request stuck
behind a lock fails instead of holding a pool slot indefinitely.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from agora.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL and pool limits

    Returns:
        Configured async engine
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_timeout=database.pool_timeout,
        connect_args={
            "server_settings": {"lock_timeout": str(database.lock_timeout_ms)}
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory used by the unit of work.

    Sessions only run Core statements, so nothing needs expiring after commit.
    """
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
